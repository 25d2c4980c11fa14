import numpy as np

from ..scattering1d.filter_bank import morlet_filter_bank_1d


def angular_filter_bank(L, J=3):
    """
    Builds the filters applied along the orientation axis of
    roto-translation scattering.

    The L orientations of a 2-D filter bank sample [0, pi). Orientation
    stacks are extended to [0, 2 pi) by the half-turn symmetry of the
    modulus coefficients, so the filters are periodic 1-D Morlet filters
    over 2 * L samples, with Q = 1 and no constant-bandwidth wavelets.

    Parameters
    ----------
    L : int
        number of orientations of the spatial filter bank
    J : int, optional
        scale of the angular low-pass filter. Defaults to 3.

    Returns
    -------
    filters_rot : FilterBank
    """
    return morlet_filter_bank_1d(2 * L, J, Q=1, P=0, boundary='per',
                                 filter_format='fourier_multires')


def reflect_filter(filter_f):
    """Frequency response of a 2-D filter rotated by pi.

    Rotating a filter by pi in space maps psi(u) to psi(-u), that is
    psi_hat(omega) to psi_hat(-omega).
    """
    return np.roll(np.flip(filter_f, axis=(-2, -1)), 1, axis=(-2, -1))


__all__ = ['angular_filter_bank', 'reflect_filter']
