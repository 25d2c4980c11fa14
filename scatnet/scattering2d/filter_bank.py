import math

import numpy as np
from scipy.fft import fft2

from ..core.filter_bank import FilterBank, BOUNDARIES, FILTER_FORMATS
from ..errors import (ConfigurationError, IncompatibleShapeError,
                      UnsupportedModeError)
from .backend.numpy_backend import NumpyBackend2D
from .utils import compute_padding


def morlet_filter_bank_2d(shape, J, L=8, boundary='symm',
                          filter_format='fourier_multires'):
    """
        Builds in Fourier the Morlet filters used for the scattering transform.
        Each single filter is provided as a dictionary with the following keys:
        * 'levels' : the filter at each resolution
        * 'j' : scale
        * 'theta' : angle index, the angle being theta * pi / L
        * 'xi' : central frequency, in radians
        * 'sigma' : spatial width of the Gaussian envelope
        * 'bandwidth' : width of the band at half maximum, in radians

        Parameters
        ----------
        shape : tuple of 2 ints
            spatial support of the input
        J : int
            logscale of the scattering
        L : int, optional
            number of angles used for the wavelet transform
        boundary : str, optional
            'symm' (default), 'zero' or 'per'
        filter_format : str, optional
            'fourier_multires' (default) or 'fourier'

        Returns
        -------
        filters : FilterBank
            J * L wavelets ordered by scale then angle, with Q = 1.

        Notes
        -----
        The design of the filters is optimized for the value L = 8.
    """
    M, N = shape
    if J < 1:
        raise ConfigurationError('J must be >= 1, got {}'.format(J))
    if L < 1:
        raise ConfigurationError('L must be >= 1, got {}'.format(L))
    if 2 ** J > min(M, N):
        raise ConfigurationError('The smallest dimension should be larger '
                                 'than 2^J.')
    if boundary not in BOUNDARIES:
        raise UnsupportedModeError("Unknown boundary '{}'.".format(boundary))
    if filter_format not in FILTER_FORMATS:
        raise UnsupportedModeError(
            "Unknown filter format '{}'.".format(filter_format))

    if boundary == 'per':
        if M % 2 ** J or N % 2 ** J:
            raise IncompatibleShapeError(
                'Periodic images must have sides divisible by 2^J = {}, '
                'got {}.'.format(2 ** J, (M, N)))
        M_padded, N_padded = M, N
    else:
        M_padded, N_padded = compute_padding(M, N, J)

    def levels_of(filter_f, n_levels):
        if filter_format == 'fourier':
            n_levels = 1
        return [NumpyBackend2D.periodize_filter(filter_f, res)
                for res in range(n_levels)]

    psi = []
    for j in range(J):
        for theta in range(L):
            sigma = 0.8 * 2 ** j
            psi_signal = morlet_2d(M_padded, N_padded, sigma,
                (int(L-L/2-1)-theta) * np.pi / L,
                3.0 / 4.0 * np.pi /2**j, 4.0/L)
            psi_signal_fourier = np.real(fft2(psi_signal))
            # drop the imaginary part, it is zero anyway
            psi.append({'levels': levels_of(psi_signal_fourier, j + 1),
                        'j': j,
                        'theta': theta,
                        'xi': 3.0 / 4.0 * np.pi / 2 ** j,
                        'sigma': sigma,
                        'bandwidth': compute_bandwidth(sigma)})

    sigma_phi = 0.8 * 2 ** (J - 1)
    phi_signal = gabor_2d(M_padded, N_padded, sigma_phi, 0, 0)
    phi_signal_fourier = np.real(fft2(phi_signal))
    phi = {'levels': levels_of(phi_signal_fourier, J),
           'j': J,
           'xi': 0.,
           'sigma': sigma_phi,
           'bandwidth': compute_bandwidth(sigma_phi)}

    return FilterBank(phi=phi, psi=tuple(psi), Q=1, size=(M_padded, N_padded),
                      boundary=boundary, filter_format=filter_format, L=L)


def compute_bandwidth(sigma):
    """Full width at half maximum, in radians, of the frequency response of
    a Gaussian envelope of spatial width sigma."""
    return 2 * math.sqrt(2 * math.log(2)) / sigma


def morlet_2d(M, N, sigma, theta, xi, slant=0.5, offset=0):
    """
        Computes a 2D Morlet filter.
        A Morlet filter is the sum of a Gabor filter and a low-pass filter
        to ensure that the sum has exactly zero mean in the temporal domain.
        It is defined by the following formula in space:
        psi(u) = g_{sigma}(u) (e^(i xi^T u) - beta)
        where g_{sigma} is a Gaussian envelope, xi is a frequency and beta is
        the cancelling parameter.

        Parameters
        ----------
        M, N : int
            spatial sizes
        sigma : float
            bandwidth parameter
        xi : float
            central frequency (in [0, 1])
        theta : float
            angle in [0, pi]
        slant : float, optional
            parameter which guides the elipsoidal shape of the morlet
        offset : int, optional
            offset by which the signal starts

        Returns
        -------
        morlet_fft : ndarray
            numpy array of size (M, N)
    """
    wv = gabor_2d(M, N, sigma, theta, xi, slant, offset)
    wv_modulus = gabor_2d(M, N, sigma, theta, 0, slant, offset)
    K = np.sum(wv) / np.sum(wv_modulus)

    mor = wv - K * wv_modulus
    return mor


def gabor_2d(M, N, sigma, theta, xi, slant=1.0, offset=0):
    """
        Computes a 2D Gabor filter.
        A Gabor filter is defined by the following formula in space:
        psi(u) = g_{sigma}(u) e^(i xi^T u)
        where g_{sigma} is a Gaussian envelope and xi is a frequency.

        Parameters
        ----------
        M, N : int
            spatial sizes
        sigma : float
            bandwidth parameter
        xi : float
            central frequency (in [0, 1])
        theta : float
            angle in [0, pi]
        slant : float, optional
            parameter which guides the elipsoidal shape of the morlet
        offset : int, optional
            offset by which the signal starts

        Returns
        -------
        morlet_fft : ndarray
            numpy array of size (M, N)
    """
    gab = np.zeros((M, N), np.complex128)
    R = np.array([[np.cos(theta), -np.sin(theta)], [np.sin(theta), np.cos(theta)]])
    R_inv = np.array([[np.cos(theta), np.sin(theta)], [-np.sin(theta), np.cos(theta)]])
    D = np.array([[1, 0], [0, slant * slant]])
    curv = np.dot(R, np.dot(D, R_inv)) / ( 2 * sigma * sigma)

    for ex in [-2, -1, 0, 1, 2]:
        for ey in [-2, -1, 0, 1, 2]:
            [xx, yy] = np.mgrid[offset + ex * M:offset + M + ex * M, offset + ey * N:offset + N + ey * N]
            arg = -(curv[0, 0] * np.multiply(xx, xx) + (curv[0, 1] + curv[1, 0]) * np.multiply(xx, yy) + curv[
                1, 1] * np.multiply(yy, yy)) + 1.j * (xx * xi * np.cos(theta) + yy * xi * np.sin(theta))
            gab += np.exp(arg)

    norm_factor = (2 * np.pi * sigma * sigma / slant)
    gab /= norm_factor

    return gab


__all__ = ['morlet_filter_bank_2d', 'compute_bandwidth', 'morlet_2d',
           'gabor_2d']
