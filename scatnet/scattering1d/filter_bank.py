import numpy as np
import math
import warnings
from scipy.fft import ifft

from ..core.filter_bank import FilterBank, BOUNDARIES, FILTER_FORMATS
from ..errors import ConfigurationError, UnsupportedModeError
from .backend.numpy_backend import NumpyBackend1D


def adaptive_choice_P(sigma, eps=1e-7):
    """
    Adaptive choice of the value of the number of periods in the frequency
    domain used to compute the Fourier transform of a Morlet wavelet.

    This function considers a Morlet wavelet defined as the sum
    of
    * a Gabor term hat psi(omega) = hat g_{sigma}(omega - xi)
    where 0 < xi < 1 is some frequency and g_{sigma} is
    the Gaussian window defined in Fourier by
    hat g_{sigma}(omega) = e^{-omega^2/(2 sigma^2)}
    * a low pass term \\hat \\phi which is proportional to \\hat g_{\\sigma}.

    If \\sigma is too large, then these formula will lead to discontinuities
    in the frequency interval [0, 1] (which is the interval used by numpy.fft).
    We therefore choose a larger integer P >= 1 such that at the boundaries
    of the Fourier transform of both filters on the interval [1-P, P], the
    magnitude of the entries is below the required machine precision.

    Parameters
    ----------
    sigma: float
        Positive number controlling the bandwidth of the filters
    eps : float, optional
        Positive number containing required precision. Defaults to 1e-7

    Returns
    -------
    P : int
        integer controlling the number of periods used to ensure the
        periodicity of the final Morlet filter in the frequency interval
        [0, 1[. The value of P will lead to the use of the frequency
        interval [1-P, P[, so that there are 2*P - 1 periods.
    """
    val = math.sqrt(-2 * (sigma**2) * math.log(eps))
    P = int(math.ceil(val + 1))
    return P


def morlet_1d(N, xi, sigma):
    """
    Computes the Fourier transform of a Morlet or Gauss filter.
    A Morlet filter is the sum of a Gabor filter and a low-pass filter
    to ensure that the sum has exactly zero mean in the temporal domain.
    It is defined by the following formula in time:
    psi(t) = g_{sigma}(t) (e^{i xi t} - kappa)
    where g_{sigma} is a Gaussian envelope, xi is a frequency and kappa is
    a corrective term which ensures that psi has a null average.
    If xi is None, the definition becomes: phi(t) = g_{sigma}(t)

    Parameters
    ----------
    N : int
        size of the temporal support
    xi : float or None
        center frequency in (0, 1]
    sigma : float
        bandwidth parameter

    Returns
    -------
    filter_f : array_like
        numpy array of size (N,) containing the Fourier transform of the Morlet
        filter at the frequencies given by np.fft.fftfreq(N).
    """
    # Find the adequate value of P<=5
    P = min(adaptive_choice_P(sigma), 5)
    # Define the frequencies over [1-P, P[
    freqs = np.arange((1 - P) * N, P * N, dtype=float) / float(N)
    if P == 1:
        # in this case, make sure that there is continuity around 0
        # by using the interval [-0.5, 0.5]
        freqs_low = np.fft.fftfreq(N)
    elif P > 1:
        freqs_low = freqs
    low_pass_f = np.exp(-(freqs_low**2) / (2 * sigma**2))
    low_pass_f = low_pass_f.reshape(2 * P - 1, -1).mean(axis=0)
    if xi:
        # define the gabor at freq xi and the low-pass, both of width sigma
        gabor_f = np.exp(-(freqs - xi)**2 / (2 * sigma**2))
        # discretize in signal <=> periodize in Fourier
        gabor_f = gabor_f.reshape(2 * P - 1, -1).mean(axis=0)
        # find the summation factor to ensure that morlet_f[0] = 0.
        kappa = gabor_f[0] / low_pass_f[0]
        filter_f = gabor_f - kappa * low_pass_f # psi (band-pass) case
    else:
        filter_f = low_pass_f # phi (low-pass) case
    filter_f /= np.abs(ifft(filter_f)).sum()
    return filter_f


def gauss_1d(N, sigma):
    return morlet_1d(N, xi=None, sigma=sigma)


def compute_sigma_psi(xi, Q, r=math.sqrt(0.5)):
    """
    Computes the frequential width sigma for a Morlet filter of frequency xi
    belonging to a family with Q wavelets.

    The frequential width is adapted so that the intersection of the
    frequency responses of the next filter occurs at a r-bandwidth specified
    by r, to ensure a correct coverage of the whole frequency axis.

    Parameters
    ----------
    xi : float
        frequency of the filter in [0, 1]
    Q : int
        number of filters per octave, Q is an integer >= 1
    r : float, optional
        Positive parameter defining the bandwidth to use.
        Should be < 1. We recommend keeping the default value.
        The larger r, the larger the filters in frequency domain.

    Returns
    -------
    sigma : float
        frequential width of the Morlet wavelet.
    """
    factor = 1. / math.pow(2, 1. / Q)
    term1 = (1 - factor) / (1 + factor)
    term2 = 1. / math.sqrt(2 * math.log(1. / r))
    return xi * term1 * term2


def compute_bandwidth(sigma, r=math.sqrt(0.5)):
    """
    Width of the band over which a Gaussian of frequential width sigma
    stays above r times its peak, in radians.

    Parameters
    ----------
    sigma : float
        normalized frequential width (1 is the sampling frequency)
    r : float, optional
        amplitude ratio defining the band edges

    Returns
    -------
    bandwidth : float
        2 * pi * 2 * sigma * sqrt(2 log(1 / r))
    """
    return 2 * math.pi * 2 * sigma * math.sqrt(2 * math.log(1. / r))


def compute_temporal_support(h_f, criterion_amplitude=1e-3):
    """
    Computes the (half) temporal support of a family of centered,
    symmetric filters h provided in the Fourier domain

    This function computes the support N which is the smallest integer
    such that for all signals x and all filters h,

    \\| x \\conv h - x \\conv h_{[-N, N]} \\|_{\\infty} \\leq \\epsilon
        \\| x \\|_{\\infty}  (1)

    where 0<\\epsilon<1 is an acceptable error, and h_{[-N, N]} denotes the
    filter h whose support is restricted in the interval [-N, N]

    If the support is too small, no such N might exist.
    In this case, N is defined as the half of the support of h, and a
    UserWarning is raised.

    Parameters
    ----------
    h_f : array_like
        a numpy array of size batch x time, where each row contains the
        Fourier transform of a filter which is centered and whose absolute
        value is symmetric
    criterion_amplitude : float, optional
        value \\epsilon controlling the numerical
        error. The larger criterion_amplitude, the smaller the temporal
        support and the larger the numerical error. Defaults to 1e-3

    Returns
    -------
    t_max : int
        temporal support which ensures (1) for all rows of h_f

    """
    h = ifft(h_f, axis=1)
    half_support = h.shape[1] // 2
    # compute ||h - h_[-N, N]||_1
    l1_residual = np.fliplr(
        np.cumsum(np.fliplr(np.abs(h)[:, :half_support]), axis=1))
    # find the first point above criterion_amplitude
    if np.any(np.max(l1_residual, axis=0) <= criterion_amplitude):
        # if it is possible
        N = np.min(
            np.where(np.max(l1_residual, axis=0) <= criterion_amplitude)[0])\
            + 1
    else:
        # if there is none:
        N = half_support
        # Raise a warning to say that there will be border effects
        warnings.warn('Signal support is too small to avoid border effects')
    return int(N)


def compute_xi_max(Q):
    """
    Computes the maximal xi to use for the Morlet family, depending on Q.

    Parameters
    ----------
    Q : int
        number of wavelets per octave (integer >= 1)

    Returns
    -------
    xi_max : float
        largest frequency of the wavelet frame.
    """
    xi_max = max(1. / (1. + math.pow(2., 3. / Q)), 0.35)
    return xi_max


def morlet_freq_1d(J, Q, P, sigma0=0.1, r_psi=math.sqrt(0.5)):
    """
    Center frequencies, widths and scales of a 1D Morlet filter bank.

    The J wavelets of the constant-Q region have center frequencies
    xi_max * 2 ** (-j / Q) and scales j = 0, ..., J - 1. Below them, P
    wavelets of constant width are spread linearly between the last
    constant-Q frequency and zero, and all get the scale J - 1.

    Parameters
    ----------
    J : int >= 1
        scale of the low-pass filter, in units of 1/Q octave
    Q : int >= 1
        number of wavelets per octave
    P : int >= 0
        number of constant-bandwidth wavelets
    sigma0 : float, optional
        width of the low-pass filter at scale 0
    r_psi : float, optional
        amplitude at which adjacent wavelets meet

    Returns
    -------
    psi_xi, psi_sigma, psi_j : lists
        normalized center frequencies, widths and scales of the wavelets
    phi_sigma : float
        normalized width of the low-pass filter
    """
    xi_max = compute_xi_max(Q)
    psi_xi = [xi_max * 2 ** (-j / Q) for j in range(J)]
    psi_sigma = [compute_sigma_psi(xi, Q, r=r_psi) for xi in psi_xi]
    psi_j = list(range(J))

    # Low-frequency (constant-bandwidth) region: arithmetic progression of xi
    elbow_xi = psi_xi[-1]
    for p in range(1, P + 1):
        psi_xi.append(elbow_xi * (1 - p / (P + 1)))
        psi_sigma.append(psi_sigma[J - 1])
        psi_j.append(J - 1)

    phi_sigma = sigma0 / 2 ** (J / Q)
    return psi_xi, psi_sigma, psi_j, phi_sigma


def compute_padded_size(N, J, Q, sigma0=0.1, boundary='symm'):
    """
    Computes the length of the padded signal for a 1D filter bank.

    Periodic signals are not padded. Otherwise, the padding on the right
    covers three times the temporal support of the low-pass filter on each
    side and the padded length is a power of two.

    Parameters
    ----------
    N : int
        length of the input signal
    J, Q : int
        scale of the low-pass filter and number of wavelets per octave
    sigma0 : float, optional
        width of the low-pass filter at scale 0
    boundary : str, optional
        'symm', 'zero' or 'per'

    Returns
    -------
    N_padded : int
    """
    if boundary == 'per':
        return N
    phi_f = gauss_1d(N, sigma0 / 2 ** (J / Q))
    min_to_pad = 3 * compute_temporal_support(phi_f.reshape(1, -1),
                                              criterion_amplitude=1e-3)
    J_pad = int(math.ceil(math.log2(N + 2 * min_to_pad)))
    return 2 ** max(J_pad, J // Q)


def morlet_filter_bank_1d(N, J, Q=1, P=None, boundary='symm',
                          filter_format='fourier_multires', sigma0=0.1,
                          r_psi=math.sqrt(0.5)):
    """
    Builds in Fourier the 1D Morlet filter bank of a scattering layer.

    Parameters
    ----------
    N : int
        length of the input signal
    J : int >= 1
        scale of the low-pass filter in units of 1/Q octave, so that the
        averaging support is 2 ** (J / Q)
    Q : int >= 1, optional
        number of wavelets per octave. Defaults to 1.
    P : int >= 0, optional
        number of constant-bandwidth wavelets covering the low frequencies.
        Defaults to Q - 1.
    boundary : str, optional
        'symm' (default), 'zero' or 'per'
    filter_format : str, optional
        'fourier_multires' (default) stores the filters at every resolution
        they may be applied at, 'fourier' only at full resolution.
    sigma0 : float, optional
        width of the low-pass filter at scale 0
    r_psi : float, optional
        amplitude at which adjacent wavelets meet

    Returns
    -------
    filters : FilterBank
        The filter bank, with center frequencies and bandwidths in radians.
    """
    if Q < 1:
        raise ConfigurationError('Q must always be >= 1, got {}'.format(Q))
    if J < 1:
        raise ConfigurationError('J must be >= 1, got {}'.format(J))
    if P is None:
        P = Q - 1
    if P < 0:
        raise ConfigurationError('P must be >= 0, got {}'.format(P))
    if 2 ** (J / Q) > N:
        raise ConfigurationError(
            "The support 2**(J/Q) = {} of the low-pass filter cannot exceed "
            "the input length {}.".format(2 ** (J / Q), N))
    if boundary not in BOUNDARIES:
        raise UnsupportedModeError("Unknown boundary '{}'.".format(boundary))
    if filter_format not in FILTER_FORMATS:
        raise UnsupportedModeError(
            "Unknown filter format '{}'.".format(filter_format))

    N_padded = compute_padded_size(N, J, Q, sigma0, boundary)

    # resolutions at which the filters will be applied
    n_levels = 1
    if filter_format == 'fourier_multires':
        n_levels = J // Q + 1
        while N_padded % 2 ** (n_levels - 1):
            n_levels -= 1

    def levels_of(filter_f):
        return [NumpyBackend1D.periodize_filter(filter_f, res)
                for res in range(n_levels)]

    psi_xi, psi_sigma, psi_j, phi_sigma = morlet_freq_1d(J, Q, P, sigma0, r_psi)

    psi = []
    for xi, sigma, j in zip(psi_xi, psi_sigma, psi_j):
        psi.append({'levels': levels_of(morlet_1d(N_padded, xi, sigma)),
                    'xi': 2 * math.pi * xi,
                    'sigma': sigma,
                    'bandwidth': compute_bandwidth(sigma, r_psi),
                    'j': j,
                    'theta': None})

    phi = {'levels': levels_of(gauss_1d(N_padded, phi_sigma)),
           'xi': 0.,
           'sigma': phi_sigma,
           'bandwidth': compute_bandwidth(phi_sigma, r_psi),
           'j': J}

    return FilterBank(phi=phi, psi=tuple(psi), Q=Q, size=(N_padded,),
                      boundary=boundary, filter_format=filter_format, L=0)


__all__ = ['adaptive_choice_P', 'morlet_1d', 'gauss_1d', 'compute_sigma_psi',
           'compute_bandwidth', 'compute_temporal_support', 'compute_xi_max',
           'morlet_freq_1d', 'compute_padded_size', 'morlet_filter_bank_1d']
