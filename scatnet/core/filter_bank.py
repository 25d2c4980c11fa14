from collections import namedtuple

from ..errors import ConfigurationError, UnsupportedModeError


FilterBank = namedtuple('FilterBank', ['phi', 'psi', 'Q', 'size', 'boundary',
                                       'filter_format', 'L'])
FilterBank.__doc__ = """A read-only bank of filters in the Fourier domain.

    phi : dictionary
        The low-pass filter, with keys
        * 'levels': list of arrays, levels[r] being the filter at resolution r
        * 'j': int, its scale J
        * 'xi': float, center frequency (0)
        * 'sigma': float, frequential width
        * 'bandwidth': float, frequency support radius in radians
    psi : tuple of dictionaries
        The band-pass filters, with the same keys as phi, plus 'theta' (the
        orientation index, None for 1D banks).
    Q : int
        Number of wavelets per octave.
    size : tuple of ints
        Padded signal shape at resolution 0.
    boundary : str
        'symm', 'zero' or 'per'.
    filter_format : str
        'fourier_multires' if levels are precomputed for every resolution,
        'fourier' if only levels[0] is stored.
    L : int
        Number of orientations in [0, pi) (0 for 1D banks).
    """

BOUNDARIES = ('symm', 'zero', 'per')
FILTER_FORMATS = ('fourier_multires', 'fourier')

_PHI_KEYS = ('levels', 'j', 'xi', 'bandwidth')
_PSI_KEYS = ('levels', 'j', 'xi', 'bandwidth', 'theta')


def check_filter_bank(filters):
    """Checks that a filter bank carries every field the cascade reads.

    Raises
    ------
    ConfigurationError
        If a filter is missing a required field.
    UnsupportedModeError
        If the boundary or filter format is not supported.
    """
    if not isinstance(filters, FilterBank):
        raise ConfigurationError('filters must be a FilterBank, got '
                                 '{}'.format(type(filters).__name__))

    for key in _PHI_KEYS:
        if key not in filters.phi:
            raise ConfigurationError(
                "Low-pass filter is missing the '{}' field.".format(key))
    for n, psi in enumerate(filters.psi):
        for key in _PSI_KEYS:
            if key not in psi:
                raise ConfigurationError(
                    "Wavelet {} is missing the '{}' field.".format(n, key))

    if filters.Q is None or filters.Q < 1:
        raise ConfigurationError('Q must be >= 1, got {}'.format(filters.Q))

    if filters.boundary not in BOUNDARIES:
        raise UnsupportedModeError(
            "Unknown boundary '{}'. Must be one of {}.".format(
                filters.boundary, ', '.join(BOUNDARIES)))
    if filters.filter_format not in FILTER_FORMATS:
        raise UnsupportedModeError(
            "Unknown filter format '{}'. Must be one of {}.".format(
                filters.filter_format, ', '.join(FILTER_FORMATS)))
    if filters.filter_format == 'fourier' and len(filters.phi['levels']) != 1:
        raise UnsupportedModeError(
            "Filter format 'fourier' stores a single level per filter.")


def filter_at(backend, filt, resolution):
    """Returns a filter in the Fourier domain at a given resolution.

    Precomputed levels are used when available, otherwise the full
    resolution filter is periodized.
    """
    levels = filt['levels']
    if resolution < len(levels):
        return levels[resolution]
    return backend.periodize_filter(levels[0], resolution)


def padded_size(filters, resolution):
    """Padded signal shape at a given resolution."""
    return tuple(n // 2 ** resolution for n in filters.size)


__all__ = ['FilterBank', 'BOUNDARIES', 'FILTER_FORMATS', 'check_filter_bank',
           'filter_at', 'padded_size']
