import numbers
from collections import namedtuple

from .errors import ConfigurationError


ScatteringOptions = namedtuple(
    'ScatteringOptions', ['resolution', 'oversampling', 'path_margin',
                          'precision'])
ScatteringOptions.__doc__ = """Options shared by every layer of a cascade.

    resolution : int >= 0
        Resolution (number of dyadic downsamplings already applied) declared
        for the input signal of order 0.
    oversampling : int >= 0
        Number of octaves by which every convolution output is kept above
        its critical sampling rate.
    path_margin : float
        Relaxation exponent of the bandwidth pruning rule: a 1-D wavelet of
        center frequency xi is applied to a signal of bandwidth bw only if
        bw * 2**path_margin > xi.
    precision : str
        Either 'double' or 'single'.
    """

DEFAULT_OPTIONS = {
    'resolution': 0,
    'oversampling': 1,
    'path_margin': 0,
    'precision': 'double',
}


def check_options_white_list(options, white_list):
    """Raise a ConfigurationError if `options` holds keys outside `white_list`."""
    unknown = sorted(set(options) - set(white_list))
    if unknown:
        raise ConfigurationError(
            "Unrecognized option(s) {}. Valid options are {}.".format(
                ', '.join(repr(key) for key in unknown),
                ', '.join(repr(key) for key in white_list)))


def parse_options(options=None, **kwargs):
    """Builds the immutable options of a cascade run.

    Parameters
    ----------
    options : dict, ScatteringOptions or None
        User-provided options. Missing keys take their default value.
    kwargs : dict
        Additional options, merged over `options`.

    Returns
    -------
    options : ScatteringOptions
        Validated options.

    Raises
    ------
    ConfigurationError
        If an option is not recognized or has an invalid value.
    """
    if isinstance(options, ScatteringOptions) and not kwargs:
        return options

    if options is None:
        options = {}
    elif isinstance(options, ScatteringOptions):
        options = options._asdict()
    elif not isinstance(options, dict):
        raise ConfigurationError("options must be a dict, got {}".format(
            type(options).__name__))

    options = dict(options, **kwargs)
    check_options_white_list(options, list(DEFAULT_OPTIONS))

    parsed = dict(DEFAULT_OPTIONS)
    parsed.update(options)

    for key in ('resolution', 'oversampling'):
        value = parsed[key]
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ConfigurationError("{} must be an integer. Got: {}".format(
                key, value))
        if value < 0:
            raise ConfigurationError("{} must be nonnegative. Got: {}".format(
                key, value))
        parsed[key] = int(value)

    if isinstance(parsed['path_margin'], bool) or not isinstance(
            parsed['path_margin'], numbers.Real):
        raise ConfigurationError("path_margin must be a real number. "
                                 "Got: {}".format(parsed['path_margin']))

    if parsed['precision'] not in ('double', 'single'):
        raise ConfigurationError("precision must be 'double' or 'single'. "
                                 "Got: {}".format(parsed['precision']))

    return ScatteringOptions(**parsed)


__all__ = ['ScatteringOptions', 'DEFAULT_OPTIONS', 'check_options_white_list',
           'parse_options']
