"""Exceptions raised by the scattering cascade.

All of them derive from `ValueError`, since they signal a bad argument handed
in by the caller: the cascade itself is deterministic and never retries.
"""


class ScatteringError(ValueError):
    """Base class for errors raised by scatnet."""


class ConfigurationError(ScatteringError):
    """Unknown or invalid option, or filter metadata missing a field."""


class IncompatibleShapeError(ScatteringError):
    """Coefficients or signals whose shapes cannot be combined."""


class UnsupportedModeError(ScatteringError):
    """Unknown output format, boundary condition or filter format."""


__all__ = ['ScatteringError', 'ConfigurationError', 'IncompatibleShapeError',
           'UnsupportedModeError']
