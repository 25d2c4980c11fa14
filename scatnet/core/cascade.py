"""Composition of scattering layers into a network.

A network of order M is a sequence of M + 1 layer operators. Operator m maps
the modulus coefficients of order m to the averaged coefficients of order m
and, except for the last operator, to the wavelet coefficients of order
m + 1. The modulus is applied by `scat` between two operators.
"""
import logging
import math
import numbers
from collections import namedtuple
from enum import Enum

from ..backend.numpy_backend import NumpyBackend
from ..errors import ConfigurationError
from ..options import (DEFAULT_OPTIONS, check_options_white_list,
                       parse_options)
from .filter_bank import FilterBank, check_filter_bank
from .layer import FULL_BANDWIDTH, input_layer, modulus_layer
from ..scattering1d.core.wavelet_layer_1d import wavelet_layer_1d
from ..scattering1d.filter_bank import morlet_filter_bank_1d
from ..scattering2d.core.wavelet_layer_2d import wavelet_layer_2d
from ..scattering2d.filter_bank import morlet_filter_bank_2d
from ..scattering3d.core.wavelet_layer_3d import wavelet_layer_3d
from ..scattering3d.filter_bank import angular_filter_bank


class LayerKind(Enum):
    DIM1 = 'dim1'
    DIM2 = 'dim2'
    ROTO_TRANSLATION = 'roto_translation'


LayerOperator = namedtuple('LayerOperator', ['kind', 'filters', 'filters_rot'])
LayerOperator.__new__.__defaults__ = (None,)
LayerOperator.__doc__ = """A scattering layer bound to its filter bank(s).

    kind : LayerKind
        Algorithm applied by `apply_operator`.
    filters : FilterBank
        Filter bank of the layer (spatial bank for roto-translation layers).
    filters_rot : FilterBank or None
        Angular filter bank of roto-translation layers.
    """


def _parse_kind(kind):
    try:
        return LayerKind(kind)
    except ValueError:
        raise ConfigurationError(
            "Unknown layer kind {!r}. Must be one of {}.".format(
                kind, ', '.join(repr(k.value) for k in LayerKind)))


def _check_order(M):
    if isinstance(M, bool) or not isinstance(M, numbers.Integral) or M < 0:
        raise ConfigurationError(
            'The order M must be a nonnegative integer. Got: {}'.format(M))
    return int(M)


def build_cascade(filter_banks, M, kind=LayerKind.DIM1, filters_rot=None):
    """
    Builds the M + 1 layer operators of a scattering network.

    Parameters
    ----------
    filter_banks : FilterBank or sequence of FilterBank
        Operator m uses filter_banks[min(m, len(filter_banks) - 1)].
    M : int >= 0
        Order of the network.
    kind : LayerKind or str, optional
        DIM1, DIM2 or ROTO_TRANSLATION. In a roto-translation network,
        operator 0 is a 2-D layer and the following ones are
        roto-translation layers.
    filters_rot : FilterBank, optional
        Angular filter bank, required by roto-translation networks.

    Returns
    -------
    operators : list of LayerOperator
    """
    kind = _parse_kind(kind)
    M = _check_order(M)

    if isinstance(filter_banks, FilterBank):
        filter_banks = [filter_banks]
    filter_banks = list(filter_banks)
    if not filter_banks:
        raise ConfigurationError('At least one filter bank is required.')
    for filters in filter_banks:
        check_filter_bank(filters)

    if kind is LayerKind.ROTO_TRANSLATION:
        if filters_rot is None:
            raise ConfigurationError('Roto-translation networks need an '
                                     'angular filter bank.')
        check_filter_bank(filters_rot)
    elif filters_rot is not None:
        raise ConfigurationError('An angular filter bank is only used by '
                                 'roto-translation networks.')

    operators = []
    for m in range(M + 1):
        filters = filter_banks[min(m, len(filter_banks) - 1)]
        if kind is LayerKind.ROTO_TRANSLATION and m == 0:
            operators.append(LayerOperator(LayerKind.DIM2, filters))
        elif kind is LayerKind.ROTO_TRANSLATION:
            operators.append(LayerOperator(kind, filters, filters_rot))
        else:
            operators.append(LayerOperator(kind, filters))
    return operators


def apply_operator(operator, U, options=None, compute_psi=True, backend=None):
    """
    Applies a layer operator to a layer.

    Parameters
    ----------
    operator : LayerOperator
    U : list of dictionaries
        Input layer.
    options : ScatteringOptions or dict, optional
    compute_psi : boolean, optional
        Whether to compute the wavelet coefficients of the next order.
    backend : class, optional
        Backend of the layer (the spatial one for roto-translation layers).

    Returns
    -------
    U_phi, U_psi : lists of dictionaries
    """
    if operator.kind is LayerKind.DIM1:
        return wavelet_layer_1d(U, operator.filters, options, compute_psi,
                                backend)
    elif operator.kind is LayerKind.DIM2:
        return wavelet_layer_2d(U, operator.filters, options, compute_psi,
                                backend)
    elif operator.kind is LayerKind.ROTO_TRANSLATION:
        return wavelet_layer_3d(U, operator.filters, operator.filters_rot,
                                options, compute_psi, backend)
    raise ConfigurationError(
        'Unknown layer kind {!r}.'.format(operator.kind))


def split_scat_options(scat_opt=None):
    """Separates the order M from the options of the layers.

    Returns
    -------
    M : int or None
        None if scat_opt does not set it.
    options : ScatteringOptions
    """
    if scat_opt is None:
        scat_opt = {}
    elif not isinstance(scat_opt, dict):
        return None, parse_options(scat_opt)
    check_options_white_list(scat_opt, ['M'] + list(DEFAULT_OPTIONS))
    scat_opt = dict(scat_opt)
    M = scat_opt.pop('M', None)
    if M is not None:
        M = _check_order(M)
    return M, parse_options(scat_opt)


def _check_filter_options(filt_opt, white_list):
    if filt_opt is None:
        return {}
    if not isinstance(filt_opt, dict):
        raise ConfigurationError('Filter options must be a dict, got '
                                 '{}'.format(type(filt_opt).__name__))
    check_options_white_list(filt_opt, white_list)
    return dict(filt_opt)


def _per_order(value, m):
    if isinstance(value, (tuple, list)):
        return value[min(m, len(value) - 1)]
    return value


def wavelet_factory_1d(N, filt_opt=None, scat_opt=None):
    """
    Builds the operators of a 1-D scattering network.

    Parameters
    ----------
    N : int
        Length of the signals.
    filt_opt : dict, optional
        'J', 'Q', 'P' (scalars, or sequences giving one value per order),
        'boundary' and 'filter_format', as accepted by
        `morlet_filter_bank_1d`. J is in units of 1/Q octave and defaults
        to Q * (floor(log2(N)) - 1). Q defaults to (8, 1).
    scat_opt : dict, optional
        'M' (default 2) and the options of the layers.

    Returns
    -------
    operators : list of LayerOperator
    filters : list of FilterBank
        One filter bank per distinct order setting.
    """
    filt_opt = _check_filter_options(
        filt_opt, ['J', 'Q', 'P', 'boundary', 'filter_format'])
    M, _ = split_scat_options(scat_opt)
    M = 2 if M is None else M

    Q = filt_opt.get('Q', (8, 1))
    J = filt_opt.get('J')
    P = filt_opt.get('P')
    n_banks = max(len(value) if isinstance(value, (tuple, list)) else 1
                  for value in (Q, J, P))

    filters = []
    for m in range(n_banks):
        Q_m = _per_order(Q, m)
        J_m = _per_order(J, m)
        if J_m is None:
            J_m = Q_m * max(int(math.floor(math.log2(N))) - 1, 1)
        filters.append(morlet_filter_bank_1d(
            N, J_m, Q_m, _per_order(P, m),
            boundary=filt_opt.get('boundary', 'symm'),
            filter_format=filt_opt.get('filter_format', 'fourier_multires')))

    return build_cascade(filters, M, LayerKind.DIM1), filters


def wavelet_factory_2d(shape, filt_opt=None, scat_opt=None):
    """
    Builds the operators of a 2-D scattering network.

    Parameters
    ----------
    shape : tuple of 2 ints
        Size of the images.
    filt_opt : dict, optional
        'J' (default 4, capped by the image size), 'L' (default 8),
        'boundary' and 'filter_format', as accepted by
        `morlet_filter_bank_2d`.
    scat_opt : dict, optional
        'M' (default 2) and the options of the layers.

    Returns
    -------
    operators : list of LayerOperator
    filters : FilterBank
    """
    filters = _filter_bank_2d(shape, filt_opt)
    M, _ = split_scat_options(scat_opt)
    M = 2 if M is None else M
    return build_cascade(filters, M, LayerKind.DIM2), filters


def _filter_bank_2d(shape, filt_opt):
    filt_opt = _check_filter_options(
        filt_opt, ['J', 'L', 'boundary', 'filter_format'])
    J = filt_opt.get('J', min(4, int(math.floor(math.log2(min(shape))))))
    return morlet_filter_bank_2d(
        shape, J, filt_opt.get('L', 8),
        boundary=filt_opt.get('boundary', 'symm'),
        filter_format=filt_opt.get('filter_format', 'fourier_multires'))


def wavelet_factory_3d(shape, filt_opt=None, filt_rot_opt=None,
                       scat_opt=None):
    """
    Builds the operators of a roto-translation scattering network.

    The first operator is a 2-D wavelet layer. The following ones are
    roto-translation layers, which filter the orientation stacks of the
    previous order both in space and along the orientations.

    Parameters
    ----------
    shape : tuple of 2 ints
        Size of the images.
    filt_opt : dict, optional
        Options of the spatial filter bank, as for `wavelet_factory_2d`.
    filt_rot_opt : dict, optional
        'J' (default 3), the scale of the angular low-pass filter.
    scat_opt : dict, optional
        'M' (default 2) and the options of the layers.

    Returns
    -------
    operators : list of LayerOperator
    filters : FilterBank
    filters_rot : FilterBank
    """
    filters = _filter_bank_2d(shape, filt_opt)
    filt_rot_opt = _check_filter_options(filt_rot_opt, ['J'])
    filters_rot = angular_filter_bank(filters.L, filt_rot_opt.get('J', 3))
    M, _ = split_scat_options(scat_opt)
    M = 2 if M is None else M
    operators = build_cascade(filters, M, LayerKind.ROTO_TRANSLATION,
                              filters_rot)
    return operators, filters, filters_rot


def scat(x, operators, options=None, backend=None,
         bandwidth=FULL_BANDWIDTH):
    """
    Computes the scattering transform of a signal.

    The operators are applied in turn, the modulus of the wavelet
    coefficients of each one feeding the next. The last operator only
    computes averaged coefficients.

    Parameters
    ----------
    x : array
        Signal, possibly with leading batch axes.
    operators : list of LayerOperator
        Output of `build_cascade` or of a factory.
    options : dict or ScatteringOptions, optional
        Options of the layers. A dict may also hold 'M', which must then
        match the number of operators.
    backend : class, optional
        Backend of the layers (the spatial one for roto-translation
        networks).
    bandwidth : float, optional
        Declared frequency support radius of the input, in radians.
        Defaults to the full band. In 1D, wavelets centered above it are
        not applied at order 0.

    Returns
    -------
    S : list of layers
        S[m] holds the scattering coefficients of order m.
    U : list of layers
        U[m] holds the modulus coefficients of order m, U[0] the input.
    """
    NumpyBackend.input_checks(x)
    M, options = split_scat_options(options)
    if not operators:
        raise ConfigurationError('At least one operator is required.')
    if M is not None and M != len(operators) - 1:
        raise ConfigurationError(
            'Option M = {} does not match the {} operators given.'.format(
                M, len(operators)))

    U = [input_layer(x, resolution=options.resolution, bandwidth=bandwidth)]
    S = []
    for m, operator in enumerate(operators):
        last = m == len(operators) - 1
        U_phi, U_psi = apply_operator(operator, U[m], options,
                                      compute_psi=not last, backend=backend)
        S.append(U_phi)
        if not last:
            U.append(modulus_layer(U_psi))
        logging.debug('Order {}: {} {} paths averaged, {} continued.'.format(
            m, len(U_phi), operator.kind.value, len(U_psi)))
    return S, U


__all__ = ['LayerKind', 'LayerOperator', 'build_cascade', 'apply_operator',
           'split_scat_options', 'wavelet_factory_1d', 'wavelet_factory_2d',
           'wavelet_factory_3d', 'scat']
