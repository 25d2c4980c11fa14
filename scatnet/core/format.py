from enum import Enum

import numpy as np

from ..errors import IncompatibleShapeError, UnsupportedModeError


class OutputFormat(Enum):
    RAW = 'raw'
    ORDER_TABLE = 'order_table'
    TABLE = 'table'
    VECTOR = 'vector'


META_TUPLE_KEYS = ('j', 'theta', 'k', 'n')
META_SCALAR_KEYS = ('resolution', 'resolution_rot', 'bandwidth', 'j_phi')


def parse_format(fmt):
    """Returns the OutputFormat named by fmt."""
    try:
        return OutputFormat(fmt)
    except ValueError:
        raise UnsupportedModeError(
            "Unknown format {!r}. Available formats are {}.".format(
                fmt, ', '.join(repr(f.value) for f in OutputFormat)))


def flatten_scat(S):
    """Puts all the orders of a scattering representation in one layer.

    Each path gets an 'order' key holding the index of its order in S.
    """
    return [dict(path, order=m) for m, layer in enumerate(S) for path in layer]


def _signal_shape(coef, batch_ndim):
    return np.shape(coef)[batch_ndim:]


def check_uniform_shapes(S, batch_ndim=0):
    """Raises IncompatibleShapeError unless all the non-empty orders of S
    hold coefficients of the same shape."""
    shapes = {}
    for m, layer in enumerate(S):
        for path in layer:
            shapes.setdefault(_signal_shape(path['coef'], batch_ndim), m)
    if len(shapes) > 1:
        raise IncompatibleShapeError(
            "To use 'table' or 'vector' output formats, all orders must be "
            "of the same resolution, got coefficients of shapes {}. Consider "
            "using the 'order_table' output format.".format(
                ', '.join('{} (order {})'.format(shape, m)
                          for shape, m in shapes.items())))


def table(layer, batch_ndim=0):
    """Stacks the coefficients of a layer into one array.

    Returns
    -------
    out : array of size (*batch_shape, len(layer), signal_size), None if the
        layer is empty
    """
    if not layer:
        return None
    rows = []
    for path in layer:
        coef = np.asarray(path['coef'])
        rows.append(coef.reshape(coef.shape[:batch_ndim] + (-1,)))
    return np.stack(rows, axis=batch_ndim)


def layer_meta(layer, order=None):
    """Metadata of a layer as arrays aligned with the rows of its table.

    Tuple-valued keys are padded with -1 to their longest length in the
    layer, missing scalar keys are -1.

    Parameters
    ----------
    layer : list of dictionaries
    order : int, optional
        Order of the paths, for layers which do not hold an 'order' key.
        Defaults to the number of scales of each path.

    Returns
    -------
    meta : dictionary of arrays
    """
    meta = {}
    meta['order'] = np.array(
        [path.get('order', len(path['j']) if order is None else order)
         for path in layer], dtype=int)
    for key in META_TUPLE_KEYS:
        values = [tuple(path.get(key, ())) for path in layer]
        width = max((len(value) for value in values), default=0)
        meta[key] = -np.ones((len(layer), width), dtype=int)
        for p, value in enumerate(values):
            if value:
                meta[key][p, :len(value)] = value
    for key in META_SCALAR_KEYS:
        dtype = float if key == 'bandwidth' else int
        meta[key] = np.array([path.get(key, -1) for path in layer],
                             dtype=dtype)
    return meta


def format_scat(S, fmt='table', batch_ndim=0):
    """
    Formats a scattering representation.

    Parameters
    ----------
    S : list of layers
        Scattering coefficients, S[m] being the layer of order m.
    fmt : OutputFormat or str, optional
        * 'raw': S is returned as is, without metadata.
        * 'order_table': for each order, a table with one row per path
          holding its flattened coefficients (None for empty orders), and
          the metadata of the order.
        * 'table' (default): the tables of all orders concatenated, which
          requires the coefficients of all orders to have the same shape.
          Metadata are padded with -1 to the widest order.
        * 'vector': the 'table' output flattened into one row.
    batch_ndim : int, optional
        Number of leading batch axes of the coefficients, which are kept in
        front of the output arrays.

    Returns
    -------
    out : the formatted coefficients
    meta : dictionary of arrays, list of them for 'order_table', or None for
        'raw'

    Raises
    ------
    UnsupportedModeError
        If the format is unknown.
    IncompatibleShapeError
        If 'table' or 'vector' is requested for orders of different
        resolutions.
    """
    fmt = parse_format(fmt)

    if fmt is OutputFormat.RAW:
        return S, None

    if fmt is OutputFormat.ORDER_TABLE:
        out = [table(layer, batch_ndim) for layer in S]
        meta = [layer_meta(layer, order=m) for m, layer in enumerate(S)]
        return out, meta

    check_uniform_shapes(S, batch_ndim)
    flat = flatten_scat(S)
    out = table(flat, batch_ndim)
    meta = layer_meta(flat)
    if fmt is OutputFormat.VECTOR and out is not None:
        out = out.reshape(out.shape[:batch_ndim] + (-1,))
    return out, meta


__all__ = ['OutputFormat', 'parse_format', 'flatten_scat',
           'check_uniform_shapes', 'table', 'layer_meta', 'format_scat']
