"""Path records and layers.

A layer is a list of paths. Each path is a dictionary with keys

* 'coef': the signal (array)
* 'j': tuple, scale of the wavelet applied at each order
* 'theta': tuple, orientation of the wavelet applied at each order (empty
  for 1D paths, -1 for an orientation integrated into an angular axis)
* 'k': tuple, scale of the angular filter applied at each roto-translation
  order
* 'n': tuple, index of the wavelet applied at each order
* 'resolution': int, number of dyadic subsamplings applied to the signal
* 'resolution_rot': int, same along the angular axis
* 'bandwidth': float, frequency support radius of the signal, in radians
* 'j_phi': int, scale of the low-pass filter, on averaged paths only
"""
import math

import numpy as np

from ..backend.numpy_backend import NumpyBackend
from ..errors import ConfigurationError

FULL_BANDWIDTH = 2 * math.pi

PATH_DEFAULTS = {
    'j': (),
    'theta': (),
    'k': (),
    'n': (),
    'resolution': 0,
    'resolution_rot': 0,
    'bandwidth': FULL_BANDWIDTH,
}


def input_layer(x, resolution=0, bandwidth=FULL_BANDWIDTH):
    """Wraps a signal as the single-path layer of order 0."""
    path = dict(PATH_DEFAULTS)
    path.update(coef=x, resolution=resolution, bandwidth=bandwidth)
    return [path]


def complete_path(path):
    """Fills the metadata a user-built path may lack with their defaults."""
    if 'coef' not in path:
        raise ConfigurationError("Every path must hold its signal under "
                                 "the 'coef' key.")
    missing = {key: value for key, value in PATH_DEFAULTS.items()
               if key not in path}
    if not missing:
        return path
    return dict(path, **missing)


def extend_path(path, coef, resolution, bandwidth, append=None, **updates):
    """Creates the child of a path.

    Parameters
    ----------
    path : dictionary
        Parent path.
    coef : array
        Signal of the child.
    resolution : int
        Resolution of the child.
    bandwidth : float
        Bandwidth of the child.
    append : dictionary, optional
        Values appended to the tuple-valued keys ('j', 'theta', 'k', 'n').
    updates : dict
        Other keys to overwrite.

    Returns
    -------
    child : dictionary
    """
    child = dict(path)
    child.pop('j_phi', None)
    child['coef'] = coef
    child['resolution'] = resolution
    child['bandwidth'] = min(path['bandwidth'], bandwidth)
    if append is not None:
        for key, value in append.items():
            child[key] = tuple(path[key]) + (value,)
    child.update(updates)
    return child


def output_slots(masks):
    """Offsets of the children of each parent in the next layer.

    The children of parent p occupy indices offsets[p]:offsets[p + 1], so
    parents may be processed in any order without sharing a counter.
    """
    counts = [int(np.count_nonzero(mask)) for mask in masks]
    return np.concatenate(([0], np.cumsum(counts, dtype=int)))


def modulus_layer(U, backend=NumpyBackend):
    """Applies the complex modulus to every signal of a layer."""
    return [dict(path, coef=backend.modulus(path['coef'])) for path in U]


__all__ = ['FULL_BANDWIDTH', 'PATH_DEFAULTS', 'input_layer', 'complete_path',
           'extend_path', 'output_slots', 'modulus_layer']
