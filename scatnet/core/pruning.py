"""Selection of the wavelets applied to each path of a layer.

Two rules coexist. 1D layers compare the center frequency of each wavelet to
the bandwidth of the signal; 2D and roto-translation layers compare scale
indices. They do not select the same paths in general and are kept apart.
"""
import math

import numpy as np


def downsampling_rate(scale, Q, resolution, oversampling=1):
    """Log2 of the subsampling applied after filtering at a given scale.

    Parameters
    ----------
    scale : int
        Scale of the filter (J for the low-pass, j for a wavelet), in units
        of 1/Q octave.
    Q : int >= 1
        Number of wavelets per octave.
    resolution : int >= 0
        Resolution of the signal being filtered.
    oversampling : int >= 0
        Octaves kept above critical sampling.

    Returns
    -------
    rate : int >= 0
        max(floor(scale / Q) - resolution - oversampling, 0)
    """
    return max(int(math.floor(scale / Q)) - resolution - oversampling, 0)


def bandwidth_mask(filters, bandwidth, path_margin=0, compute_psi=True):
    """Wavelets whose center frequency lies below the bandwidth of a path.

    A wavelet psi_p is active iff bandwidth * 2 ** path_margin > xi_p.

    Returns
    -------
    mask : boolean array of length len(filters.psi)
    """
    if not compute_psi:
        return np.zeros(len(filters.psi), dtype=bool)
    xi = np.array([psi['xi'] for psi in filters.psi], dtype=float)
    return bandwidth * 2 ** path_margin > xi


def scale_mask(filters, j_current=None, compute_psi=True):
    """Wavelets at least Q scales coarser than the last wavelet of a path.

    A wavelet psi_p is active iff j_p >= j_current + Q. Every wavelet is
    active for a path that has not been filtered yet (j_current None).

    Returns
    -------
    mask : boolean array of length len(filters.psi)
    """
    if not compute_psi:
        return np.zeros(len(filters.psi), dtype=bool)
    j = np.array([psi['j'] for psi in filters.psi], dtype=float)
    if j_current is None:
        return np.ones(len(filters.psi), dtype=bool)
    return j >= j_current + filters.Q


__all__ = ['downsampling_rate', 'bandwidth_mask', 'scale_mask']
