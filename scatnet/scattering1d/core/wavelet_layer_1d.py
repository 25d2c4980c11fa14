import numpy as np

from ...core.convolution import preprocess_signal, convolution
from ...core.filter_bank import check_filter_bank, filter_at, padded_size
from ...core.layer import complete_path, extend_path, output_slots
from ...core.pruning import downsampling_rate, bandwidth_mask
from ...options import parse_options
from ..backend.numpy_backend import NumpyBackend1D


def wavelet_1d(x, filters, options=None, resolution=0, psi_mask=None,
               backend=None):
    """
    Computes the wavelet transform of a single 1-D signal.

    Parameters
    ----------
    x : array
        Signal of size (..., N) at resolution `resolution`.
    filters : FilterBank
        1-D filter bank.
    options : ScatteringOptions or dict, optional
        Only 'oversampling' and 'precision' are read.
    resolution : int, optional
        Resolution of x.
    psi_mask : boolean array, optional
        Wavelets to apply. Defaults to all of them.
    backend : class, optional
        Defaults to the NumPy 1-D backend.

    Returns
    -------
    x_phi : array
        Real low-pass output.
    x_psi : list
        Complex wavelet outputs, None where psi_mask is false.
    meta_phi : dictionary
        'j', 'resolution' and 'bandwidth' of x_phi.
    meta_psi : list
        Same as meta_phi for each wavelet, None where psi_mask is false.
    """
    backend = NumpyBackend1D if backend is None else backend
    options = parse_options(options)
    if psi_mask is None:
        psi_mask = np.ones(len(filters.psi), dtype=bool)

    signal_shape = backend.signal_shape(x)
    x_hat = preprocess_signal(backend, x, padded_size(filters, resolution),
                              filters.boundary, options.precision)

    phi = filters.phi
    ds = downsampling_rate(phi['j'], filters.Q, resolution,
                           options.oversampling)
    x_phi = convolution(backend, x_hat, filter_at(backend, phi, resolution),
                        ds, signal_shape, real=True)
    meta_phi = {'j': phi['j'], 'resolution': resolution + ds,
                'bandwidth': phi['bandwidth']}

    x_psi = [None] * len(filters.psi)
    meta_psi = [None] * len(filters.psi)
    for n in np.flatnonzero(psi_mask):
        psi = filters.psi[n]
        ds = downsampling_rate(psi['j'], filters.Q, resolution,
                               options.oversampling)
        x_psi[n] = convolution(backend, x_hat,
                               filter_at(backend, psi, resolution), ds,
                               signal_shape)
        meta_psi[n] = {'j': psi['j'], 'resolution': resolution + ds,
                       'bandwidth': psi['bandwidth']}

    return x_phi, x_psi, meta_phi, meta_psi


def wavelet_layer_1d(U, filters, options=None, compute_psi=True,
                     backend=None):
    """
    Computes the 1-D wavelet transform of every path of a layer.

    A wavelet is applied to a path only if its center frequency lies below
    the bandwidth of the path, relaxed by 2 ** path_margin.

    Parameters
    ----------
    U : list of dictionaries
        Input layer, modulus coefficients of the previous order.
    filters : FilterBank
        1-D filter bank.
    options : ScatteringOptions or dict, optional
    compute_psi : boolean, optional
        Whether to compute the wavelet coefficients of the next order.
    backend : class, optional
        Defaults to the NumPy 1-D backend.

    Returns
    -------
    U_phi : list of dictionaries
        Averaged coefficients, one per input path, in the input order.
    U_psi : list of dictionaries
        Wavelet coefficients. The children of each input path are
        contiguous, in the input order, and sorted by wavelet index.
    """
    backend = NumpyBackend1D if backend is None else backend
    options = parse_options(options)
    check_filter_bank(filters)

    U = [complete_path(path) for path in U]
    masks = [bandwidth_mask(filters, path['bandwidth'], options.path_margin,
                            compute_psi) for path in U]
    offsets = output_slots(masks)

    U_phi = [None] * len(U)
    U_psi = [None] * int(offsets[-1])
    for p, (path, mask) in enumerate(zip(U, masks)):
        x_phi, x_psi, meta_phi, meta_psi = wavelet_1d(
            path['coef'], filters, options, path['resolution'], mask,
            backend)

        U_phi[p] = extend_path(path, x_phi, meta_phi['resolution'],
                               meta_phi['bandwidth'], j_phi=meta_phi['j'])

        for q, n in enumerate(np.flatnonzero(mask), offsets[p]):
            U_psi[q] = extend_path(path, x_psi[n], meta_psi[n]['resolution'],
                                   meta_psi[n]['bandwidth'],
                                   append={'j': meta_psi[n]['j'],
                                           'n': int(n)})

    return U_phi, U_psi


__all__ = ['wavelet_1d', 'wavelet_layer_1d']
