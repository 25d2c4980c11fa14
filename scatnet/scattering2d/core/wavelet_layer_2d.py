import numpy as np

from ...core.convolution import preprocess_signal, convolution
from ...core.filter_bank import check_filter_bank, filter_at, padded_size
from ...core.layer import complete_path, extend_path, output_slots
from ...core.pruning import downsampling_rate, scale_mask
from ...options import parse_options
from ..backend.numpy_backend import NumpyBackend2D


def wavelet_2d(x, filters, options=None, resolution=0, psi_mask=None,
               backend=None):
    """
    Computes the wavelet transform of a single image, padded in order to
    avoid border effects.

    Parameters
    ----------
    x : array
        Image(s) of size (..., M, N) at resolution `resolution`.
    filters : FilterBank
        2-D filter bank.
    options : ScatteringOptions or dict, optional
    resolution : int, optional
    psi_mask : boolean array, optional
        Wavelets to apply. Defaults to all of them.
    backend : class, optional

    Returns
    -------
    x_phi : array
        Real low-pass output.
    x_psi : list
        Complex wavelet outputs, None where psi_mask is false.
    meta_phi : dictionary
        'j', 'resolution' and 'bandwidth' of x_phi.
    meta_psi : list
        'j', 'theta', 'resolution' and 'bandwidth' of each wavelet output,
        None where psi_mask is false.
    """
    backend = NumpyBackend2D if backend is None else backend
    options = parse_options(options)
    if psi_mask is None:
        psi_mask = np.ones(len(filters.psi), dtype=bool)

    signal_shape = backend.signal_shape(x)
    x_hat = preprocess_signal(backend, x, padded_size(filters, resolution),
                              filters.boundary, options.precision)

    # Low-pass filtering, downsampling and unpadding
    phi = filters.phi
    ds = downsampling_rate(phi['j'], filters.Q, resolution,
                           options.oversampling)
    x_phi = convolution(backend, x_hat, filter_at(backend, phi, resolution),
                        ds, signal_shape, real=True)
    meta_phi = {'j': phi['j'], 'resolution': resolution + ds,
                'bandwidth': phi['bandwidth']}

    # Band-pass filtering, downsampling and unpadding
    x_psi = [None] * len(filters.psi)
    meta_psi = [None] * len(filters.psi)
    for n in np.flatnonzero(psi_mask):
        psi = filters.psi[n]
        ds = downsampling_rate(psi['j'], filters.Q, resolution,
                               options.oversampling)
        x_psi[n] = convolution(backend, x_hat,
                               filter_at(backend, psi, resolution), ds,
                               signal_shape)
        meta_psi[n] = {'j': psi['j'], 'theta': psi['theta'],
                       'resolution': resolution + ds,
                       'bandwidth': psi['bandwidth']}

    return x_phi, x_psi, meta_phi, meta_psi


def wavelet_layer_2d(U, filters, options=None, compute_psi=True,
                     backend=None):
    """
    Computes the 2-D wavelet transform of every path of a layer.

    Only progressive paths are computed: a wavelet of scale j is applied to
    a path whose last scale is j_current only if j >= j_current + Q.

    Parameters
    ----------
    U : list of dictionaries
        Input layer, modulus coefficients of the previous order.
    filters : FilterBank
        2-D filter bank.
    options : ScatteringOptions or dict, optional
    compute_psi : boolean, optional
        Whether to compute the wavelet coefficients of the next order.
    backend : class, optional

    Returns
    -------
    U_phi : list of dictionaries
        Averaged coefficients, one per input path.
    U_psi : list of dictionaries
        Wavelet coefficients, grouped by parent and sorted by wavelet index.
    """
    backend = NumpyBackend2D if backend is None else backend
    options = parse_options(options)
    check_filter_bank(filters)

    U = [complete_path(path) for path in U]
    masks = [scale_mask(filters, path['j'][-1] if path['j'] else None,
                        compute_psi) for path in U]
    offsets = output_slots(masks)

    U_phi = [None] * len(U)
    U_psi = [None] * int(offsets[-1])
    for p, (path, mask) in enumerate(zip(U, masks)):
        x_phi, x_psi, meta_phi, meta_psi = wavelet_2d(
            path['coef'], filters, options, path['resolution'], mask,
            backend)

        U_phi[p] = extend_path(path, x_phi, meta_phi['resolution'],
                               meta_phi['bandwidth'], j_phi=meta_phi['j'])

        for q, n in enumerate(np.flatnonzero(mask), offsets[p]):
            meta = meta_psi[n]
            U_psi[q] = extend_path(path, x_psi[n], meta['resolution'],
                                   meta['bandwidth'],
                                   append={'j': meta['j'],
                                           'theta': meta['theta'],
                                           'n': int(n)})

    return U_phi, U_psi


__all__ = ['wavelet_2d', 'wavelet_layer_2d']
