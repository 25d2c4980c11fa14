import numpy as np

from ...core.convolution import preprocess_signal, convolution
from ...core.filter_bank import check_filter_bank, filter_at, padded_size
from ...core.layer import complete_path, extend_path, output_slots
from ...core.pruning import downsampling_rate, scale_mask
from ...errors import IncompatibleShapeError
from ...options import parse_options
from ...scattering1d.backend.numpy_backend import NumpyBackend1D
from ...scattering2d.backend.numpy_backend import NumpyBackend2D
from ..filter_bank import reflect_filter

# Orientation (and wavelet index) recorded for an orientation that has been
# turned into the angular axis of a stack.
INTEGRATED = -1


def rotated_filters(filters, n, resolution, resolution_rot, backend):
    """Stack of the wavelet n rotated by the angle of each orientation slice.

    Slice a of a stack at angular resolution r sits at the angle
    a * 2 ** r * pi / L. Orientations in [pi, 2 pi) use the frequency
    reflection of the wavelet at the same angle modulo pi.

    Returns
    -------
    stack : array of size (2 * L // 2 ** resolution_rot, M, N)
    """
    L = filters.L
    index = {(psi['j'], psi['theta']): m for m, psi in enumerate(filters.psi)}
    psi = filters.psi[n]
    step = 2 ** resolution_rot

    stack = []
    for a in range(2 * L // step):
        o = (psi['theta'] + a * step) % (2 * L)
        filter_f = filter_at(backend, filters.psi[index[(psi['j'], o % L)]],
                             resolution)
        if o >= L:
            filter_f = reflect_filter(filter_f)
        stack.append(filter_f)
    return backend.stack(stack, axis=0)


def wavelet_3d(y, filters, filters_rot, options=None, resolution=0,
               resolution_rot=0, psi_mask=None, backend=None,
               backend_rot=None):
    """
    Computes the roto-translation wavelet transform of an orientation stack.

    The stack is first filtered in space, each slice with the wavelet
    rotated by the angle of the slice, then along the orientation axis with
    the periodic angular filters.

    Parameters
    ----------
    y : array
        Stack of size (..., A, M, N), A = 2 * L // 2 ** resolution_rot.
    filters : FilterBank
        2-D filter bank.
    filters_rot : FilterBank
        Periodic 1-D filter bank over 2 * L orientations.
    options : ScatteringOptions or dict, optional
    resolution, resolution_rot : int, optional
        Spatial and angular resolutions of y.
    psi_mask : boolean array, optional
        Spatial wavelets to apply.
    backend, backend_rot : class, optional
        Spatial (2-D) and angular (1-D) backends.

    Returns
    -------
    y_phi : array
        Real output of the spatial and angular low-pass filters.
    y_psi : list
        For each spatial wavelet, None where psi_mask is false, else the
        list of complex outputs of the angular low-pass then of each
        angular wavelet.
    meta_phi : dictionary
    meta_psi : list
        Metadata matching y_psi.
    """
    backend = NumpyBackend2D if backend is None else backend
    backend_rot = NumpyBackend1D if backend_rot is None else backend_rot
    options = parse_options(options)
    if psi_mask is None:
        psi_mask = np.ones(len(filters.psi), dtype=bool)

    n_angles = 2 * filters.L // 2 ** resolution_rot
    if y.ndim < 3 or y.shape[-3] != n_angles:
        raise IncompatibleShapeError(
            'Expected {} orientations on axis -3 at angular resolution {}, '
            'got shape {}.'.format(n_angles, resolution_rot, y.shape))

    signal_shape = backend.signal_shape(y)
    angular_shape = (n_angles,)
    size_rot = padded_size(filters_rot, resolution_rot)
    y_hat = preprocess_signal(backend, y, padded_size(filters, resolution),
                              filters.boundary, options.precision)

    def angular_downsampling(filt):
        return downsampling_rate(filt['j'], filters_rot.Q, resolution_rot,
                                 options.oversampling)

    # Low-pass in space, then along the orientations
    phi = filters.phi
    ds = downsampling_rate(phi['j'], filters.Q, resolution,
                           options.oversampling)
    z = convolution(backend, y_hat, filter_at(backend, phi, resolution), ds,
                    signal_shape, real=True)
    z_hat = preprocess_signal(backend_rot, z, size_rot, filters_rot.boundary,
                              options.precision, axis=-3)
    phi_rot = filters_rot.phi
    ds_rot = angular_downsampling(phi_rot)
    y_phi = convolution(backend_rot, z_hat,
                        filter_at(backend_rot, phi_rot, resolution_rot),
                        ds_rot, angular_shape, real=True, axis=-3)
    meta_phi = {'j': phi['j'], 'resolution': resolution + ds,
                'resolution_rot': resolution_rot + ds_rot,
                'bandwidth': phi['bandwidth']}

    angular_filters = (filters_rot.phi,) + tuple(filters_rot.psi)

    y_psi = [None] * len(filters.psi)
    meta_psi = [None] * len(filters.psi)
    for n in np.flatnonzero(psi_mask):
        psi = filters.psi[n]
        ds = downsampling_rate(psi['j'], filters.Q, resolution,
                               options.oversampling)
        z = convolution(backend, y_hat,
                        rotated_filters(filters, n, resolution,
                                        resolution_rot, backend),
                        ds, signal_shape)
        z_hat = preprocess_signal(backend_rot, z, size_rot,
                                  filters_rot.boundary, options.precision,
                                  axis=-3)

        y_psi[n] = []
        meta_psi[n] = []
        for filt in angular_filters:
            ds_rot = angular_downsampling(filt)
            y_psi[n].append(convolution(
                backend_rot, z_hat,
                filter_at(backend_rot, filt, resolution_rot), ds_rot,
                angular_shape, axis=-3))
            meta_psi[n].append({'j': psi['j'], 'theta': psi['theta'],
                                'k': filt['j'],
                                'resolution': resolution + ds,
                                'resolution_rot': resolution_rot + ds_rot,
                                'bandwidth': psi['bandwidth']})

    return y_phi, y_psi, meta_phi, meta_psi


def orientation_stacks(U, L, backend=NumpyBackend2D):
    """Groups 2-D modulus paths into orientation stacks.

    Paths that already carry an angular axis (non-empty 'k') are kept as
    they are. The other paths are grouped by scales, previous orientations
    and resolution. Each group must hold the L orientations of its last
    wavelet; they are stacked on axis -3 by increasing orientation and the
    stack is repeated once to cover [0, 2 pi). The orientation and wavelet
    index of the stacked order are recorded as -1.

    Raises
    ------
    IncompatibleShapeError
        If a path has no orientation or a group is incomplete.
    """
    stacks = []
    groups = {}
    for path in U:
        if path['k']:
            stacks.append(path)
            continue
        if not path['theta']:
            raise IncompatibleShapeError(
                'Roto-translation layers only accept oriented paths.')
        key = (tuple(path['j']), tuple(path['theta'][:-1]),
               path['resolution'])
        if key not in groups:
            groups[key] = []
            stacks.append(key)
        groups[key].append(path)

    for s, entry in enumerate(stacks):
        if isinstance(entry, dict):
            continue
        members = sorted(groups[entry], key=lambda path: path['theta'][-1])
        thetas = [path['theta'][-1] for path in members]
        if thetas != list(range(L)):
            raise IncompatibleShapeError(
                'Cannot stack orientations {} of the paths with scales {}; '
                'expected 0 to {}.'.format(thetas, entry[0], L - 1))
        coef = backend.stack([path['coef'] for path in members], axis=-3)
        coef = backend.concatenate([coef, coef], axis=-3)
        first = members[0]
        stacks[s] = dict(first, coef=coef,
                         theta=tuple(first['theta'][:-1]) + (INTEGRATED,),
                         n=tuple(first['n'][:-1]) + (INTEGRATED,),
                         resolution_rot=0,
                         bandwidth=min(path['bandwidth'] for path in members))
    return stacks


def wavelet_layer_3d(U, filters, filters_rot, options=None, compute_psi=True,
                     backend=None, backend_rot=None):
    """
    Computes the roto-translation wavelet transform of a layer.

    Parameters
    ----------
    U : list of dictionaries
        Input layer. Either 2-D modulus paths, which are stacked by
        orientation, or the output of a previous roto-translation layer.
    filters : FilterBank
        2-D filter bank.
    filters_rot : FilterBank
        Angular filter bank over 2 * L orientations.
    options : ScatteringOptions or dict, optional
    compute_psi : boolean, optional
        Whether to compute the wavelet coefficients of the next order.
    backend, backend_rot : class, optional

    Returns
    -------
    U_phi : list of dictionaries
        Averaged coefficients, one per orientation stack.
    U_psi : list of dictionaries
        Wavelet coefficients. For each stack, its children are ordered by
        spatial wavelet index then angular filter (low-pass first).
    """
    backend = NumpyBackend2D if backend is None else backend
    backend_rot = NumpyBackend1D if backend_rot is None else backend_rot
    options = parse_options(options)
    check_filter_bank(filters)
    check_filter_bank(filters_rot)

    stacks = orientation_stacks([complete_path(path) for path in U],
                                filters.L, backend)
    n_rot = 1 + len(filters_rot.psi)
    masks = [scale_mask(filters, path['j'][-1] if path['j'] else None,
                        compute_psi) for path in stacks]
    offsets = output_slots([np.repeat(mask, n_rot) for mask in masks])

    U_phi = [None] * len(stacks)
    U_psi = [None] * int(offsets[-1])
    for p, (path, mask) in enumerate(zip(stacks, masks)):
        y_phi, y_psi, meta_phi, meta_psi = wavelet_3d(
            path['coef'], filters, filters_rot, options, path['resolution'],
            path['resolution_rot'], mask, backend, backend_rot)

        U_phi[p] = extend_path(path, y_phi, meta_phi['resolution'],
                               meta_phi['bandwidth'],
                               resolution_rot=meta_phi['resolution_rot'],
                               j_phi=meta_phi['j'])

        q = offsets[p]
        for n in np.flatnonzero(mask):
            for y, meta in zip(y_psi[n], meta_psi[n]):
                U_psi[q] = extend_path(
                    path, y, meta['resolution'], meta['bandwidth'],
                    append={'j': meta['j'], 'theta': meta['theta'],
                            'k': meta['k'], 'n': int(n)},
                    resolution_rot=meta['resolution_rot'])
                q += 1

    return U_phi, U_psi


__all__ = ['rotated_filters', 'wavelet_3d', 'orientation_stacks',
           'wavelet_layer_3d']
