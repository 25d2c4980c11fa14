import math

import numpy as np
import pytest

from scatnet.core.cascade import (LayerKind, LayerOperator, apply_operator,
                                  build_cascade, scat, split_scat_options,
                                  wavelet_factory_1d)
from scatnet.core.filter_bank import FilterBank
from scatnet.core.layer import FULL_BANDWIDTH, input_layer
from scatnet.errors import ConfigurationError, UnsupportedModeError


def bump(N, center, width):
    """Gaussian bump on the DFT grid of size N, periodic in frequency."""
    omega = np.arange(N)
    dist = np.minimum(np.abs(omega - center), N - np.abs(omega - center))
    return np.exp(-dist ** 2 / (2. * width ** 2))


def toy_bank(N=32):
    phi = {'levels': [bump(N, 0, 1.)], 'j': 3, 'xi': 0.,
           'bandwidth': math.pi / 4}
    psi1 = bump(N, N // 4, 1.)
    psi1[0] = 0.
    psi2 = bump(N, N // 8, 0.5)
    psi2[0] = 0.
    psi = ({'levels': [psi1], 'j': 1, 'xi': math.pi / 2,
            'bandwidth': math.pi / 8, 'theta': None},
           {'levels': [psi2], 'j': 2, 'xi': math.pi / 4,
            'bandwidth': math.pi / 16, 'theta': None})
    return FilterBank(phi=phi, psi=psi, Q=1, size=(N,), boundary='per',
                      filter_format='fourier', L=0)


def flat_bank(N, xi, j, bandwidth=10.):
    """Bank of all-pass filters, so wavelet outputs copy their input."""
    psi = tuple({'levels': [np.ones(N)], 'j': j_p, 'xi': xi_p,
                 'bandwidth': bandwidth, 'theta': None}
                for xi_p, j_p in zip(xi, j))
    phi = {'levels': [np.ones(N)], 'j': max(j) + 1, 'xi': 0.,
           'bandwidth': bandwidth}
    return FilterBank(phi=phi, psi=psi, Q=1, size=(N,), boundary='per',
                      filter_format='fourier', L=0)


def test_build_cascade():
    bank = toy_bank()
    ops = build_cascade(bank, 2)
    assert len(ops) == 3
    assert all(op.kind is LayerKind.DIM1 for op in ops)
    assert all(op.filters is bank for op in ops)

    other = toy_bank(64)
    ops = build_cascade([bank, other], 3, kind='dim1')
    assert [op.filters is bank for op in ops] == [True, False, False, False]
    assert all(op.filters is other for op in ops[1:])

    ops = build_cascade(bank, 0)
    assert len(ops) == 1

    ops = build_cascade(bank, 2, LayerKind.ROTO_TRANSLATION, filters_rot=other)
    assert [op.kind for op in ops] == [LayerKind.DIM2,
                                      LayerKind.ROTO_TRANSLATION,
                                      LayerKind.ROTO_TRANSLATION]
    assert ops[0].filters_rot is None
    assert ops[1].filters_rot is other


def test_build_cascade_errors():
    bank = toy_bank()

    with pytest.raises(ConfigurationError) as ve:
        build_cascade(bank, -1)
    assert 'nonnegative integer' in ve.value.args[0]

    with pytest.raises(ConfigurationError):
        build_cascade(bank, 1.5)

    with pytest.raises(ConfigurationError) as ve:
        build_cascade(bank, 2, kind='dim4')
    assert 'Unknown layer kind' in ve.value.args[0]

    with pytest.raises(ConfigurationError):
        build_cascade([], 2)

    with pytest.raises(ConfigurationError) as ve:
        build_cascade(bank, 2, kind=LayerKind.ROTO_TRANSLATION)
    assert 'angular filter bank' in ve.value.args[0]

    with pytest.raises(ConfigurationError):
        build_cascade(bank, 2, filters_rot=bank)

    broken = bank._replace(phi={'levels': bank.phi['levels'], 'j': 3})
    with pytest.raises(ConfigurationError) as ve:
        build_cascade(broken, 2)
    assert "'xi'" in ve.value.args[0]

    with pytest.raises(UnsupportedModeError):
        build_cascade(bank._replace(boundary='wrap'), 2)


def test_split_scat_options():
    M, options = split_scat_options({'M': 3, 'oversampling': 0})
    assert M == 3
    assert options.oversampling == 0

    M, options = split_scat_options()
    assert M is None
    assert options.resolution == 0

    with pytest.raises(ConfigurationError):
        split_scat_options({'J': 3})


def test_toy_composition():
    """A constant signal has no energy outside the zero frequency."""
    ops = build_cascade(toy_bank(), 2)
    x = 3. * np.ones(32)
    S, U = scat(x, ops)

    assert len(S) == 3
    assert len(U) == 3

    # order 0: the low-pass filter keeps the constant, subsampled by 4
    assert len(S[0]) == 1
    assert S[0][0]['coef'].shape == (8,)
    assert np.allclose(S[0][0]['coef'], 3.)
    assert S[0][0]['j_phi'] == 3
    assert S[0][0]['resolution'] == 2

    # order 1: both wavelets reach the full band input, but vanish on it
    assert len(S[1]) == 2
    assert [path['j'] for path in S[1]] == [(1,), (2,)]
    assert [path['n'] for path in S[1]] == [(0,), (1,)]
    assert [path['resolution'] for path in U[1]] == [0, 1]
    assert [path['bandwidth'] for path in U[1]] == [math.pi / 8,
                                                   math.pi / 16]
    for path in S[1]:
        assert path['coef'].shape == (8,)
        assert np.allclose(path['coef'], 0.)

    # order 2: no wavelet lies within the bandwidth of order 1 paths
    assert S[2] == []
    assert U[2] == []


def test_children_ordering():
    """Children are grouped by parent, in the parent order, then by
    wavelet index."""
    bank = flat_bank(16, xi=[3., 2., 1., 0.5], j=[1, 1, 2, 2])
    U = []
    for p, bandwidth in enumerate([4., 1.5, 2.5]):
        U += input_layer((p + 1.) * np.ones(16), bandwidth=bandwidth)

    U_phi, U_psi = apply_operator(LayerOperator(LayerKind.DIM1, bank), U)

    assert len(U_phi) == 3
    for p, path in enumerate(U_phi):
        assert np.allclose(path['coef'], p + 1.)
        assert path['j'] == ()

    assert [path['n'] for path in U_psi] == [
        (0,), (1,), (2,), (3,), (2,), (3,), (1,), (2,), (3,)]
    assert [path['bandwidth'] for path in U_psi] == [4.] * 4 + [1.5] * 2 \
        + [2.5] * 3
    parents = [int(round(path['coef'].real.mean())) for path in U_psi]
    assert parents == [1, 1, 1, 1, 2, 2, 3, 3, 3]
    for path in U_psi:
        assert np.iscomplexobj(path['coef'])


def test_compute_psi():
    bank = flat_bank(16, xi=[3., 2.], j=[1, 2])
    U_phi, U_psi = apply_operator(LayerOperator(LayerKind.DIM1, bank),
                                  input_layer(np.ones(16)),
                                  compute_psi=False)
    assert len(U_phi) == 1
    assert U_psi == []


def test_path_margin():
    bank = flat_bank(16, xi=[3., 2., 1.], j=[1, 1, 2])
    U = input_layer(np.ones(16), bandwidth=1.5)
    op = LayerOperator(LayerKind.DIM1, bank)

    _, U_psi = apply_operator(op, U)
    assert [path['n'] for path in U_psi] == [(2,)]

    _, U_psi = apply_operator(op, U, {'path_margin': 1})
    assert [path['n'] for path in U_psi] == [(1,), (2,)]


def test_bandwidth_pruning_1d():
    N = 256
    ops, filters = wavelet_factory_1d(
        N, {'J': (8, 4), 'Q': (2, 1), 'boundary': 'symm'}, {'M': 3})
    assert len(ops) == 4
    assert len(filters) == 2

    rng = np.random.RandomState(42)
    x = rng.randn(N)
    S, U = scat(x, ops)

    assert len(S) == 4
    assert len(U) == 4
    for m in range(1, len(U)):
        for path in U[m]:
            bandwidths = [filters[min(k, 1)].psi[n]['bandwidth']
                          for k, n in enumerate(path['n'])]
            assert path['bandwidth'] == min([FULL_BANDWIDTH] + bandwidths)
            # the last wavelet lies within the band of its parent
            parent_bandwidth = min([FULL_BANDWIDTH] + bandwidths[:-1])
            last = filters[min(m - 1, 1)].psi[path['n'][-1]]
            assert last['xi'] < parent_bandwidth
            assert len(path['j']) == m

    # every wavelet passing the rule is applied to every parent
    for m in range(1, len(U)):
        bank = filters[min(m, 1)]
        expected = sum(
            sum(psi['xi'] < parent['bandwidth'] for psi in bank.psi)
            for parent in U[m])
        if m + 1 < len(U):
            assert len(U[m + 1]) == expected

    for m, layer in enumerate(S):
        assert len(layer) == len(U[m])
        for path in layer:
            assert path['coef'].shape[-1] <= N


def test_order_count_mismatch():
    ops = build_cascade(toy_bank(), 2)
    with pytest.raises(ConfigurationError) as ve:
        scat(np.ones(32), ops, {'M': 1})
    assert 'does not match' in ve.value.args[0]

    S, _ = scat(np.ones(32), ops, {'M': 2})
    assert len(S) == 3

    with pytest.raises(ConfigurationError):
        scat(np.ones(32), [])


def test_scat_input_checks():
    ops = build_cascade(toy_bank(), 1)
    with pytest.raises(TypeError):
        scat([1.] * 32, ops)


def test_batch():
    ops = build_cascade(toy_bank(), 1)
    rng = np.random.RandomState(0)
    x = rng.randn(3, 32)
    S, _ = scat(x, ops)
    S_single, _ = scat(x[1], ops)

    for layer, layer_single in zip(S, S_single):
        assert len(layer) == len(layer_single)
        for path, path_single in zip(layer, layer_single):
            assert path['coef'].shape[0] == 3
            assert np.allclose(path['coef'][1], path_single['coef'])


def test_input_resolution():
    ops = build_cascade(toy_bank(), 0)
    # a signal declared at resolution 1 is filtered with the periodized bank
    S, _ = scat(np.ones(16), ops, {'resolution': 1})
    assert S[0][0]['resolution'] == 2
    assert S[0][0]['coef'].shape == (8,)
    assert np.allclose(S[0][0]['coef'], 1.)


def test_input_bandwidth():
    N = 256
    ops, filters = wavelet_factory_1d(
        N, {'J': (8, 4), 'Q': (2, 1), 'boundary': 'symm'}, {'M': 1})
    x = np.random.RandomState(3).randn(N)

    _, U = scat(x, ops)
    assert len(U[1]) == len(filters[0].psi)

    # a band-limited input skips the wavelets centered above its band
    bandwidth = 1.
    _, U = scat(x, ops, bandwidth=bandwidth)
    active = [n for n, psi in enumerate(filters[0].psi)
              if psi['xi'] < bandwidth]
    assert 0 < len(active) < len(filters[0].psi)
    assert [path['n'] for path in U[1]] == [(n,) for n in active]
    assert all(path['bandwidth'] <= bandwidth for path in U[1])
