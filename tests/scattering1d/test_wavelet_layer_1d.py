import math

import numpy as np
import pytest

from scatnet.core.layer import input_layer
from scatnet.errors import ConfigurationError
from scatnet.scattering1d.core.wavelet_layer_1d import (wavelet_1d,
                                                        wavelet_layer_1d)
from scatnet.scattering1d.filter_bank import morlet_filter_bank_1d


@pytest.fixture(scope='module')
def filters():
    return morlet_filter_bank_1d(128, 8, 2, boundary='per')


def test_wavelet_1d(filters):
    rng = np.random.RandomState(0)
    x = rng.randn(128)
    mask = np.zeros(len(filters.psi), dtype=bool)
    mask[[0, 3]] = True

    x_phi, x_psi, meta_phi, meta_psi = wavelet_1d(x, filters, psi_mask=mask)

    assert np.isrealobj(x_phi)
    # phi at scale 8 / 2 = 4 octaves, one octave of oversampling
    assert meta_phi['resolution'] == 3
    assert x_phi.shape == (16,)
    assert meta_phi['j'] == 8

    assert len(x_psi) == len(meta_psi) == len(filters.psi)
    for n in range(len(filters.psi)):
        if mask[n]:
            assert np.iscomplexobj(x_psi[n])
            assert meta_psi[n]['j'] == filters.psi[n]['j']
            assert meta_psi[n]['bandwidth'] == filters.psi[n]['bandwidth']
        else:
            assert x_psi[n] is None
            assert meta_psi[n] is None


def test_wavelet_1d_direct(filters):
    """Without subsampling, the periodic transform is a circular
    convolution."""
    rng = np.random.RandomState(1)
    x = rng.randn(3, 128)
    x_phi, x_psi, meta_phi, _ = wavelet_1d(x, filters, {'oversampling': 10})

    x_f = np.fft.fft(x, axis=-1)
    assert meta_phi['resolution'] == 0
    assert np.allclose(x_phi,
                       np.fft.ifft(x_f * filters.phi['levels'][0]).real)
    for psi, y in zip(filters.psi, x_psi):
        assert np.allclose(y, np.fft.ifft(x_f * psi['levels'][0]))


def test_wavelet_1d_filter_format():
    rng = np.random.RandomState(2)
    x = rng.randn(128)
    multires = morlet_filter_bank_1d(128, 8, 2, boundary='per')
    single = morlet_filter_bank_1d(128, 8, 2, boundary='per',
                                   filter_format='fourier')

    # a signal at resolution 2 uses the periodized filters
    x_sub = x[::4]
    out_multires = wavelet_1d(x_sub, multires, resolution=2)
    out_single = wavelet_1d(x_sub, single, resolution=2)

    assert np.allclose(out_multires[0], out_single[0])
    for y_multires, y_single in zip(out_multires[1], out_single[1]):
        assert np.allclose(y_multires, y_single)


def test_wavelet_layer_1d(filters):
    rng = np.random.RandomState(3)
    x = rng.randn(128)
    U_phi, U_psi = wavelet_layer_1d(input_layer(x), filters)

    assert len(U_phi) == 1
    assert U_phi[0]['j_phi'] == 8
    assert U_phi[0]['j'] == ()
    assert U_phi[0]['bandwidth'] == filters.phi['bandwidth']

    # every wavelet lies within the full band
    assert len(U_psi) == len(filters.psi)
    _, x_psi, _, meta_psi = wavelet_1d(x, filters)
    for n, path in enumerate(U_psi):
        assert path['n'] == (n,)
        assert path['j'] == (filters.psi[n]['j'],)
        assert path['resolution'] == meta_psi[n]['resolution']
        assert path['bandwidth'] == filters.psi[n]['bandwidth']
        assert 'j_phi' not in path
        assert np.allclose(path['coef'], x_psi[n])


def test_wavelet_layer_1d_second_order(filters):
    rng = np.random.RandomState(4)
    x = rng.randn(128)
    _, U_psi = wavelet_layer_1d(input_layer(x), filters)
    U = [dict(path, coef=np.abs(path['coef'])) for path in U_psi]

    U_phi, U_psi2 = wavelet_layer_1d(U, filters)
    assert len(U_phi) == len(U)
    for parent, path in zip(U, U_phi):
        assert path['n'] == parent['n']
        assert path['resolution'] >= parent['resolution']

    expected = sum(
        sum(psi['xi'] < parent['bandwidth'] for psi in filters.psi)
        for parent in U)
    assert len(U_psi2) == expected
    for path in U_psi2:
        assert len(path['n']) == 2
        parent_bandwidth = filters.psi[path['n'][0]]['bandwidth']
        assert filters.psi[path['n'][1]]['xi'] < parent_bandwidth
        assert path['bandwidth'] <= parent_bandwidth

    _, U_psi2 = wavelet_layer_1d(U, filters, compute_psi=False)
    assert U_psi2 == []


def test_shift_equivariance(filters):
    rng = np.random.RandomState(5)
    x = rng.randn(128)
    U_phi, U_psi = wavelet_layer_1d(input_layer(x), filters)
    U_phi_shift, U_psi_shift = wavelet_layer_1d(
        input_layer(np.roll(x, 16)), filters)

    # shifts by a multiple of the subsampling factor commute with the layer
    shift = 16 // 2 ** U_phi[0]['resolution']
    assert np.allclose(np.roll(U_phi[0]['coef'], shift),
                       U_phi_shift[0]['coef'])
    for path, path_shift in zip(U_psi, U_psi_shift):
        shift = 16 // 2 ** path['resolution']
        assert np.allclose(np.roll(path['coef'], shift), path_shift['coef'])


def test_symmetric_boundary():
    filters = morlet_filter_bank_1d(100, 6, 1)
    assert filters.size[0] > 100
    x = np.ones(100)
    U_phi, U_psi = wavelet_layer_1d(input_layer(x), filters)

    # a constant signal is preserved by the symmetric extension
    assert U_phi[0]['coef'].shape == (1 + 99 // 2 ** 5,)
    assert np.allclose(U_phi[0]['coef'], U_phi[0]['coef'][0])
    for path in U_psi:
        assert np.allclose(path['coef'], 0.)


def test_user_paths(filters):
    x = np.ones(128)
    U_phi, _ = wavelet_layer_1d([{'coef': x}], filters)
    assert U_phi[0]['resolution'] == 3

    with pytest.raises(ConfigurationError) as ve:
        wavelet_layer_1d([{'signal': x}], filters)
    assert "'coef'" in ve.value.args[0]
