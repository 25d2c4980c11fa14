import numpy as np
import pytest

from scatnet.core.layer import input_layer, modulus_layer
from scatnet.scattering2d.core.wavelet_layer_2d import (wavelet_2d,
                                                        wavelet_layer_2d)
from scatnet.scattering2d.filter_bank import morlet_filter_bank_2d


@pytest.fixture(scope='module')
def filters():
    return morlet_filter_bank_2d((16, 16), 2, 4, boundary='per')


def test_wavelet_2d(filters):
    rng = np.random.RandomState(0)
    x = rng.randn(16, 16)
    mask = np.zeros(len(filters.psi), dtype=bool)
    mask[[1, 6]] = True

    x_phi, x_psi, meta_phi, meta_psi = wavelet_2d(x, filters, psi_mask=mask)

    assert np.isrealobj(x_phi)
    assert x_phi.shape == (8, 8)
    assert meta_phi['resolution'] == 1
    assert meta_phi['j'] == 2

    assert x_psi[0] is None
    assert meta_psi[0] is None
    assert x_psi[1].shape == (16, 16)
    assert np.iscomplexobj(x_psi[1])
    assert meta_psi[6]['theta'] == 2
    assert meta_psi[6]['j'] == 1
    assert meta_psi[6]['resolution'] == 0


def test_wavelet_2d_direct(filters):
    """Without subsampling, the periodic transform is a circular
    convolution."""
    rng = np.random.RandomState(1)
    x = rng.randn(2, 16, 16)
    x_phi, x_psi, _, _ = wavelet_2d(x, filters, {'oversampling': 10})

    x_f = np.fft.fft2(x)
    assert np.allclose(x_phi,
                       np.fft.ifft2(x_f * filters.phi['levels'][0]).real)
    for psi, y in zip(filters.psi, x_psi):
        assert y.shape == (2, 16, 16)
        assert np.allclose(y, np.fft.ifft2(x_f * psi['levels'][0]))


def test_wavelet_layer_2d(filters):
    rng = np.random.RandomState(2)
    x = rng.randn(16, 16)
    U_phi, U_psi = wavelet_layer_2d(input_layer(x), filters)

    assert len(U_phi) == 1
    assert U_phi[0]['j_phi'] == 2
    assert U_phi[0]['j'] == ()
    assert U_phi[0]['theta'] == ()

    assert len(U_psi) == 8
    for n, path in enumerate(U_psi):
        assert path['n'] == (n,)
        assert path['j'] == (n // 4,)
        assert path['theta'] == (n % 4,)
        assert path['resolution'] == 0
        assert path['bandwidth'] == filters.psi[n]['bandwidth']


def test_progressive_paths(filters):
    rng = np.random.RandomState(3)
    x = rng.randn(16, 16)
    _, U_psi = wavelet_layer_2d(input_layer(x), filters)
    U_phi, U_psi2 = wavelet_layer_2d(modulus_layer(U_psi), filters)

    assert len(U_phi) == 8
    for path in U_phi:
        assert path['coef'].shape == (8, 8)
        assert path['resolution'] == 1

    # only scale 0 paths have children, at scale 1
    assert len(U_psi2) == 16
    for q, path in enumerate(U_psi2):
        assert path['j'] == (0, 1)
        assert path['theta'] == (q // 4, q % 4)
        assert path['n'] == (q // 4, 4 + q % 4)
        assert path['bandwidth'] == min(filters.psi[q // 4]['bandwidth'],
                                        filters.psi[4 + q % 4]['bandwidth'])

    _, U_psi2 = wavelet_layer_2d(modulus_layer(U_psi), filters,
                                 compute_psi=False)
    assert U_psi2 == []


def test_translation_equivariance(filters):
    rng = np.random.RandomState(4)
    x = rng.randn(16, 16)
    U_phi, U_psi = wavelet_layer_2d(input_layer(x), filters)
    x_shift = np.roll(x, (2, 4), axis=(0, 1))
    U_phi_shift, U_psi_shift = wavelet_layer_2d(input_layer(x_shift),
                                                filters)

    assert np.allclose(np.roll(U_phi[0]['coef'], (1, 2), axis=(0, 1)),
                       U_phi_shift[0]['coef'])
    for path, path_shift in zip(U_psi, U_psi_shift):
        assert np.allclose(np.roll(path['coef'], (2, 4), axis=(0, 1)),
                           path_shift['coef'])


def test_symmetric_boundary():
    filters = morlet_filter_bank_2d((10, 12), 2, 4)
    x = np.ones((10, 12))
    U_phi, U_psi = wavelet_layer_2d(input_layer(x), filters)

    assert U_phi[0]['coef'].shape == (5, 6)
    assert np.allclose(U_phi[0]['coef'], U_phi[0]['coef'][0, 0])
    for path in U_psi:
        assert path['coef'].shape == (10, 12)
        assert np.allclose(path['coef'], 0., atol=1e-6)
