import numpy as np
from scatnet import Scattering2D
from scatnet.errors import ConfigurationError, IncompatibleShapeError
import pytest

backends = []

from scatnet.scattering2d.backend.numpy_backend import backend
backends.append(backend)


class TestScattering2DNumpy:
    @pytest.mark.parametrize('backend', backends)
    def test_Scattering2D(self, backend):
        J, L = 2, 4
        shape = (16, 16)
        rng = np.random.RandomState(0)
        x = rng.randn(3, *shape)

        scattering = Scattering2D(J, shape, L, frontend='numpy',
                                  backend=backend)
        Sx = scattering(x)
        assert Sx.shape == (3, 25, 64)
        assert scattering.output_size(detail=True) == (1, 8, 16)

        scattering = Scattering2D(J, shape, L, M=1, frontend='numpy',
                                  backend=backend)
        S1x = scattering(x)
        assert np.allclose(S1x, Sx[..., :S1x.shape[-2], :])

    @pytest.mark.parametrize('backend', backends)
    def test_batch_shape_agnostic(self, backend):
        J = 2
        L = 4
        shape = (16, 16)

        shape_ds = tuple(n // (2 ** (J - 1)) for n in shape)
        size_ds = shape_ds[0] * shape_ds[1]

        S = Scattering2D(J, shape, L, backend=backend, frontend='numpy')

        x = np.zeros(shape)

        Sx = S(x)

        assert len(Sx.shape) == 2
        assert Sx.shape[-1] == size_ds

        n_coeffs = Sx.shape[-2]

        test_shapes = ((1,) + shape, (2,) + shape, (2, 2) + shape,
                       (2, 2, 2) + shape)

        for test_shape in test_shapes:
            x = np.zeros(test_shape)

            Sx = S(x)

            assert len(Sx.shape) == len(test_shape)
            assert Sx.shape[-1] == size_ds
            assert Sx.shape[-2] == n_coeffs
            assert Sx.shape[:-2] == test_shape[:-2]

    @pytest.mark.parametrize('backend', backends)
    def test_meta(self, backend):
        S = Scattering2D(2, (16, 16), 4, backend=backend)
        meta = S.meta()
        order = meta['order']

        assert list(order) == [0] + [1] * 8 + [2] * 16
        assert meta['theta'].shape == (25, 2)
        assert np.all(meta['theta'][order == 0] == -1)
        assert list(meta['theta'][order == 1, 0]) == [0, 1, 2, 3] * 2
        assert np.all(meta['j'][order == 2] == [0, 1])
        assert np.all(meta['j_phi'] == 2)
        assert np.all(meta['resolution'] == 1)
        assert meta['k'].shape == (25, 0)

    @pytest.mark.parametrize('backend', backends)
    def test_out_types(self, backend):
        rng = np.random.RandomState(1)
        x = rng.randn(16, 16)
        S = Scattering2D(2, (16, 16), 4, backend=backend)
        Sx = S(x)

        S.out_type = 'order_table'
        Sx_orders = S(x)
        assert [t.shape for t in Sx_orders] == [(1, 64), (8, 64), (16, 64)]
        assert np.allclose(np.concatenate(Sx_orders).reshape(Sx.shape), Sx)

        S.out_type = 'vector'
        assert np.allclose(S(x), Sx.ravel())

    @pytest.mark.parametrize('backend', backends)
    def test_boundaries(self, backend):
        rng = np.random.RandomState(2)
        x = rng.randn(16, 16)
        for boundary in ['symm', 'zero', 'per']:
            S = Scattering2D(2, (16, 16), 4, boundary=boundary,
                             backend=backend)
            Sx = S(x)
            assert Sx.shape == (25, 64)
            assert np.all(np.isfinite(Sx))

        with pytest.raises(IncompatibleShapeError):
            Scattering2D(2, (10, 10), 4, boundary='per', backend=backend)

    @pytest.mark.parametrize('backend', backends)
    def test_scattering2d_errors(self, backend):
        S = Scattering2D(3, (32, 32), frontend='numpy', backend=backend)

        with pytest.raises(TypeError) as record:
            S(None)
        assert 'input should be not empty' in record.value.args[0]

        x = np.random.randn(32)

        with pytest.raises(IncompatibleShapeError) as record:
            S(x)
        assert 'Input should have its last 2 axes' in record.value.args[0]

        x = np.random.randn(31, 31)

        with pytest.raises(IncompatibleShapeError) as record:
            S(x)
        assert 'Input should have its last 2 axes' in record.value.args[0]

        with pytest.raises(ConfigurationError) as record:
            Scattering2D(6, (32, 32), backend=backend)
        assert 'larger than 2^J' in record.value.args[0]

        with pytest.raises(ConfigurationError) as record:
            Scattering2D(2, (32, 32), L=0, backend=backend)
        assert 'L must be a positive integer' in record.value.args[0]

        with pytest.raises(ConfigurationError) as record:
            Scattering2D(2, 32, backend=backend)
        assert 'shape must be a 2-tuple' in record.value.args[0]
