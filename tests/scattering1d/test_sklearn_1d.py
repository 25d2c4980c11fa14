import numpy as np
import pytest
from sklearn.linear_model import LogisticRegression
from sklearn.pipeline import Pipeline

from scatnet import Scattering1D
from scatnet.sklearn import Scattering1D as ScatteringTransformer1D
from scatnet.numpy import Scattering1D as ScatteringNumPy1D
from scatnet.errors import ConfigurationError


def test_sklearn_transformer():
    rng = np.random.RandomState(0)
    x = rng.randn(4, 64)
    J = 3

    S = ScatteringNumPy1D(J, x.shape[-1], Q=(4, 1))
    Sx = S.scattering(x)
    Sx_raveled = Sx.reshape(x.shape[0], -1)

    st = ScatteringTransformer1D(J, x.shape[-1], Q=(4, 1))
    t = st.transform(x)
    assert np.allclose(Sx_raveled, t)

    assert st.fit(x) is st
    assert np.allclose(st.fit_transform(x), t)

    params = st.get_params()
    assert params['J'] == J
    assert params['M'] == 2


def test_sklearn_order_table():
    rng = np.random.RandomState(1)
    x = rng.randn(3, 64)
    st = ScatteringTransformer1D(3, 64, Q=(4, 1), out_type='order_table')
    table = ScatteringTransformer1D(3, 64, Q=(4, 1))
    assert np.allclose(st.predict(x), table.predict(x))

    st = ScatteringTransformer1D(3, 64, Q=(4, 1), out_type='vector')
    assert np.allclose(st.predict(x), table.predict(x))


def test_sklearn_entry():
    st = Scattering1D(3, 64, frontend='sklearn')
    assert isinstance(st, ScatteringTransformer1D)


def test_sklearn_pipeline():
    rng = np.random.RandomState(2)
    t = np.arange(64)
    x = np.concatenate([np.cos(0.3 * np.pi * t) + 0.1 * rng.randn(10, 64),
                        np.cos(0.05 * np.pi * t) + 0.1 * rng.randn(10, 64)])
    y = np.array([0] * 10 + [1] * 10)

    pipeline = Pipeline([('scatter', ScatteringTransformer1D(3, 64)),
                         ('clf', LogisticRegression())])
    pipeline.fit(x, y)
    assert pipeline.score(x, y) == 1.


@pytest.mark.parametrize('out_type', ['raw', 'list'])
def test_sklearn_out_type_errors(out_type):
    # only array formats can be flattened into one row per sample
    with pytest.raises(ConfigurationError) as record:
        Scattering1D(3, 64, out_type=out_type, frontend='sklearn')
    assert 'out_type must be one of' in record.value.args[0]

    S = ScatteringNumPy1D(3, 64, out_type=out_type)
    assert S.out_type == out_type
