import numpy as np
from sklearn.base import BaseEstimator, TransformerMixin


class ScatteringTransformerMixin(BaseEstimator, TransformerMixin):
    # Formats that yield arrays, which predict flattens per sample
    out_types = ('order_table', 'table', 'vector')

    def fit(self, x=None, y=None):
        # No fitting necessary.
        return self

    def predict(self, x):
        x = np.asarray(x)
        batch_shape = x.shape[:-1]
        x = x.reshape((-1,) + self.shape)
        Sx = self.scattering(x)
        if isinstance(Sx, list):
            # one table per order, of size (samples, paths, signal size)
            Sx = np.concatenate([
                S.reshape(S.shape[0], -1) for S in Sx if S is not None],
                axis=1)
        Sx = Sx.reshape(batch_shape + (-1,))

        return Sx

    transform = predict

    _doc_array = 'np.ndarray'

    _doc_alias_name = 'predict'

    _doc_alias_call = '.predict(x.reshape(x.shape[0], -1))'

    _doc_frontend_paragraph = r"""

        This class inherits from `BaseEstimator` and `TransformerMixin` in
        `sklearn.base`. As a result, it supports calculating the scattering
        transform by calling the `predict` and `transform` methods, which
        take flattened signals and return one row of coefficients per
        signal. By extension, it can be included as part of a scikit-learn
        `Pipeline`."""
