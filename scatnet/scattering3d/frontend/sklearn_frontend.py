from ...frontend.sklearn_frontend import ScatteringTransformerMixin
from ...numpy import RotoTranslationScattering as RotoTranslationScatteringNumPy

# NOTE: Order in base classes matters here, since we want the sklearn-specific
# documentation parameters to take precedence over NP.
class RotoTranslationScatteringTransformer(ScatteringTransformerMixin,
                                           RotoTranslationScatteringNumPy):
    pass

RotoTranslationScatteringTransformer._document()


__all__ = ['RotoTranslationScatteringTransformer']
