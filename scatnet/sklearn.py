from .scattering1d.frontend.sklearn_frontend \
    import ScatteringTransformer1D as Scattering1D
from .scattering2d.frontend.sklearn_frontend \
    import ScatteringTransformer2D as Scattering2D
from .scattering3d.frontend.sklearn_frontend \
    import RotoTranslationScatteringTransformer as RotoTranslationScattering

Scattering1D.__module__ = 'scatnet.sklearn'
Scattering1D.__name__ = 'Scattering1D'

Scattering2D.__module__ = 'scatnet.sklearn'
Scattering2D.__name__ = 'Scattering2D'

RotoTranslationScattering.__module__ = 'scatnet.sklearn'
RotoTranslationScattering.__name__ = 'RotoTranslationScattering'

__all__ = ['Scattering1D', 'Scattering2D', 'RotoTranslationScattering']
