from .scattering1d.frontend.numpy_frontend import ScatteringNumPy1D as Scattering1D
from .scattering2d.frontend.numpy_frontend import ScatteringNumPy2D as Scattering2D
from .scattering3d.frontend.numpy_frontend \
        import RotoTranslationScatteringNumPy as RotoTranslationScattering

Scattering1D.__module__ = 'scatnet.numpy'
Scattering1D.__name__ = 'Scattering1D'

Scattering2D.__module__ = 'scatnet.numpy'
Scattering2D.__name__ = 'Scattering2D'

RotoTranslationScattering.__module__ = 'scatnet.numpy'
RotoTranslationScattering.__name__ = 'RotoTranslationScattering'

__all__ = ['Scattering1D', 'Scattering2D', 'RotoTranslationScattering']
