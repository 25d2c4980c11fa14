from ...frontend.numpy_frontend import ScatteringNumPy
from .base_frontend import RotoTranslationScatteringBase


class RotoTranslationScatteringNumPy(ScatteringNumPy,
                                     RotoTranslationScatteringBase):
    def __init__(self, J, shape, L=8, M=2, J_rot=3, boundary='symm',
                 options=None, out_type='order_table', backend='numpy'):
        ScatteringNumPy.__init__(self)
        RotoTranslationScatteringBase.__init__(self, J, shape, L, M, J_rot,
                                               boundary, options, out_type,
                                               backend)
        # the spatial backend, the angular axis uses the 1D one
        RotoTranslationScatteringBase._instantiate_backend(self, 'scatnet.scattering2d.backend.')
        RotoTranslationScatteringBase.build(self)
        RotoTranslationScatteringBase.create_filters(self)

RotoTranslationScatteringNumPy._document()


__all__ = ['RotoTranslationScatteringNumPy']
