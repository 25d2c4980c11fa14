from ...frontend.numpy_frontend import ScatteringNumPy
from .base_frontend import ScatteringBase2D


class ScatteringNumPy2D(ScatteringNumPy, ScatteringBase2D):
    def __init__(self, J, shape, L=8, M=2, boundary='symm', options=None,
                 out_type='table', backend='numpy'):
        ScatteringNumPy.__init__(self)
        ScatteringBase2D.__init__(self, J, shape, L, M, boundary, options,
                                  out_type, backend)
        ScatteringBase2D._instantiate_backend(self, 'scatnet.scattering2d.backend.')
        ScatteringBase2D.build(self)
        ScatteringBase2D.create_filters(self)

ScatteringNumPy2D._document()


__all__ = ['ScatteringNumPy2D']
