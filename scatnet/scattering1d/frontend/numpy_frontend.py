from ...frontend.numpy_frontend import ScatteringNumPy
from .base_frontend import ScatteringBase1D


class ScatteringNumPy1D(ScatteringNumPy, ScatteringBase1D):
    def __init__(self, J, shape, Q=(8, 1), M=2, P=None, boundary='symm',
                 options=None, out_type='table', backend='numpy'):
        ScatteringNumPy.__init__(self)
        ScatteringBase1D.__init__(self, J, shape, Q, M, P, boundary, options,
                                  out_type, backend)
        ScatteringBase1D._instantiate_backend(self, 'scatnet.scattering1d.backend.')
        ScatteringBase1D.build(self)
        ScatteringBase1D.create_filters(self)

ScatteringNumPy1D._document()


__all__ = ['ScatteringNumPy1D']
