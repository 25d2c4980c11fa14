import numpy
import scipy.fft

from .base_backend import BaseBackend, backend_types, backend_array

numpy_backend_function_names = [
    "moveaxis",
    "stack",
    "flip",
    "roll",
    "shape",
]


class NumpyBackendType(type):
    def __getattr__(cls, name):
        if name in backend_types:
            return getattr(cls._np, name)
        elif name in backend_array:
            return getattr(cls._np, name)
        elif name in numpy_backend_function_names:
            return getattr(cls._np, name)
        raise AttributeError("Backend {} has no attribute {}".format(
            cls.name, name))


class NumpyBackend(BaseBackend, metaclass=NumpyBackendType):
    _np = numpy
    _fft = scipy.fft

    name = 'numpy'

    @staticmethod
    def input_checks(x):
        if x is None:
            raise TypeError('The input should be not empty.')

        if not isinstance(x, numpy.ndarray):
            raise TypeError('The input should be a numpy array, got type '
                            '{}'.format(type(x)))

    @classmethod
    def complex_check(cls, x):
        if not cls._is_complex(x):
            raise TypeError('The input should be complex.')

    @classmethod
    def real_check(cls, x):
        if not cls._is_real(x):
            raise TypeError('The input should be real.')

    @classmethod
    def _is_complex(cls, x):
        return (x.dtype == cls._np.complex64) or (x.dtype == cls._np.complex128)

    @classmethod
    def _is_real(cls, x):
        return (x.dtype == cls._np.float32) or (x.dtype == cls._np.float64)

    @classmethod
    def cast(cls, x, precision='double'):
        """Casts a real or complex array to the requested precision.

        Integer arrays are promoted to floating point.
        """
        x = cls._np.asarray(x)
        if cls._is_complex(x):
            dtype = cls._np.complex64 if precision == 'single' else cls._np.complex128
        else:
            dtype = cls._np.float32 if precision == 'single' else cls._np.float64
        return x.astype(dtype, copy=False)

    @classmethod
    def modulus(cls, x):
        """
            This function implements a modulus transform for complex numbers.

            Usage
            -----
            x_mod = modulus(x)

            Parameters
            ---------
            x: input complex tensor.

            Returns
            -------
            output: a real tensor equal to the modulus of x.

        """
        return cls._np.abs(x)

    @classmethod
    def cdgmm(cls, A, B):
        """
            Complex pointwise multiplication between (batched) tensor A and tensor B.

            Parameters
            ----------
            A : tensor
                A is a complex tensor of size (..., M, N)
            B : tensor
                B is a complex tensor of size (M, N) or real tensor of (M, N)

            Returns
            -------
            C : tensor
                output tensor of size (..., M, N) such that:
                C[..., m, n] = A[..., m, n] * B[m, n]

        """
        if not cls._is_complex(A):
            raise TypeError('The first input must be complex.')

        if A.shape[-len(B.shape):] != B.shape[:]:
            raise RuntimeError('The inputs are not compatible for '
                               'multiplication.')

        if not cls._is_complex(B) and not cls._is_real(B):
            raise TypeError('The second input must be complex or real.')

        # keep the precision of the signal
        if cls._is_complex(B):
            B = B.astype(A.dtype, copy=False)
        else:
            B = B.astype(A.real.dtype, copy=False)

        return A * B
