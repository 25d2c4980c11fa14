from ...backend.numpy_backend import NumpyBackend
from ...errors import IncompatibleShapeError, UnsupportedModeError


class NumpyBackend1D(NumpyBackend):
    ndim = 1

    @classmethod
    def subsample_fourier(cls, x, k, axis=-1):
        """Subsampling in the Fourier domain
        Subsampling in the temporal domain amounts to periodization in the Fourier
        domain, so the input is periodized according to the subsampling factor.
        Parameters
        ----------
        x : tensor
            Input tensor, complex, whose `axis` holds the frequency index in
            the standard FFT ordering. Its length along `axis` should be
            divisible by k.
        k : int
            The subsampling factor.
        axis : int
            Axis along which to subsample.

        Returns
        -------
        res : tensor
            The input tensor periodized along `axis` to yield a tensor of
            size x.shape[axis] // k along that dimension.
        """
        if k == 1:
            return x
        cls.complex_check(x)

        axis = axis if axis >= 0 else x.ndim + axis  # ensure positive
        s = list(x.shape)
        N = s[axis]
        if N % k:
            raise IncompatibleShapeError(
                'Cannot subsample a signal of length {} by {}.'.format(N, k))
        re = (k, N // k)
        s.pop(axis)
        s.insert(axis, re[1])
        s.insert(axis, re[0])

        res = cls._np.reshape(x, s).mean(axis=axis)
        return res

    @classmethod
    def pad(cls, x, size_padded, boundary='symm', axis=-1):
        """Pad 1D tensors on the right

        Parameters
        ----------
        x : tensor
            Input tensor, padded along `axis`.
        size_padded : tuple of one int
            Length of the padded signal.
        boundary : str
            'symm' for a symmetric (half-sample) reflection, 'zero' for zero
            padding and 'per' for periodic signals, which are not padded.
        axis : int
            Axis to pad.

        Returns
        -------
        output : tensor
            The padded tensor.
        """
        N = x.shape[axis]
        N_padded = size_padded[0]
        if N > N_padded:
            raise IncompatibleShapeError(
                'Signal of length {} exceeds the filter support {}.'.format(
                    N, N_padded))

        if boundary == 'per':
            if N != N_padded:
                raise UnsupportedModeError(
                    "Periodic boundary requires signals of length {}, "
                    "got {}.".format(N_padded, N))
            return x
        elif boundary == 'symm':
            pad_mode = 'symmetric'
        elif boundary == 'zero':
            pad_mode = 'constant'
        else:
            raise UnsupportedModeError(
                "Unknown boundary '{}'.".format(boundary))

        paddings = [(0, 0)] * x.ndim
        paddings[axis] = (0, N_padded - N)

        output = cls._np.pad(x, paddings, mode=pad_mode)
        return output

    @staticmethod
    def unpad(x, shape, axis=-1):
        """Unpad 1D tensor

        Keeps the first `shape[0]` samples along `axis`.
        """
        slc = [slice(None)] * x.ndim
        slc[axis] = slice(0, shape[0])
        return x[tuple(slc)]

    @classmethod
    def cdgmm(cls, A, B, axis=-1):
        if axis in (-1, A.ndim - 1):
            return super().cdgmm(A, B)
        A = cls._np.moveaxis(A, axis, -1)
        return cls._np.moveaxis(super().cdgmm(A, B), -1, axis)

    @staticmethod
    def periodize_filter(filter_f, res):
        """Periodizes a filter given in the Fourier domain at resolution `res`."""
        if filter_f.shape[-1] % 2 ** res:
            raise IncompatibleShapeError(
                'Cannot periodize a filter of length {} at resolution {}.'.format(
                    filter_f.shape[-1], res))
        return filter_f.reshape(2 ** res, -1).sum(axis=0)

    @staticmethod
    def signal_shape(x, axis=-1):
        return (x.shape[axis],)

    @classmethod
    def fft(cls, x, axis=-1):
        return cls._fft.fft(x, axis=axis, workers=-1)

    @classmethod
    def ifft(cls, x, axis=-1):
        cls.complex_check(x)

        return cls._fft.ifft(x, axis=axis, workers=-1)


backend = NumpyBackend1D
