from ...backend.numpy_backend import NumpyBackend
from ...errors import IncompatibleShapeError, UnsupportedModeError


class NumpyBackend2D(NumpyBackend):
    ndim = 2

    @classmethod
    def subsample_fourier(cls, x, k):
        """ Subsampling of a 2D image performed in the Fourier domain.

        Subsampling in the spatial domain amounts to periodization
        in the Fourier domain, hence the formula.

        Parameters
        ----------
        x : tensor_like
            input tensor with at least two dimensions.
        k : int
            integer such that x is subsampled by k along the spatial variables.

        Returns
        -------
        out : tensor_like
            Tensor such that its Fourier transform is the Fourier
            transform of a subsampled version of x, i.e. in
            F^{-1}(out)[u1, u2] = F^{-1}(x)[u1 * k, u2 * k]

        """
        if k == 1:
            return x
        cls.complex_check(x)

        M, N = x.shape[-2:]
        if M % k or N % k:
            raise IncompatibleShapeError(
                'Cannot subsample an image of size {} by {}.'.format((M, N), k))

        y = x.reshape(x.shape[:-2] + (k, M // k, k, N // k))

        out = y.mean(axis=(-4, -2))

        return out

    @classmethod
    def pad(cls, x, size_padded, boundary='symm'):
        """Pads the last two axes of x on the bottom and on the right.

        Parameters
        ----------
        x : tensor_like
            input image(s), of size (..., M, N)
        size_padded : tuple of 2 ints
            size of the padded image
        boundary : str
            'symm', 'zero' or 'per'

        Returns
        -------
        output : tensor_like
            padded image(s), of size (..., *size_padded)
        """
        M, N = x.shape[-2:]
        M_padded, N_padded = size_padded
        if M > M_padded or N > N_padded:
            raise IncompatibleShapeError(
                'Image of size {} exceeds the filter support {}.'.format(
                    (M, N), tuple(size_padded)))

        if boundary == 'per':
            if (M, N) != (M_padded, N_padded):
                raise UnsupportedModeError(
                    "Periodic boundary requires images of size {}, "
                    "got {}.".format(tuple(size_padded), (M, N)))
            return x
        elif boundary == 'symm':
            pad_mode = 'symmetric'
        elif boundary == 'zero':
            pad_mode = 'constant'
        else:
            raise UnsupportedModeError(
                "Unknown boundary '{}'.".format(boundary))

        paddings = ((0, 0),) * (x.ndim - 2)
        paddings += ((0, M_padded - M), (0, N_padded - N))

        output = cls._np.pad(x, paddings, mode=pad_mode)
        return output

    @staticmethod
    def unpad(in_, shape):
        """
            Keeps the top-left `shape` block of the input tensor

            Parameters
            ----------
            in_ : tensor_like
                input tensor
            shape : tuple of 2 ints
                size of the block to keep

            Returns
            -------
            in_[..., :shape[0], :shape[1]]

        """
        return in_[..., :shape[0], :shape[1]]

    @staticmethod
    def periodize_filter(filter_f, res):
        """Periodizes a filter given in the Fourier domain.

        Parameters
        ----------
        filter_f : numpy array
            filter of size (M, N) to periodize in Fourier
        res : int
            resolution to which the filter is cropped.

        Returns
        -------
        crop : numpy array
            filter of size (M // 2 ** res, N // 2 ** res), sum of the
            2 ** res x 2 ** res periods of filter_f
        """
        M, N = filter_f.shape
        k = 2 ** res
        if M % k or N % k:
            raise IncompatibleShapeError(
                'Cannot periodize a filter of size {} at resolution {}.'.format(
                    (M, N), res))
        return filter_f.reshape(k, M // k, k, N // k).sum(axis=(0, 2))

    @staticmethod
    def signal_shape(x):
        return tuple(x.shape[-2:])

    @classmethod
    def fft(cls, x):
        return cls._fft.fft2(x, workers=-1)

    @classmethod
    def ifft(cls, x):
        cls.complex_check(x)
        return cls._fft.ifft2(x, workers=-1)


backend = NumpyBackend2D
