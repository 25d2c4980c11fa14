def preprocess_signal(backend, x, size_padded, boundary, precision='double',
                      **axis_kwargs):
    """Pads a signal and computes its Fourier transform.

    Parameters
    ----------
    backend : module
        Backend of the dimension of the signal.
    x : array
        Signal at its current resolution.
    size_padded : tuple of ints
        Padded shape at the current resolution.
    boundary : str
        Boundary condition of the filter bank ('symm', 'zero' or 'per').
    precision : str
        'double' or 'single'.

    Returns
    -------
    x_hat : array
        Complex Fourier transform of the padded signal.
    """
    x = backend.cast(x, precision)
    x = backend.pad(x, size_padded, boundary, **axis_kwargs)
    return backend.fft(x, **axis_kwargs)


def unpad_shape(signal_shape, downsampling_rate):
    """Shape of a signal of shape `signal_shape` once subsampled by
    2 ** downsampling_rate."""
    return tuple(1 + (n - 1) // 2 ** downsampling_rate for n in signal_shape)


def convolution(backend, x_hat, filter_f, downsampling_rate, signal_shape,
                real=False, **axis_kwargs):
    """Convolves a signal with a filter and subsamples the result.

    The product is computed in the Fourier domain, subsampled by
    2 ** downsampling_rate through periodization, transformed back and
    unpadded to the size of the original signal at the new resolution.

    Parameters
    ----------
    backend : module
        Backend of the dimension of the signal.
    x_hat : array
        Output of `preprocess_signal`.
    filter_f : array
        Filter in the Fourier domain, at the resolution of the signal.
    downsampling_rate : int >= 0
        log2 of the subsampling factor.
    signal_shape : tuple of ints
        Unpadded shape of the signal at its current resolution.
    real : boolean
        Whether to keep only the real part (low-pass branch).

    Returns
    -------
    y : array
        Subsampled and unpadded convolution, real if `real` is True and
        complex otherwise.
    """
    y_c = backend.cdgmm(x_hat, filter_f, **axis_kwargs)
    y_hat = backend.subsample_fourier(y_c, 2 ** downsampling_rate,
                                      **axis_kwargs)
    y = backend.ifft(y_hat, **axis_kwargs)
    if real:
        y = backend.real(y)
    return backend.unpad(y, unpad_shape(signal_shape, downsampling_rate),
                         **axis_kwargs)


def convolve_subsample(backend, x, filter_f, downsampling_rate, size_padded,
                       boundary, real=False, precision='double'):
    """Band-limited convolution of a single signal with a single filter.

    Shorthand for `preprocess_signal` followed by `convolution`; use those
    two directly to share the Fourier transform of x between filters.
    """
    x_hat = preprocess_signal(backend, x, size_padded, boundary, precision)
    return convolution(backend, x_hat, filter_f, downsampling_rate,
                       backend.signal_shape(x), real=real)


__all__ = ['preprocess_signal', 'unpad_shape', 'convolution',
           'convolve_subsample']
