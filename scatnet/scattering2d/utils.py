def compute_padding(M, N, J):
    """
         Precomputes the future padded size. If 2^J=M or 2^J=N,
         border effects are unavoidable in this case, and it is
         likely that the input has either a compact support,
         either is periodic.

         The padding is added on the bottom and on the right of the image
         and covers at least 2^J pixels along each axis.

         Parameters
         ----------
         M, N : int
             input size
         J : int
             scale of the low-pass filter

         Returns
         -------
         M, N : int
             padded size, both divisible by 2^J
    """
    M_padded = ((M + 2 ** J) // 2 ** J + 1) * 2 ** J
    N_padded = ((N + 2 ** J) // 2 ** J + 1) * 2 ** J

    return M_padded, N_padded


__all__ = ['compute_padding']
