import numbers

import numpy as np

from ...core.cascade import wavelet_factory_1d
from ...errors import ConfigurationError
from ...frontend.base_frontend import ScatteringBase
from ...options import parse_options


class ScatteringBase1D(ScatteringBase):
    signal_ndim = 1

    def __init__(self, J, shape, Q=(8, 1), M=2, P=None, boundary='symm',
                 options=None, out_type='table', backend=None):
        super(ScatteringBase1D, self).__init__()
        self.J = J
        self.shape = shape
        self.Q = Q
        self.M = M
        self.P = P
        self.boundary = boundary
        self.options = options
        self.out_type = out_type
        self.backend = backend

    def build(self):
        """Checks the parameters of the transform.

        This function is called automatically during object creation and no
        subsequent calls are therefore needed.
        """
        self.shape = self._check_shape(self.shape)

        if isinstance(self.J, bool) or not isinstance(self.J, numbers.Integral) \
                or self.J < 1:
            raise ConfigurationError(
                "J must be a positive integer. Got: {}".format(self.J))
        if 2 ** self.J > self.shape[0]:
            raise ConfigurationError(
                "The averaging scale 2**J = {} cannot exceed the signal "
                "length {}.".format(2 ** self.J, self.shape[0]))

        if isinstance(self.Q, numbers.Integral):
            self.Q = (self.Q, 1)
        elif isinstance(self.Q, list):
            self.Q = tuple(self.Q)
        if not isinstance(self.Q, tuple) or not self.Q:
            raise ConfigurationError("Q must be an integer or a tuple")
        if np.any(np.array(self.Q) < 1):
            raise ConfigurationError(
                'Q must always be >= 1, got {}'.format(self.Q))

        self.options = parse_options(self.options)
        self._check_runtime_args()

    def create_filters(self):
        # J is given in octaves, the filter banks count it in 1/Q octaves
        filt_opt = {'J': tuple(self.J * Q for Q in self.Q), 'Q': self.Q,
                    'boundary': self.boundary}
        if self.P is not None:
            filt_opt['P'] = self.P
        self.operators, self.filters = wavelet_factory_1d(
            self.shape[0], filt_opt, {'M': self.M})

    _doc_class = \
    r"""The 1D scattering transform

        The scattering transform computes a cascade of wavelet transforms
        alternated with a complex modulus non-linearity. The scattering
        transform of a 1D signal :math:`x(t)` of order M is

            $S_J x = [S_J^{{(0)}} x, S_J^{{(1)}} x, \ldots, S_J^{{(M)}} x]$

        where

            $S_J^{{(m)}} x(t, \lambda_1, \ldots, \lambda_m) =
            |\,|x \star \psi_{{\lambda_1}}| \star \ldots \star
            \psi_{{\lambda_m}}| \star \phi_J$.

        A wavelet is only applied to a path if its center frequency lies
        below the bandwidth of the path, so that the number of paths stays
        small at high orders.{frontend_paragraph}

        Given an input `{array}` `x` of shape `(B, N)`, where `B` is the
        number of signals to transform (the batch size) and `N` is the length
        of the signal, we compute its scattering transform by passing it to
        the `scattering` method (or calling the alias `{alias_name}`). Note
        that `B` can be one, in which case it may be omitted, giving an input
        of shape `(N,)`.

        Example
        -------
        ::

            # Define a Scattering1D object.
            S = Scattering1D(J=6, shape=2 ** 13, Q=(8, 1))

            # Calculate the scattering transform.
            Sx = S.scattering(x)

            # Equivalently, use the alias.
            Sx = S{alias_call}

        Parameters
        ----------
        J : int
            The maximum log-scale of the scattering transform. In other words,
            the maximum scale is given by :math:`2^J`.
        shape : int
            The length of the input signals.
        Q : int or tuple
            Number of wavelets per octave at each order. An integer Q stands
            for (Q, 1). The last value is used for all the following orders.
            Defaults to (8, 1).
        M : int, optional
            The maximum order of scattering coefficients to compute.
            Defaults to 2.
        P : int, optional
            Number of constant-bandwidth wavelets covering the low
            frequencies. Defaults to Q - 1 at each order.
        boundary : str, optional
            'symm', 'zero' or 'per'. Defaults to 'symm'.
        options : dict, optional
            'resolution', 'oversampling', 'path_margin' and 'precision'.
        out_type : str, optional
            'raw', 'order_table', 'table', 'vector' or 'list'. Defaults to
            'table'. The scikit-learn transformers only
            accept 'order_table', 'table' and 'vector'.
        """

    @classmethod
    def _document(cls):
        cls.__doc__ = ScatteringBase1D._doc_class.format(
            array=cls._doc_array,
            frontend_paragraph=cls._doc_frontend_paragraph,
            alias_name=cls._doc_alias_name,
            alias_call=cls._doc_alias_call)


__all__ = ['ScatteringBase1D']
