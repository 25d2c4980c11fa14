import numbers

from ...core.cascade import wavelet_factory_2d
from ...errors import ConfigurationError
from ...frontend.base_frontend import ScatteringBase
from ...options import parse_options


class ScatteringBase2D(ScatteringBase):
    signal_ndim = 2

    def __init__(self, J, shape, L=8, M=2, boundary='symm', options=None,
                 out_type='table', backend=None):
        super(ScatteringBase2D, self).__init__()
        self.J = J
        self.shape = shape
        self.L = L
        self.M = M
        self.boundary = boundary
        self.options = options
        self.out_type = out_type
        self.backend = backend

    def build(self):
        self.shape = self._check_shape(self.shape)

        for name in ('J', 'L'):
            value = getattr(self, name)
            if isinstance(value, bool) or \
                    not isinstance(value, numbers.Integral) or value < 1:
                raise ConfigurationError(
                    "{} must be a positive integer. Got: {}".format(name,
                                                                   value))
        if 2 ** self.J > min(self.shape):
            raise ConfigurationError('The smallest dimension should be '
                                     'larger than 2^J.')

        self.options = parse_options(self.options)
        self._check_runtime_args()

    def create_filters(self):
        self.operators, self.filters = wavelet_factory_2d(
            self.shape, {'J': self.J, 'L': self.L, 'boundary': self.boundary},
            {'M': self.M})

    _doc_class = \
    r"""The 2D scattering transform

        The scattering transform computes a cascade of wavelet transforms
        alternated with a complex modulus non-linearity. The scattering
        transform of an image :math:`x(u)` of order M is

            $S_J x = [S_J^{{(0)}} x, S_J^{{(1)}} x, \ldots, S_J^{{(M)}} x]$

        where the wavelets $\psi_{{j, \theta}}$ are Morlet wavelets of scale
        $2^j$ and orientation $\theta \pi / L$. Only progressive paths,
        whose scales increase along the path, are computed.{frontend_paragraph}

        Given an input `{array}` `x` of shape `(B, M, N)`, where `B` is the
        batch size and `(M, N)` the size of the images, we compute its
        scattering transform by passing it to the `scattering` method (or
        calling the alias `{alias_name}`).

        Example
        -------
        ::

            # Define a Scattering2D object.
            S = Scattering2D(J=3, shape=(32, 32))

            # Calculate the scattering transform.
            Sx = S.scattering(x)

            # Equivalently, use the alias.
            Sx = S{alias_call}

        Parameters
        ----------
        J : int
            Log-2 of the scattering scale.
        shape : tuple of ints
            Spatial support (M, N) of the input.
        L : int, optional
            Number of angles used for the wavelet transform. Defaults to 8.
        M : int, optional
            The maximum order of scattering coefficients to compute.
            Defaults to 2.
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
        cls.__doc__ = ScatteringBase2D._doc_class.format(
            array=cls._doc_array,
            frontend_paragraph=cls._doc_frontend_paragraph,
            alias_name=cls._doc_alias_name,
            alias_call=cls._doc_alias_call)


__all__ = ['ScatteringBase2D']
