import numbers

from ...core.cascade import wavelet_factory_3d
from ...errors import ConfigurationError
from ...scattering2d.frontend.base_frontend import ScatteringBase2D


class RotoTranslationScatteringBase(ScatteringBase2D):
    def __init__(self, J, shape, L=8, M=2, J_rot=3, boundary='symm',
                 options=None, out_type='order_table', backend=None):
        super(RotoTranslationScatteringBase, self).__init__(
            J, shape, L, M, boundary, options, out_type, backend)
        self.J_rot = J_rot

    def build(self):
        ScatteringBase2D.build(self)
        if isinstance(self.J_rot, bool) or \
                not isinstance(self.J_rot, numbers.Integral) or self.J_rot < 1:
            raise ConfigurationError(
                "J_rot must be a positive integer. Got: {}".format(self.J_rot))
        if 2 ** self.J_rot > 2 * self.L:
            raise ConfigurationError(
                "The angular scale 2**J_rot = {} cannot exceed the 2 * L = {} "
                "orientations.".format(2 ** self.J_rot, 2 * self.L))

    def create_filters(self):
        self.operators, self.filters, self.filters_rot = wavelet_factory_3d(
            self.shape, {'J': self.J, 'L': self.L, 'boundary': self.boundary},
            {'J': self.J_rot}, {'M': self.M})

    _doc_class = \
    r"""The roto-translation scattering transform

        Roto-translation scattering builds on a first 2D wavelet transform
        of the image. The modulus coefficients of each scale, indexed by
        orientation, form a stack which is extended to [0, 2 pi) by the
        half-turn symmetry of the modulus. The following orders filter
        these stacks jointly in space, with wavelets rotated along with
        the orientation axis, and along the orientation axis, with periodic
        1D wavelets. The coefficients are thus stable to rotations as well
        as to translations.{frontend_paragraph}

        Given an input `{array}` `x` of shape `(B, M, N)`, we compute its
        scattering transform by passing it to the `scattering` method (or
        calling the alias `{alias_name}`). Orders above 0 keep an
        orientation axis, so the coefficients of different orders differ in
        shape and the default output format is 'order_table'.

        Example
        -------
        ::

            # Define a RotoTranslationScattering object.
            S = RotoTranslationScattering(J=3, shape=(32, 32), L=8)

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
            Number of angles in [0, pi). Defaults to 8.
        M : int, optional
            The maximum order of scattering coefficients to compute.
            Defaults to 2.
        J_rot : int, optional
            Log-2 of the angular averaging scale. Defaults to 3.
        boundary : str, optional
            Boundary condition in space. Defaults to 'symm'.
        options : dict, optional
            'resolution', 'oversampling', 'path_margin' and 'precision'.
        out_type : str, optional
            'raw', 'order_table', 'table', 'vector' or 'list'. Defaults to
            'order_table'. The scikit-learn transformer only accepts
            'order_table', 'table' and 'vector'.
        """

    @classmethod
    def _document(cls):
        cls.__doc__ = RotoTranslationScatteringBase._doc_class.format(
            array=cls._doc_array,
            frontend_paragraph=cls._doc_frontend_paragraph,
            alias_name=cls._doc_alias_name,
            alias_call=cls._doc_alias_call)


__all__ = ['RotoTranslationScatteringBase']
