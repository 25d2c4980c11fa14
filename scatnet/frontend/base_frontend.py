import importlib
import numbers
from collections import Counter

import numpy as np

from ..core.cascade import scat
from ..core.format import OutputFormat, flatten_scat, format_scat, layer_meta
from ..errors import ConfigurationError, IncompatibleShapeError


class ScatteringBase():
    # Number of trailing axes of the input holding one signal
    signal_ndim = None

    out_types = tuple(fmt.value for fmt in OutputFormat) + ('list',)

    def __init__(self):
        super(ScatteringBase, self).__init__()

    def build(self):
        """ Defines elementary routines.

        This function should always call and create the filters via
        self.create_filters() defined below. For instance, via:
        self.filters = self.create_filters() """
        raise NotImplementedError

    def _instantiate_backend(self, import_string):
        """ This function should instantiate the backend to be used if not already
        specified"""

        # Either the user entered a string, in which case we load the corresponding backend.
        if isinstance(self.backend, str):
            if self.backend.startswith(self.frontend_name):
                try:
                    self.backend = importlib.import_module(import_string + self.backend + "_backend", 'backend').backend
                except ImportError:
                    raise ImportError('Backend ' + self.backend + ' not found!')
            else:
                raise ImportError('The backend ' + self.backend + ' can not be called from the frontend ' +
                                   self.frontend_name + '.')
        # Either the user passed a backend object, in which case we perform a compatibility check.
        else:
            if not self.backend.name.startswith(self.frontend_name):
                raise ImportError('The backend ' + self.backend.name + ' is not supported by the frontend ' +
                                   self.frontend_name + '.')

    def create_filters(self):
        """ This function should build the filter banks and the layer
        operators of the network, saved as self.filters and
        self.operators. """
        raise NotImplementedError

    def _check_shape(self, shape):
        if isinstance(shape, numbers.Integral):
            shape = (shape,)
        if not isinstance(shape, tuple) or len(shape) != self.signal_ndim:
            raise ConfigurationError(
                "shape must be a {}-tuple{}. Got: {}".format(
                    self.signal_ndim,
                    ' or an integer' if self.signal_ndim == 1 else '', shape))
        if any(not isinstance(n, numbers.Integral) or n < 1 for n in shape):
            raise ConfigurationError(
                "shape must hold positive integers. Got: {}".format(shape))
        return tuple(int(n) for n in shape)

    def _check_runtime_args(self):
        if self.out_type not in self.out_types:
            raise ConfigurationError(
                "out_type must be one of {}. Got: {}".format(
                    ', '.join(repr(t) for t in self.out_types),
                    self.out_type))

    def _check_input(self, x):
        self.backend.input_checks(x)
        if x.shape[x.ndim - self.signal_ndim:] != self.shape:
            raise IncompatibleShapeError(
                'Input should have its last {} axes of size {}, got shape '
                '{}.'.format(self.signal_ndim, self.shape, x.shape))

    def scattering(self, x):
        """Computes the scattering transform of x.

        Parameters
        ----------
        x : array
            Signals of size (..., *shape), the leading axes being batch axes.

        Returns
        -------
        S : the scattering coefficients in the format given by out_type
        """
        self._check_runtime_args()
        self._check_input(x)

        batch_ndim = x.ndim - self.signal_ndim
        S, _ = scat(x, self.operators, self.options, backend=self.backend)

        if self.out_type == 'list':
            return flatten_scat(S)
        Sx, _ = format_scat(S, self.out_type, batch_ndim)
        return Sx

    def meta(self):
        """Get metadata on the transform.

        This information specifies the content of each scattering coefficient,
        which order, which filters were used, and so on. It is computed
        once, from a transform of the zero signal.

        Returns
        -------
        meta : dictionary
            A dictionary of arrays with one entry per scattering path:
            'order', 'j', 'theta', 'k' and 'n' (padded with -1 to the largest
            order), 'resolution', 'resolution_rot', 'bandwidth' and 'j_phi'.
        """
        if getattr(self, '_meta', None) is None:
            S, _ = scat(np.zeros(self.shape), self.operators, self.options,
                        backend=self.backend)
            self._meta = layer_meta(flatten_scat(S))
        return self._meta

    def output_size(self, detail=False):
        """Number of scattering paths.

        Parameters
        ----------
        detail : boolean, optional
            Whether to aggregate the count (detail=False, default) across
            orders or to break it down by order.

        Returns
        ------
        size : int or tuple
            If `detail=False` (default), total number of scattering paths.
            Else, number of paths at each order.
        """
        order = self.meta()['order']
        if detail:
            counts = Counter(order)
            return tuple(counts[m] for m in range(len(self.operators)))
        return len(order)


__all__ = ['ScatteringBase']
