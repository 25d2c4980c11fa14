class ScatteringNumPy:
    def __init__(self):
        self.frontend_name = 'numpy'

    def __call__(self, x):
        """This method is an alias for `scattering`."""

        return self.scattering(x)

    _doc_array = 'np.ndarray'

    _doc_alias_name = '__call__'

    _doc_alias_call = '(x)'

    _doc_frontend_paragraph = ''
