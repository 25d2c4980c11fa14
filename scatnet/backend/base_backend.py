## Basic common functionality for all backends
## Ideas taken from tensorly https://github.com/tensorly/tensorly/blob/main/tensorly/backend/core.py


backend_types = [
    "float32",
    "float64",
    "complex64",
    "complex128",
    "pi",
]
backend_array = [
    "zeros",
    "ones",
    "any",
    "all",
    "abs",
    "real",
    "concatenate",
    "count_nonzero",
    "cumsum",
]


class BaseBackend:
    name = None

    @staticmethod
    def input_checks(x):
        raise NotImplementedError
