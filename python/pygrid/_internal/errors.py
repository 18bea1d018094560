"""pygrid error types.

Every error raised by a matrix operation derives from `PyGridError` and from
the builtin exception that best describes it, so callers may catch either.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class PyGridError(Exception):
    """Base class for all pygrid errors."""


class OutOfBoundsError(PyGridError, IndexError):
    """A row or column index lies outside the interval legal for the operation."""


class WrongSizeError(PyGridError, ValueError):
    """A value sequence does not match the dimension it must fill."""


class BadSizeError(PyGridError, ValueError):
    """A construction dimension is negative."""


class BadStepError(PyGridError, ValueError):
    """A line-fill stride is negative, or both strides are zero."""
