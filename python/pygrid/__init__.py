"""Generic two-dimensional matrix container."""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

from typing import Any

from ._internal import coercion as _coercion
from ._internal import factories as _factories
from ._internal import formatting as _formatting
from ._internal import interop as _interop
from ._internal.errors import (
    PyGridError,
    OutOfBoundsError,
    WrongSizeError,
    BadSizeError,
    BadStepError,
)
from ._internal.matrix import Matrix
from ._internal.warnings import PyGridWarning, PyGridBoundsWarning

try:  # NumPy is optional at runtime
    import numpy as _np
except ImportError:  # pragma: no cover - exercised when numpy is absent
    _np = None

_interop.configure(np_module=_np)
_formatting.configure(np_module=_np)


def set_print_options(*, edge_items: int | None = None) -> None:
    """Set how many leading/trailing rows and columns `str(matrix)` shows."""
    _formatting.set_print_options(edge_items=edge_items)


def get_print_options() -> dict[str, Any]:
    return _formatting.print_options()


def _coerce_general_matrix(candidate: Any) -> tuple[int, int, list[list[Any]]]:
    return _coercion.coerce_general_matrix(candidate, np_module=_np)


def matrix(data: Any, *, default: Any = None) -> Matrix:
    """Build a Matrix from nested rows, a 2D NumPy array or another Matrix.

    Rows must all have the same length. `default` only affects cells created
    later by structural edits.
    """
    return _factories.matrix_factory(
        data,
        default=default,
        coerce_general_matrix=_coerce_general_matrix,
    )


__all__ = [
    "Matrix",
    "matrix",
    "set_print_options",
    "get_print_options",
    "PyGridError",
    "OutOfBoundsError",
    "WrongSizeError",
    "BadSizeError",
    "BadStepError",
    "PyGridWarning",
    "PyGridBoundsWarning",
]
