from __future__ import annotations

from typing import Any


_np: Any | None = None

_SCALAR_TYPES = (bool, int, float, complex, str)


def configure(*, np_module: Any | None) -> None:
    global _np
    _np = np_module


def _is_scalar(value: Any) -> bool:
    return isinstance(value, _SCALAR_TYPES) or isinstance(value, _np.generic)


def matrix_to_numpy(matrix: Any, dtype: Any = None) -> Any:
    """Copy a matrix into a new `height x width` ndarray.

    Without a dtype every cell is first placed into an object array, so
    sequence-valued cells (tuples, lists) stay single elements. The result is
    narrowed to NumPy's inferred dtype only when every cell is a scalar.
    """
    if _np is None:
        raise TypeError("NumPy is required to convert a Matrix to an array")

    rows = matrix.to_lists()
    shape = (matrix.height(), matrix.width())
    if shape[0] == 0 or shape[1] == 0:
        return _np.empty(shape, dtype=dtype)
    if dtype is not None and dtype is not object:
        return _np.array(rows, dtype=dtype)

    out = _np.empty(shape, dtype=object)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            out[i, j] = value
    if dtype is None and all(_is_scalar(v) for row in rows for v in row):
        return _np.array(out.tolist())
    return out
