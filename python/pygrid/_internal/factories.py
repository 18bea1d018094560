from __future__ import annotations

from typing import Any, Callable

from .matrix import Matrix


def matrix_factory(
    data: Any,
    *,
    default: Any,
    coerce_general_matrix: Callable[[Any], tuple[int, int, list[list[Any]]]],
) -> Matrix:
    # Case 1: an existing Matrix keeps its own default unless one is given.
    if isinstance(data, Matrix) and default is None:
        return data.clone()

    # Case 2: generic coercion (matrix-like, NumPy array, nested rows)
    width, height, rows = coerce_general_matrix(data)
    cells: list[Any] = []
    for row in rows:
        cells.extend(row)
    return Matrix._from_cells(width, height, default, cells)
