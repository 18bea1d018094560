from __future__ import annotations

from collections.abc import Mapping as _MappingABC
from collections.abc import Sequence as _SequenceABC
from typing import Any

from .errors import WrongSizeError


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def is_indexable(value: Any) -> bool:
    """Sequence-like, or any sized object indexable by position (e.g. a 1D ndarray)."""
    if is_sequence_like(value):
        return True
    if isinstance(value, (str, bytes, bytearray, _MappingABC)):
        return False
    return hasattr(value, "__len__") and hasattr(value, "__getitem__")


def coerce_line_values(values: Any, expected: int, axis: str) -> list[Any]:
    """Copy the values for a new row/column after checking their count."""
    if not is_indexable(values):
        raise TypeError(f"{axis} values must be a sequence, got {type(values).__name__}")
    if len(values) != expected:
        raise WrongSizeError(
            f"{axis} values have length {len(values)}, expected {expected}"
        )
    return [values[i] for i in range(expected)]


def coerce_sequence_rows(candidate: Any) -> tuple[int, int, list[list[Any]]]:
    if not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a rectangular nested sequence or a NumPy array."
        )
    rows: list[list[Any]] = []
    for row in candidate:
        if not is_sequence_like(row):
            raise TypeError("Each matrix row must be a sequence of entries.")
        rows.append(list(row))
    if not rows:
        return 0, 0, rows
    width = len(rows[0])
    for r, row in enumerate(rows):
        if len(row) != width:
            raise WrongSizeError(
                f"Matrix data must be rectangular: row {r} has {len(row)} entries, expected {width}"
            )
    return width, len(rows), rows


def coerce_general_matrix(candidate: Any, *, np_module: Any | None) -> tuple[int, int, list[list[Any]]]:
    """Return `(width, height, rows)` for a matrix-like, NumPy or nested-sequence input."""
    width_attr: Any = getattr(candidate, "width", None)
    height_attr: Any = getattr(candidate, "height", None)
    get_attr: Any = getattr(candidate, "get", None)
    if callable(width_attr) and callable(height_attr) and callable(get_attr):
        width = int(width_attr())
        height = int(height_attr())
        rows: list[list[Any]] = []
        for i in range(height):
            rows.append([get_attr(i, j) for j in range(width)])
        return width, height, rows

    if np_module is not None and isinstance(candidate, np_module.ndarray):
        if candidate.ndim != 2:
            raise ValueError(f"Matrix input must be a 2D array, got {candidate.ndim}D.")
        height, width = (int(n) for n in candidate.shape)
        rows = [
            [_unwrap_scalar(candidate[i, j], np_module) for j in range(width)]
            for i in range(height)
        ]
        return width, height, rows

    return coerce_sequence_rows(candidate)


def _unwrap_scalar(value: Any, np_module: Any) -> Any:
    if isinstance(value, np_module.generic):
        return value.item()
    return value
