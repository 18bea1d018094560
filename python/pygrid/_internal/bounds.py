from __future__ import annotations

from typing import Any

from .errors import BadSizeError, BadStepError, OutOfBoundsError


def require_int(value: Any, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def check_dimension(value: Any, name: str) -> int:
    n = require_int(value, name)
    if n < 0:
        raise BadSizeError(f"{name} must be non-negative, got {n}")
    return n


def check_index(index: Any, limit: int, axis: str) -> int:
    """Validate an index into an existing line: `0 <= index < limit`."""
    i = require_int(index, f"{axis} index")
    if i < 0 or i >= limit:
        raise OutOfBoundsError(f"{axis} index {i} out of range [0, {limit})")
    return i


def check_insert_index(index: Any, limit: int, axis: str) -> int:
    """Validate an insertion point: `0 <= index <= limit` (appending is allowed)."""
    i = require_int(index, f"{axis} index")
    if i < 0 or i > limit:
        raise OutOfBoundsError(f"{axis} insertion index {i} out of range [0, {limit}]")
    return i


def check_cell(row: Any, col: Any, height: int, width: int) -> tuple[int, int]:
    return check_index(row, height, "row"), check_index(col, width, "col")


def check_steps(row_step: Any, col_step: Any) -> tuple[int, int]:
    dr = require_int(row_step, "row step")
    dc = require_int(col_step, "col step")
    if dr < 0 or dc < 0:
        raise BadStepError(f"line steps must be non-negative, got ({dr}, {dc})")
    if dr == 0 and dc == 0:
        raise BadStepError("at least one line step must be positive")
    return dr, dc
