from __future__ import annotations

import warnings
from typing import Any, Generic, Sequence, TypeVar

from . import interop as _interop
from .bounds import (
    check_cell,
    check_dimension,
    check_index,
    check_insert_index,
    check_steps,
    require_int,
)
from .coercion import coerce_line_values
from . import formatting as _formatting
from .warnings import PyGridBoundsWarning


T = TypeVar("T")

_HASH_MULTIPLIER = 7


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


class Matrix(Generic[T]):
    """A mutable rectangular grid of elements.

    Cells live in one flat row-major list (`row * width + col`). Structural
    edits (inserting or deleting rows and columns) build a new list and swap
    it in, so a failed edit never leaves the matrix half-changed.

    `default` fills every cell the matrix creates by itself: the initial
    grid, rows inserted without values and new columns. `None` is the absent
    marker used when no default is given.
    """

    def __init__(self, width: int, height: int, default: T | None = None):
        width = check_dimension(width, "width")
        height = check_dimension(height, "height")
        self._width: int = width
        self._height: int = height
        self._default: T | None = default
        self._cells: list[Any] = [default] * (width * height)

    @classmethod
    def _from_cells(cls, width: int, height: int, default: Any, cells: list[Any]) -> "Matrix":
        out = cls.__new__(cls)
        out._width = width
        out._height = height
        out._default = default
        out._cells = cells
        return out

    # --- shape ---

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def rows(self) -> int:
        return self._height

    def cols(self) -> int:
        return self._width

    @property
    def shape(self) -> tuple[int, int]:
        return (self._height, self._width)

    @property
    def default(self) -> T | None:
        return self._default

    # --- element access ---

    def get(self, row: int, col: int) -> T:
        row, col = check_cell(row, col, self._height, self._width)
        return self._cells[row * self._width + col]

    def set(self, row: int, col: int, value: T) -> None:
        row, col = check_cell(row, col, self._height, self._width)
        self._cells[row * self._width + col] = value

    def __getitem__(self, key: Any) -> T:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        i, j = key
        return self.get(i, j)

    def __setitem__(self, key: Any, value: T) -> None:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        i, j = key
        self.set(i, j, value)

    def row(self, row: int) -> list[T]:
        row = check_index(row, self._height, "row")
        base = row * self._width
        return self._cells[base : base + self._width]

    def col(self, col: int) -> list[T]:
        col = check_index(col, self._width, "col")
        return self._cells[col :: self._width]

    def to_lists(self) -> list[list[T]]:
        w = self._width
        return [self._cells[i * w : (i + 1) * w] for i in range(self._height)]

    # --- structural edits ---

    def insert_row(self, row: int, values: Sequence[T] | None = None) -> None:
        """Insert a row before `row`; `row == height()` appends at the bottom.

        Without `values` the new row is filled with the default.
        """
        row = check_insert_index(row, self._height, "row")
        if values is None:
            new_row = [self._default] * self._width
        else:
            new_row = coerce_line_values(values, self._width, "row")

        at = row * self._width
        self._cells = self._cells[:at] + new_row + self._cells[at:]
        self._height += 1

    def insert_col(self, col: int, values: Sequence[T] | None = None) -> None:
        """Insert a column before `col`; `col == width()` appends on the right.

        Without `values` the new column is filled with the default.
        """
        col = check_insert_index(col, self._width, "col")
        if values is None:
            new_col = [self._default] * self._height
        else:
            new_col = coerce_line_values(values, self._height, "col")

        w = self._width
        cells: list[Any] = []
        for i in range(self._height):
            base = i * w
            cells.extend(self._cells[base : base + col])
            cells.append(new_col[i])
            cells.extend(self._cells[base + col : base + w])
        self._cells = cells
        self._width = w + 1

    def delete_row(self, row: int) -> None:
        row = check_index(row, self._height, "row")
        at = row * self._width
        self._cells = self._cells[:at] + self._cells[at + self._width :]
        self._height -= 1

    def delete_col(self, col: int) -> None:
        col = check_index(col, self._width, "col")
        w = self._width
        self._cells = [v for idx, v in enumerate(self._cells) if idx % w != col]
        self._width = w - 1

    # --- bulk fills ---

    def fill_region(self, start_row: int, start_col: int, end_row: int, end_col: int, value: T) -> None:
        """Set every cell in rows `[start_row, end_row)` and columns `[start_col, end_col)`.

        The start corner must lie inside the grid. End bounds past the grid
        edge are clamped to it, with a `PyGridBoundsWarning`.
        """
        r0, c0 = check_cell(start_row, start_col, self._height, self._width)
        r1 = require_int(end_row, "row end")
        c1 = require_int(end_col, "col end")
        if r1 > self._height or c1 > self._width:
            warnings.warn(
                f"fill_region end ({r1}, {c1}) lies outside the {self._height}x{self._width} grid; "
                "it has been clamped to the grid edge.",
                PyGridBoundsWarning,
                stacklevel=2,
            )
            r1 = min(r1, self._height)
            c1 = min(c1, self._width)

        w = self._width
        for i in range(r0, r1):
            base = i * w
            for j in range(c0, c1):
                self._cells[base + j] = value

    def fill_line(
        self,
        start_row: int,
        start_col: int,
        row_step: int,
        col_step: int,
        end_row: int,
        end_col: int,
        value: T,
    ) -> None:
        """Set the cells `(start_row + k*row_step, start_col + k*col_step)`, k = 0, 1, ...

        Stops once either coordinate reaches its (exclusive) end. Steps must be
        non-negative and not both zero. Every cell on the line is checked
        against the grid before anything is written.
        """
        r0, c0 = check_cell(start_row, start_col, self._height, self._width)
        dr, dc = check_steps(row_step, col_step)
        r1 = require_int(end_row, "row end")
        c1 = require_int(end_col, "col end")

        targets: list[int] = []
        i, j = r0, c0
        while i < r1 and j < c1:
            i, j = check_cell(i, j, self._height, self._width)
            targets.append(i * self._width + j)
            i += dr
            j += dc

        for idx in targets:
            self._cells[idx] = value

    # --- copying ---

    def clone(self) -> "Matrix[T]":
        """Shallow copy: new grid, same element objects."""
        return self._from_cells(self._width, self._height, self._default, list(self._cells))

    def __copy__(self) -> "Matrix[T]":
        return self.clone()

    # --- equality / hashing ---

    def equals(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return False
        if self._width != other._width or self._height != other._height:
            return False
        for a, b in zip(self._cells, other._cells):
            if a is not b and not a == b:
                return False
        return True

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def hash_code(self) -> int:
        # Absent cells are skipped; arithmetic wraps at 32 bits.
        code = _wrap32(self._width + _HASH_MULTIPLIER * self._height)
        for value in self._cells:
            if value is not None:
                code = _wrap32(code * _HASH_MULTIPLIER + hash(value))
        return code

    def __hash__(self) -> int:
        return self.hash_code()

    # --- text ---

    def __str__(self) -> str:
        return _formatting.grid_text(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} shape={self.shape}>"

    # --- numpy interop ---

    def to_numpy(self, dtype: Any = None) -> Any:
        return _interop.matrix_to_numpy(self, dtype)

    def __array__(self, dtype: Any = None, copy: Any = None) -> Any:
        if copy is False:
            raise ValueError("a Matrix cannot be viewed as an array without copying")
        return _interop.matrix_to_numpy(self, dtype)
