from __future__ import annotations

from typing import Any


_np: Any | None = None
_options: dict[str, Any] = {"edge_items": 4}


def configure(*, np_module: Any | None) -> None:
    global _np
    _np = np_module


def set_print_options(*, edge_items: int | None = None) -> None:
    if edge_items is not None:
        if not isinstance(edge_items, int) or isinstance(edge_items, bool) or edge_items <= 0:
            raise ValueError("edge_items must be a positive integer")
        _options["edge_items"] = edge_items


def print_options() -> dict[str, Any]:
    return dict(_options)


def _visible(length: int) -> list[int | None]:
    """Indices to show along one axis; None marks the elided middle."""
    n = _options["edge_items"]
    if length <= 2 * n:
        return list(range(length))
    return list(range(n)) + [None] + list(range(length - n, length))


def _format_value(value: Any) -> str:
    if _np is not None and isinstance(value, _np.generic):
        value = value.item()
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def grid_text(matrix: Any) -> str:
    """Header line, then one line per row with cells right-aligned per column."""
    height = matrix.height()
    width = matrix.width()

    info = [f"shape=({height}, {width})"]
    if matrix.default is not None:
        info.append(f"default={matrix.default!r}")
    header = f"{type(matrix).__name__}({', '.join(info)})"
    if height == 0 or width == 0:
        return header

    col_index = _visible(width)
    table = [
        [
            "..." if i is None or j is None else _format_value(matrix.get(i, j))
            for j in col_index
        ]
        for i in _visible(height)
    ]
    widths = [max(len(row[k]) for row in table) for k in range(len(col_index))]

    lines = [header]
    for row in table:
        lines.append("  " + "  ".join(text.rjust(w) for text, w in zip(row, widths)))
    return "\n".join(lines)
