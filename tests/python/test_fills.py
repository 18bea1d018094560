import warnings

import pytest

import pygrid
from pygrid import Matrix


def test_fill_region_top_left_block():
    m = Matrix(3, 3, 0)
    m.fill_region(0, 0, 2, 2, 1)
    assert m.to_lists() == [[1, 1, 0], [1, 1, 0], [0, 0, 0]]


def test_fill_region_is_idempotent():
    once = Matrix(4, 3, ".")
    once.fill_region(1, 1, 3, 4, "#")
    twice = Matrix(4, 3, ".")
    twice.fill_region(1, 1, 3, 4, "#")
    twice.fill_region(1, 1, 3, 4, "#")
    assert once == twice


@pytest.mark.parametrize("bounds", [(1, 1, 1, 3), (1, 1, 3, 1), (2, 2, 0, 0)])
def test_fill_region_empty_is_noop(bounds):
    m = Matrix(3, 3, 0)
    m.fill_region(*bounds, 9)
    assert m == Matrix(3, 3, 0)


@pytest.mark.parametrize("start", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_fill_region_start_outside_grid(start):
    m = Matrix(3, 3, 0)
    with pytest.raises(pygrid.OutOfBoundsError):
        m.fill_region(start[0], start[1], 3, 3, 1)
    assert m == Matrix(3, 3, 0)


def test_fill_region_end_past_edge_is_clamped_with_warning():
    m = Matrix(3, 2, 0)
    with pytest.warns(pygrid.PyGridBoundsWarning):
        m.fill_region(1, 1, 10, 10, 7)
    assert m.to_lists() == [[0, 0, 0], [0, 7, 7]]


def test_fill_region_inside_grid_does_not_warn():
    m = Matrix(3, 3, 0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        m.fill_region(0, 0, 3, 3, 1)


def test_fill_line_diagonal():
    m = Matrix(3, 3, 0)
    m.fill_line(0, 0, 1, 1, 3, 3, 9)
    for i in range(3):
        for j in range(3):
            assert m.get(i, j) == (9 if i == j else 0)


def test_fill_line_horizontal_with_stride():
    m = Matrix(5, 2, ".")
    m.fill_line(1, 0, 0, 2, 2, 5, "x")
    assert m.row(0) == ["."] * 5
    assert m.row(1) == ["x", ".", "x", ".", "x"]


def test_fill_line_vertical():
    m = Matrix(2, 4, 0)
    m.fill_line(1, 1, 1, 0, 4, 2, 3)
    assert m.col(1) == [0, 3, 3, 3]
    assert m.col(0) == [0, 0, 0, 0]


def test_fill_line_stops_at_first_end_reached():
    m = Matrix(4, 4, 0)
    m.fill_line(0, 0, 1, 2, 4, 4, 1)
    assert m.get(0, 0) == 1
    assert m.get(1, 2) == 1
    # (2, 4) would be outside the column end, so the line stops.
    assert sum(v for row in m.to_lists() for v in row) == 2


def test_fill_line_empty_when_start_not_before_end():
    m = Matrix(3, 3, 0)
    m.fill_line(2, 0, 0, 1, 2, 3, 1)
    assert m == Matrix(3, 3, 0)


@pytest.mark.parametrize("steps", [(-1, 1), (1, -1), (0, 0)])
def test_fill_line_bad_steps(steps):
    m = Matrix(3, 3, 0)
    with pytest.raises(pygrid.BadStepError):
        m.fill_line(0, 0, steps[0], steps[1], 3, 3, 1)
    assert m == Matrix(3, 3, 0)


def test_fill_line_running_off_the_grid_writes_nothing():
    m = Matrix(3, 3, 0)
    with pytest.raises(pygrid.OutOfBoundsError):
        m.fill_line(0, 0, 1, 1, 5, 5, 1)
    assert m == Matrix(3, 3, 0)


def test_fill_line_start_outside_grid():
    m = Matrix(3, 3, 0)
    with pytest.raises(pygrid.OutOfBoundsError):
        m.fill_line(3, 0, 0, 1, 4, 3, 1)
