import numpy as np
import pytest

from falling_blocks.game import Grid, format_grid


def test_new_grid_is_empty():
    grid = Grid(3, 5)
    assert grid.dimensions == (3, 5)
    assert grid.count() == 0
    assert not any(grid.get(r, c) for r in range(3) for c in range(5))


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid(0, 4)
    with pytest.raises(ValueError):
        Grid(4, -1)


def test_set_get_and_clear():
    grid = Grid(2, 2)
    grid.set(1, 0)
    assert grid.get(1, 0)
    assert grid.count() == 1
    grid.set(1, 0, False)
    assert not grid.get(1, 0)
    grid.set(0, 1)
    grid.clear()
    assert grid.count() == 0
    assert grid.dimensions == (2, 2)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_out_of_range_access_raises(row, col):
    grid = Grid(2, 3)
    with pytest.raises(IndexError):
        grid.get(row, col)
    with pytest.raises(IndexError):
        grid.set(row, col)


def test_copy_is_independent():
    grid = Grid(2, 2)
    grid.set(0, 0)
    dup = grid.copy()
    assert dup == grid
    dup.set(1, 1)
    assert dup != grid
    assert not grid.get(1, 1)


def test_eliminate_without_full_rows_is_noop():
    grid = Grid.from_array(np.array([[1, 0, 1], [0, 1, 1], [0, 0, 0]]))
    before = grid.copy()
    assert grid.eliminate_rows() == 0
    assert grid == before


def test_eliminate_single_full_row_shifts_rows_above():
    grid = Grid.from_array(np.array([
        [1, 1, 1],
        [1, 0, 0],
        [0, 1, 0],
    ]))
    assert grid.full_rows() == [0]
    assert grid.eliminate_rows() == 1
    assert grid.dimensions == (3, 3)
    assert grid.cells.tolist() == [
        [True, False, False],
        [False, True, False],
        [False, False, False],
    ]


def test_eliminate_non_adjacent_full_rows_preserves_order():
    grid = Grid.from_array(np.array([
        [1, 1],
        [1, 0],
        [1, 1],
        [0, 1],
    ]))
    assert grid.eliminate_rows() == 2
    assert grid.cells.tolist() == [
        [True, False],
        [False, True],
        [False, False],
        [False, False],
    ]


def test_format_grid_prints_top_row_first():
    grid = Grid(2, 3)
    grid.set(0, 0)
    grid.set(1, 2)
    assert format_grid(grid) == "··█\n█··"
    assert str(grid) == format_grid(grid)
