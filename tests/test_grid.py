"""Tests for the Grid module."""

import numpy as np
import pytest

from snake_game.grid import CellType, Grid


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.units_x == 20
        assert grid.units_y == 20

    def test_custom_dimensions(self):
        grid = Grid(units_x=10, units_y=8)
        assert grid.units_x == 10
        assert grid.units_y == 8
        assert grid.cells.shape == (8, 10)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(units_x=3, units_y=4)
        with pytest.raises(ValueError, match="at least 4"):
            Grid(units_x=4, units_y=3)

    def test_all_cells_start_empty(self):
        grid = Grid(units_x=5, units_y=5)
        assert np.all(grid.cells == CellType.EMPTY)


class TestGridOperations:
    def test_set_and_get(self):
        grid = Grid(units_x=5, units_y=5)
        grid.set(2, 3, CellType.SNAKE)
        assert grid.get(2, 3) == CellType.SNAKE

    def test_x_is_column(self):
        grid = Grid(units_x=6, units_y=4)
        grid.set(5, 1, CellType.FOOD)
        assert grid.cells[1, 5] == CellType.FOOD

    def test_clear(self):
        grid = Grid(units_x=5, units_y=5)
        grid.set(0, 0, CellType.SNAKE)
        grid.set(1, 1, CellType.FOOD)
        grid.clear()
        assert np.all(grid.cells == CellType.EMPTY)

    def test_in_bounds(self):
        grid = Grid(units_x=5, units_y=6)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 5)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(5, 0)
        assert not grid.in_bounds(0, 6)

    def test_negative_index_rejected(self):
        grid = Grid(units_x=5, units_y=5)
        with pytest.raises(IndexError, match="outside"):
            grid.get(-1, 0)
        with pytest.raises(IndexError, match="outside"):
            grid.set(0, -1, CellType.SNAKE)

    def test_overflow_index_rejected(self):
        grid = Grid(units_x=5, units_y=5)
        with pytest.raises(IndexError):
            grid.get(5, 0)

    def test_is_occupied(self):
        grid = Grid(units_x=5, units_y=5)
        assert not grid.is_occupied(1, 1)
        grid.set(1, 1, CellType.FOOD)
        assert grid.is_occupied(1, 1)

    def test_empty_cells(self):
        grid = Grid(units_x=4, units_y=4)
        assert len(grid.empty_cells()) == 16
        grid.set(0, 0, CellType.SNAKE)
        grid.set(3, 1, CellType.FOOD)
        empty = grid.empty_cells()
        assert len(empty) == 14
        assert (3, 1) not in empty


class TestGridSerialization:
    def test_to_dict_structure(self):
        grid = Grid(units_x=6, units_y=5)
        d = grid.to_dict()
        assert d["units_x"] == 6
        assert d["units_y"] == 5
        assert len(d["cells"]) == 5
        assert len(d["cells"][0]) == 6

    def test_to_dict_reflects_state(self):
        grid = Grid(units_x=4, units_y=4)
        grid.set(2, 1, CellType.FOOD)
        d = grid.to_dict()
        assert d["cells"][1][2] == CellType.FOOD
