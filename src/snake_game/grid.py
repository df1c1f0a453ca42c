"""Occupancy grid for the snake game."""

from __future__ import annotations

import enum

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed occupancy grid sized ``units_x × units_y``.

    Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row; the
    backing array is indexed ``cells[y, x]``. Accessors are bounds-checked
    so negative coordinates never wrap around to the far edge.
    """

    def __init__(self, units_x: int = 20, units_y: int = 20) -> None:
        if units_x < 4 or units_y < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.units_x = units_x
        self.units_y = units_y
        self.cells = np.zeros((units_y, units_x), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.units_x and 0 <= y < self.units_y

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the "
                f"{self.units_x}×{self.units_y} grid.",
            )

    def get(self, x: int, y: int) -> CellType:
        """Return the cell type at the given coordinate."""
        self._check(x, y)
        return CellType(self.cells[y, x])

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self._check(x, y)
        self.cells[y, x] = cell_type

    def is_occupied(self, x: int, y: int) -> bool:
        """Return True if the cell holds anything but EMPTY."""
        return self.get(x, y) != CellType.EMPTY

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return a list of all empty ``(x, y)`` coordinates."""
        ys, xs = np.where(self.cells == CellType.EMPTY)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "units_x": self.units_x,
            "units_y": self.units_y,
            "cells": self.cells.tolist(),
        }
