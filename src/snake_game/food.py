"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_game.grid import CellType
from snake_game.snake import Position

if TYPE_CHECKING:
    from snake_game.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places a single food cell on unoccupied grid cells.

    Candidates are drawn uniformly at random and rejected while occupied.
    After ``max_attempts`` rejections the spawner draws from the explicit
    set of empty cells instead, so a crowded board cannot stall a tick.
    """

    def __init__(
        self,
        grid: Grid,
        max_attempts: int = 1_000,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: Position | None = None

    def spawn(self) -> Position | None:
        """Place food on a free cell and return it.

        Returns ``None`` when the grid has no free cell left.
        """
        for _ in range(self.max_attempts):
            x = int(self.rng.integers(self.grid.units_x))
            y = int(self.rng.integers(self.grid.units_y))
            if not self.grid.is_occupied(x, y):
                return self.place(Position(x, y))

        empty = self.grid.empty_cells()
        if not empty:
            logger.warning("No empty cells available for food spawning.")
            self.position = None
            return None
        x, y = empty[int(self.rng.integers(len(empty)))]
        return self.place(Position(x, y))

    def place(self, position: Position) -> Position:
        """Put the food at *position*, clearing any previous food cell.

        Raises ``ValueError`` if the cell is occupied by anything other
        than the current food.
        """
        if (
            position != self.position
            and self.grid.is_occupied(position.x, position.y)
        ):
            raise ValueError(f"Cell {tuple(position)} is already occupied.")
        self.remove()
        self.grid.set(position.x, position.y, CellType.FOOD)
        self.position = position
        return position

    def remove(self) -> None:
        """Clear the current food cell, if any."""
        if self.position is None:
            return
        x, y = self.position
        if self.grid.get(x, y) == CellType.FOOD:
            self.grid.set(x, y, CellType.EMPTY)
        self.position = None

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": (
                list(self.position) if self.position is not None else None
            ),
        }
