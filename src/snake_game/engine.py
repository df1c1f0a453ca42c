"""Real-time game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable

import numpy as np
import pygame

from snake_game.config import Color, GameConfig
from snake_game.food import FoodSpawner
from snake_game.grid import CellType, Grid
from snake_game.snake import Direction, Position, Snake

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    """Lifecycle of a session. The only transition is RUNNING → TERMINATED."""

    RUNNING = "running"
    TERMINATED = "terminated"


class GameEngine:
    """Single-snake game state controller.

    The host loop calls :meth:`update` and then :meth:`render` once per
    frame. Input is applied every frame, but movement only happens when
    the wall clock crosses into a new tick window, so the snake moves once
    per ``config.tick_seconds`` regardless of frame rate.

    A collision never exits the process; it moves :attr:`status` to
    :attr:`GameStatus.TERMINATED` and the caller decides what to do.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.clock = clock
        self.grid = Grid(self.config.units_x, self.config.units_y)
        self.rng = np.random.default_rng(self.config.seed)

        self.snake = Snake(
            self.config.units_x // 2,
            self.config.units_y // 2,
            Direction.RIGHT,
        )
        self.food = FoodSpawner(
            self.grid,
            max_attempts=self.config.max_spawn_attempts,
            rng=self.rng,
        )
        self._repaint()
        self.food.spawn()

        self.score = 0
        self.tick = 0
        self.last_tick = 0
        self.status = GameStatus.RUNNING

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def set_direction(self, direction: Direction) -> None:
        """Apply a new heading immediately; the latest call wins."""
        if self.running:
            self.snake.set_direction(direction)

    def update(self, direction: Direction | None = None) -> GameStatus:
        """Per-frame entry point.

        Applies *direction* (the key pressed this frame, if any) and runs
        one :meth:`step` when the tick gate opens.
        """
        if not self.running:
            return self.status

        if direction is not None:
            self.set_direction(direction)

        now = int(self.clock())
        if now >= self.last_tick + self.config.tick_seconds:
            self.last_tick = now
            return self.step()
        return self.status

    def step(self) -> GameStatus:
        """Advance the snake by one cell, ungated by the clock."""
        if not self.running:
            return self.status

        head = self.snake.advance()
        self.tick += 1

        if not self.grid.in_bounds(head.x, head.y):
            self._terminate("wall")
            return self.status
        if self.snake.hits_body():
            self._terminate("self")
            return self.status

        ate = head == self.food.position
        if ate:
            self.snake.grow()
        self._repaint()

        if ate:
            # The head now covers the old food cell, so only the reference
            # is dropped before the next cell is drawn.
            self.food.remove()
            self.score += 1
            logger.info("Score: %d", self.score)
            self.food.spawn()

        return self.status

    def render(self, surface: pygame.Surface) -> None:
        """Draw one filled block per head, body, and food cell."""
        self._draw_block(surface, self.snake.head, self.config.head_color)
        for segment in self.snake.body:
            self._draw_block(surface, segment, self.config.body_color)
        if self.food.position is not None:
            self._draw_block(
                surface, self.food.position, self.config.food_color,
            )

    def layout(self, width: int, height: int) -> tuple[int, int]:
        """Return the fixed logical resolution, ignoring the window size."""
        return self.config.screen_width, self.config.screen_height

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "status": self.status.value,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
        }

    def _draw_block(
        self, surface: pygame.Surface, position: Position, color: Color,
    ) -> None:
        block = self.config.block_length
        rect = pygame.Rect(position.x * block, position.y * block, block, block)
        pygame.draw.rect(surface, color, rect)

    def _repaint(self) -> None:
        self.grid.clear()
        for x, y in self.snake.cells():
            self.grid.set(x, y, CellType.SNAKE)
        food = self.food.position
        if food is not None and not self.grid.is_occupied(food.x, food.y):
            self.grid.set(food.x, food.y, CellType.FOOD)

    def _terminate(self, cause: str) -> None:
        self.status = GameStatus.TERMINATED
        logger.info(
            "Game over (%s collision) at tick %d with score %d.",
            cause, self.tick, self.score,
        )
