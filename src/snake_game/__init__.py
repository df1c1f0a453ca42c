"""Snake — a real-time grid snake game."""

from snake_game.config import GameConfig
from snake_game.engine import GameEngine, GameStatus
from snake_game.grid import CellType, Grid
from snake_game.snake import Direction, Position, Snake

__all__ = [
    "CellType",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameStatus",
    "Grid",
    "Position",
    "Snake",
]
