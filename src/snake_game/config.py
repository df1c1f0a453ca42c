"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]


@dataclass(frozen=True)
class GameConfig:
    """Screen, grid, timing, and colour settings for one session."""

    # Screen / grid
    screen_width: int = 400
    screen_height: int = 400
    block_length: int = 20

    # Timing
    tick_seconds: int = 1
    fps: int = 60

    # Window
    title: str = "Snake"

    # Colours
    head_color: Color = (65, 77, 68)
    body_color: Color = (255, 255, 255)
    food_color: Color = (255, 0, 0)
    background_color: Color = (0, 0, 0)

    # Food placement
    max_spawn_attempts: int = 1_000
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.block_length < 1:
            raise ValueError("block_length must be positive.")
        if self.screen_width < 1 or self.screen_height < 1:
            raise ValueError("Screen dimensions must be positive.")
        if (
            self.screen_width % self.block_length
            or self.screen_height % self.block_length
        ):
            raise ValueError(
                "Screen dimensions must be divisible by block_length.",
            )
        if self.units_x < 4 or self.units_y < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        if self.tick_seconds < 1:
            raise ValueError("tick_seconds must be at least 1.")
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")

    @property
    def units_x(self) -> int:
        """Number of grid columns."""
        return self.screen_width // self.block_length

    @property
    def units_y(self) -> int:
        """Number of grid rows."""
        return self.screen_height // self.block_length

