"""Arrow-key input mapping."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from snake_game.snake import Direction

KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def direction_from_events(
    events: Iterable[pygame.event.Event],
) -> Direction | None:
    """Return the heading for the last arrow key pressed this frame.

    Only ``KEYDOWN`` events count, so a held key triggers once. Returns
    ``None`` when no arrow key was pressed.
    """
    direction = None
    for event in events:
        if event.type == pygame.KEYDOWN and event.key in KEY_DIRECTIONS:
            direction = KEY_DIRECTIONS[event.key]
    return direction
