"""Pygame host loop driving the game engine."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pygame

from snake_game.config import GameConfig
from snake_game.controls import direction_from_events
from snake_game.engine import GameEngine, GameStatus

logger = logging.getLogger(__name__)


def run(
    config: GameConfig | None = None,
    engine_factory: Callable[[GameConfig], GameEngine] = GameEngine,
) -> int:
    """Open the window and run frames until game over or window close.

    Returns the process exit code: 0 when the session ends normally, 1 when
    the display cannot be initialised.
    """
    config = config if config is not None else GameConfig()
    engine = engine_factory(config)

    try:
        pygame.init()
        size = engine.layout(config.screen_width, config.screen_height)
        # No RESIZABLE flag: the window keeps its logical size.
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(config.title)
    except pygame.error:
        logger.exception("Failed to initialise the display.")
        pygame.quit()
        return 1

    clock = pygame.time.Clock()
    try:
        while True:
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                logger.info("Window closed with score %d.", engine.score)
                return 0

            status = engine.update(direction_from_events(events))
            if status is GameStatus.TERMINATED:
                print("game over")  # noqa: T201
                return 0

            screen.fill(config.background_color)
            engine.render(screen)
            pygame.display.flip()
            clock.tick(config.fps)
    finally:
        pygame.quit()
