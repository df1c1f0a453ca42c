"""Command-line launcher for the snake game."""

from __future__ import annotations

import argparse
import logging
import sys


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="snake",
        description=(
            "Play Snake with the arrow keys. The snake moves once per "
            "second; hitting a wall or yourself ends the game."
        ),
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    _build_parser().parse_args(argv)

    from snake_game.app import run

    return run()


if __name__ == "__main__":
    sys.exit(main())
