"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Position(NamedTuple):
    """A grid cell addressed by column ``x`` and row ``y``."""

    x: int
    y: int


class Direction(enum.Enum):
    """Headings with (x_delta, y_delta) values. ``y`` grows downward."""

    RIGHT = (1, 0)
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)


class Snake:
    """A head position plus an ordered list of trailing body segments.

    ``body[0]`` is the segment nearest the head; ``body[-1]`` is the tail.
    """

    def __init__(
        self,
        head_x: int,
        head_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 2,
    ) -> None:
        if length < 1:
            raise ValueError("Snake body length must be at least 1.")
        dx, dy = direction.value
        self.head = Position(head_x, head_y)
        self.body: list[Position] = [
            Position(head_x - dx * i, head_y - dy * i)
            for i in range(1, length + 1)
        ]
        self.direction = direction

    def set_direction(self, new_direction: Direction) -> None:
        """Change heading. Reversals are accepted as-is."""
        self.direction = new_direction

    def next_head(self) -> Position:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        return Position(self.head.x + dx, self.head.y + dy)

    def advance(self) -> Position:
        """Move one step: shift the body, then the head.

        Segments are shifted from the tail forward so every segment reads
        its predecessor before that predecessor is overwritten. Returns the
        new head position.
        """
        for i in range(len(self.body) - 1, 0, -1):
            self.body[i] = self.body[i - 1]
        self.body[0] = self.head
        self.head = self.next_head()
        return self.head

    def grow(self) -> None:
        """Append one segment on top of the current tail."""
        self.body.append(self.body[-1])

    def hits_body(self) -> bool:
        """Check whether the head overlaps any body segment."""
        return self.head in self.body

    def cells(self) -> list[Position]:
        """Return the head followed by every body segment."""
        return [self.head, *self.body]

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": list(self.head),
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
