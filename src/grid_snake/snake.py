"""Directions and the ordered snake body."""

from __future__ import annotations

import enum
from collections import deque

from grid_snake.grid import Cell


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) unit step values."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_key(cls, key: str) -> Direction | None:
        """Map an input key name to a direction, or ``None`` if unmapped."""
        return _KEY_MAP.get(key.strip().lower())


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_KEY_MAP: dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def initial_body(
    start: tuple[int, int],
    direction: Direction,
    length: int,
) -> list[Cell]:
    """Lay out *length* cells from *start*, trailing behind *direction*."""
    dx, dy = direction.value
    x, y = start
    return [Cell(x - dx * i, y - dy * i) for i in range(length)]


class Snake:
    """A snake represented as an ordered deque of cells.

    The head is ``body[0]``; the tail is ``body[-1]``. Consecutive cells
    are orthogonally adjacent because the body only changes through
    :meth:`advance` and :meth:`grow`.
    """

    def __init__(
        self,
        start: tuple[int, int],
        direction: Direction = Direction.RIGHT,
        length: int = 5,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.body: deque[Cell] = deque(initial_body(start, direction, length))

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        """Return the head cell."""
        return self.body[0]

    @property
    def tail(self) -> Cell:
        """Return the tail cell."""
        return self.body[-1]

    def next_head(self, direction: Direction) -> Cell:
        """Compute the next head cell without moving."""
        return self.head.offset(*direction.value)

    def collides(self, cell: tuple[int, int], exclude_tail: bool = True) -> bool:
        """Check *cell* against the segments that stay put on the next move.

        The head always vacates its cell. The tail only does so when the
        snake is not growing on this move; pass ``exclude_tail=False`` then.
        """
        segments = list(self.body)[1:]
        if exclude_tail:
            segments = segments[:-1]
        return any(seg == cell for seg in segments)

    def advance(self, new_head: Cell) -> Cell:
        """Shift every segment one step toward the head.

        Returns the vacated (pre-move) tail cell.
        """
        self.body.appendleft(new_head)
        return self.body.pop()

    def grow(self, cell: Cell) -> None:
        """Append a segment at *cell*, which must be the cell just vacated."""
        self.body.append(cell)

    def to_dict(self) -> dict:
        """Serialize the snake body to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
