"""Heading state machine and the ordered chain of snake segments."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import TYPE_CHECKING

from block_bite.entities import require

if TYPE_CHECKING:
    from block_bite.entities import EntityTable
    from block_bite.grid import Position


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) unit steps; ``y`` grows upwards."""

    LEFT = (-1, 0)
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class HeadingController:
    """Current heading of the snake head.

    A candidate heading is accepted unless it is the exact opposite of the
    live current heading.
    """

    def __init__(self, direction: Direction = Direction.UP) -> None:
        self._direction = direction

    def current(self) -> Direction:
        return self._direction

    def set_candidate(self, candidate: Direction) -> bool:
        """Apply *candidate* if legal. Returns whether the heading changed."""
        if candidate is self._direction.opposite:
            return False
        changed = candidate is not self._direction
        self._direction = candidate
        return changed


class SegmentChain:
    """Entity handles of the snake body, head first and tail last."""

    def __init__(self, handles: list[int] | None = None) -> None:
        self._handles: list[int] = list(handles or [])

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[int]:
        return iter(self._handles)

    def __getitem__(self, index: int) -> int:
        return self._handles[index]

    @property
    def head(self) -> int:
        require(bool(self._handles), "Segment chain has no head.")
        return self._handles[0]

    @property
    def tail(self) -> int:
        require(bool(self._handles), "Segment chain has no tail.")
        return self._handles[-1]

    def append(self, handle: int) -> None:
        """Attach *handle* behind the current tail."""
        self._handles.append(handle)

    def positions(self, table: EntityTable) -> list[Position]:
        """Snapshot of every segment position in chain order."""
        return [table.position(h) for h in self._handles]
