"""Grid coordinates and arena extent for the snake game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from block_bite.snake import Direction


@dataclass(frozen=True)
class Position:
    """Integer (x, y) cell on the logical board.

    ``x`` grows to the right and ``y`` grows upwards. No bounds are
    enforced; cells outside the arena are valid positions.
    """

    x: int
    y: int

    def shifted(self, direction: Direction) -> Position:
        """Return the neighbouring cell one unit step along *direction*."""
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)

    def to_list(self) -> list[int]:
        return [self.x, self.y]


class Arena:
    """Fixed board extent used for food placement and screen mapping.

    The movement core never consults the arena: the snake may leave it.
    """

    def __init__(self, width: int = 10, height: int = 10) -> None:
        if width < 1 or height < 1:
            raise ValueError("Arena dimensions must be at least 1×1.")
        self.width = width
        self.height = height

    @property
    def extent(self) -> tuple[int, int]:
        return self.width, self.height

    def random_cell(self, rng: np.random.Generator) -> Position:
        """Pick a uniformly random cell in [0, width) × [0, height)."""
        x = int(rng.integers(0, self.width))
        y = int(rng.integers(0, self.height))
        return Position(x, y)

    def to_dict(self) -> dict:
        """Serialize arena extent to a dictionary."""
        return {"width": self.width, "height": self.height}
