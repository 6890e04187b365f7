"""Random food placement."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from block_bite.entities import EntityKind

if TYPE_CHECKING:
    from block_bite.entities import EntityTable
    from block_bite.grid import Arena

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food markers at uniformly random arena cells.

    Existing food and the snake body are not avoided, so food can stack on
    one cell or land under a segment. Uses a seeded NumPy RNG for
    reproducible placement.
    """

    def __init__(
        self,
        table: EntityTable,
        arena: Arena,
        size: float = 0.8,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.table = table
        self.arena = arena
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self) -> int:
        """Create one food marker and return its handle."""
        position = self.arena.random_cell(self.rng)
        handle = self.table.spawn(EntityKind.FOOD, position, self.size)
        logger.debug("Food #%d placed at %s.", handle, position)
        return handle

    def count(self) -> int:
        return len(self.table.handles(EntityKind.FOOD))
