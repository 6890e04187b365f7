"""Fixed-tick movement of the segment chain."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from block_bite.entities import EntityTable
    from block_bite.grid import Position
    from block_bite.snake import Direction, SegmentChain

logger = logging.getLogger(__name__)


def advance_chain(
    table: EntityTable,
    chain: SegmentChain,
    direction: Direction,
) -> Position:
    """Move the chain one cell along *direction*.

    The head takes a unit step and every trailing segment jumps into the
    cell its predecessor held before the move. Nothing is clamped or
    wrapped. Returns the pre-move position of the tail, which for a
    single-segment chain is the head's old cell.
    """
    before = chain.positions(table)
    table.set_position(chain.head, before[0].shifted(direction))
    for handle, previous in zip(list(chain)[1:], before[:-1], strict=True):
        table.set_position(handle, previous)
    logger.debug(
        "Moved %s: head %s -> %s.",
        direction.name,
        before[0],
        table.position(chain.head),
    )
    return before[-1]
