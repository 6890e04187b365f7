"""Eating detection and tail growth."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from block_bite.entities import EntityKind, require

if TYPE_CHECKING:
    from block_bite.entities import EntityTable
    from block_bite.grid import Position
    from block_bite.snake import SegmentChain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrowthEvent:
    """Request to append one segment; records the food that caused it."""

    food_handle: int


class GrowthQueue:
    """FIFO of growth events emitted by the eating detector."""

    def __init__(self) -> None:
        self._events: deque[GrowthEvent] = deque()

    def __len__(self) -> int:
        return len(self._events)

    def send(self, event: GrowthEvent) -> None:
        self._events.append(event)

    def drain(self) -> list[GrowthEvent]:
        """Remove and return every pending event."""
        events = list(self._events)
        self._events.clear()
        return events


def detect_eating(table: EntityTable, events: GrowthQueue) -> int:
    """Despawn every food sharing a cell with a head.

    Each eaten food emits its own growth event. Returns the number eaten.
    """
    eaten = 0
    for _, head_pos in table.positions(EntityKind.HEAD):
        for food_handle, food_pos in table.positions(EntityKind.FOOD):
            if food_pos == head_pos:
                table.despawn(food_handle)
                events.send(GrowthEvent(food_handle))
                eaten += 1
    if eaten > 1:
        logger.warning(
            "%d foods eaten in one frame; new segments will share a cell.",
            eaten,
        )
    return eaten


def handle_growth(
    table: EntityTable,
    chain: SegmentChain,
    events: GrowthQueue,
    last_tail: Position | None,
    segment_size: float,
) -> list[int]:
    """Append one tail segment per pending event at *last_tail*.

    Several events drained together all land on the same cached cell.
    Returns the handles of the new segments.
    """
    if not events:
        return []
    require(
        last_tail is not None,
        "Growth requested before any movement tick recorded a tail position.",
    )
    pending = events.drain()
    grown: list[int] = []
    for _ in pending:
        handle = table.spawn(EntityKind.SEGMENT, last_tail, segment_size)
        chain.append(handle)
        grown.append(handle)
    logger.info(
        "Snake grew by %d to length %d at %s.",
        len(grown), len(chain), last_tail,
    )
    return grown
