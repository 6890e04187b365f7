"""Flat entity table holding every positioned thing in the simulation."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from block_bite.grid import Position

logger = logging.getLogger(__name__)


class InvariantViolation(AssertionError):
    """Raised when the simulation reaches a state its design rules out."""


def require(condition: bool, message: str) -> None:
    """Fail fast with :class:`InvariantViolation` unless *condition* holds."""
    if not condition:
        raise InvariantViolation(message)


class EntityKind(enum.Enum):
    """Role of an entity on the board."""

    HEAD = "head"
    SEGMENT = "segment"
    FOOD = "food"


@dataclass
class Entity:
    """One record of the table: stable handle, role, cell and visual size."""

    handle: int
    kind: EntityKind
    position: Position
    size: float


class EntityTable:
    """Entities keyed by integer handles that are never reused.

    Iteration follows spawn order.
    """

    def __init__(self) -> None:
        self._entities: dict[int, Entity] = {}
        self._next_handle = 0

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, handle: object) -> bool:
        return handle in self._entities

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))

    def spawn(self, kind: EntityKind, position: Position, size: float) -> int:
        """Create an entity and return its handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._entities[handle] = Entity(handle, kind, position, size)
        logger.debug("Spawned %s #%d at %s.", kind.value, handle, position)
        return handle

    def despawn(self, handle: int) -> Entity:
        """Remove an entity and return its final record."""
        require(handle in self._entities, f"Unknown entity handle {handle}.")
        return self._entities.pop(handle)

    def get(self, handle: int) -> Entity:
        require(handle in self._entities, f"Unknown entity handle {handle}.")
        return self._entities[handle]

    def position(self, handle: int) -> Position:
        return self.get(handle).position

    def set_position(self, handle: int, position: Position) -> None:
        self.get(handle).position = position

    def handles(self, kind: EntityKind) -> list[int]:
        """Handles of all entities of *kind*, in spawn order."""
        return [e.handle for e in self._entities.values() if e.kind is kind]

    def positions(self, kind: EntityKind) -> list[tuple[int, Position]]:
        """``(handle, position)`` pairs for all entities of *kind*."""
        return [
            (e.handle, e.position)
            for e in self._entities.values()
            if e.kind is kind
        ]
