"""Held-key sampling and heading proposals."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from block_bite.snake import Direction, HeadingController


class Key(enum.Enum):
    """Arrow keys the simulation listens to."""

    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"


# When several keys are held at once the first match wins.
KEY_PRIORITY: tuple[tuple[Key, Direction], ...] = (
    (Key.LEFT, Direction.LEFT),
    (Key.DOWN, Direction.DOWN),
    (Key.UP, Direction.UP),
    (Key.RIGHT, Direction.RIGHT),
)


@dataclass(frozen=True)
class KeyState:
    """Keys held down during one frame."""

    held: frozenset[Key] = frozenset()

    @classmethod
    def from_flags(
        cls,
        left: bool = False,
        up: bool = False,
        right: bool = False,
        down: bool = False,
    ) -> KeyState:
        flags = {Key.LEFT: left, Key.UP: up, Key.RIGHT: right, Key.DOWN: down}
        return cls(frozenset(k for k, pressed in flags.items() if pressed))

    @classmethod
    def from_names(cls, *names: str) -> KeyState:
        """Build a key state from names such as ``"left"`` or ``"UP"``."""
        keys = set()
        for name in names:
            try:
                keys.add(Key(name.lower()))
            except ValueError:
                raise ValueError(f"Unknown key {name!r}.") from None
        return cls(frozenset(keys))

    def pressed(self, key: Key) -> bool:
        return key in self.held


NO_KEYS = KeyState()


def propose_heading(keys: KeyState) -> Direction | None:
    """Return the heading requested by *keys*, or None if nothing is held."""
    for key, direction in KEY_PRIORITY:
        if keys.pressed(key):
            return direction
    return None


def apply_input(heading: HeadingController, keys: KeyState) -> bool:
    """Feed one input sample to *heading*. Returns whether it changed."""
    candidate = propose_heading(keys)
    if candidate is None:
        return False
    return heading.set_candidate(candidate)
