"""Per-frame simulation pass composing input, movement, eating and growth."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from block_bite.config import SimulationConfig
from block_bite.controls import NO_KEYS, KeyState, apply_input
from block_bite.entities import EntityKind, EntityTable, require
from block_bite.food import FoodSpawner
from block_bite.grid import Arena, Position
from block_bite.growth import GrowthQueue, detect_eating, handle_growth
from block_bite.movement import advance_chain
from block_bite.snake import HeadingController, SegmentChain
from block_bite.timers import RepeatingTimer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameReport:
    """What happened during one call to :meth:`Simulation.frame`."""

    moved: bool
    eaten: int
    grown: tuple[int, ...]  # handles of the new tail segments
    spawned_food: int | None


class Simulation:
    """Owns all mutable game state for the lifetime of a run.

    Each :meth:`frame` applies input, then movement when the move timer
    fires, then eating and growth. Food spawning is gated by its own timer
    and runs last, so food landing on the head is eaten next frame.
    There is no game-over state.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = config if config is not None else SimulationConfig()
        self.arena = Arena(self.config.arena_width, self.config.arena_height)
        self.rng = np.random.default_rng(self.config.seed)
        self.table = EntityTable()
        self.chain = SegmentChain()
        self.heading = HeadingController(self.config.direction)
        self.growth_events = GrowthQueue()
        self.food_spawner = FoodSpawner(
            self.table, self.arena, size=self.config.food_size, rng=self.rng,
        )
        self.move_timer = RepeatingTimer(self.config.move_interval)
        self.food_timer = RepeatingTimer(self.config.food_interval)
        self.last_tail_position: Position | None = None
        self.frame_count = 0
        self.tick_count = 0
        self.spawn_snake()

    def spawn_snake(self) -> None:
        """Create the two-segment starting snake."""
        require(len(self.chain) == 0, "Snake has already been spawned.")
        head = self.table.spawn(
            EntityKind.HEAD,
            Position(*self.config.head_start),
            self.config.head_size,
        )
        body = self.table.spawn(
            EntityKind.SEGMENT,
            Position(*self.config.body_start),
            self.config.segment_size,
        )
        self.chain = SegmentChain([head, body])

    @property
    def head_position(self) -> Position:
        heads = self.table.handles(EntityKind.HEAD)
        require(len(heads) == 1, f"Expected one head, found {len(heads)}.")
        return self.table.position(heads[0])

    def move(self) -> None:
        """Run one movement tick and cache the vacated tail cell."""
        self.last_tail_position = advance_chain(
            self.table, self.chain, self.heading.current(),
        )
        self.tick_count += 1

    def frame(self, dt: float, keys: KeyState = NO_KEYS) -> FrameReport:
        """Advance wall time by *dt* seconds and run one frame."""
        apply_input(self.heading, keys)
        moved = self.move_timer.tick(dt)
        if moved:
            self.move()
        eaten = detect_eating(self.table, self.growth_events)
        grown = self._grow()
        spawned = None
        if self.food_timer.tick(dt):
            spawned = self.food_spawner.spawn()
        self.frame_count += 1
        return FrameReport(moved, eaten, tuple(grown), spawned)

    def step(self, keys: KeyState = NO_KEYS) -> FrameReport:
        """Force one movement tick with eating and growth, ignoring timers."""
        apply_input(self.heading, keys)
        self.move()
        eaten = detect_eating(self.table, self.growth_events)
        grown = self._grow()
        self.frame_count += 1
        return FrameReport(True, eaten, tuple(grown), None)

    def place_food(self, x: int, y: int) -> int:
        """Put a food marker at an explicit cell."""
        return self.table.spawn(
            EntityKind.FOOD, Position(x, y), self.config.food_size,
        )

    def segment_positions(self) -> list[Position]:
        return self.chain.positions(self.table)

    def food_positions(self) -> list[Position]:
        return [pos for _, pos in self.table.positions(EntityKind.FOOD)]

    def get_state(self) -> dict:
        """Return the full, serializable simulation state."""
        return {
            "frame": self.frame_count,
            "ticks": self.tick_count,
            "direction": self.heading.current().name.lower(),
            "length": len(self.chain),
            "segments": [p.to_list() for p in self.segment_positions()],
            "foods": [p.to_list() for p in self.food_positions()],
            "last_tail_position": (
                self.last_tail_position.to_list()
                if self.last_tail_position is not None else None
            ),
            "arena": self.arena.to_dict(),
        }

    def _grow(self) -> list[int]:
        return handle_growth(
            self.table,
            self.chain,
            self.growth_events,
            self.last_tail_position,
            self.config.segment_size,
        )
