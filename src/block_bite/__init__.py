"""Block Bite: grid snake simulation core."""

from block_bite.config import GameConfig, SimulationConfig, WindowConfig
from block_bite.controls import Key, KeyState
from block_bite.entities import EntityKind, EntityTable, InvariantViolation
from block_bite.grid import Arena, Position
from block_bite.simulation import FrameReport, Simulation
from block_bite.snake import Direction, HeadingController, SegmentChain

__all__ = [
    "Arena",
    "Direction",
    "EntityKind",
    "EntityTable",
    "FrameReport",
    "GameConfig",
    "HeadingController",
    "InvariantViolation",
    "Key",
    "KeyState",
    "Position",
    "SegmentChain",
    "Simulation",
    "SimulationConfig",
    "WindowConfig",
]
