"""Simulation and window configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from block_bite.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Board extent, tick rates, starting layout and entity sizes."""

    arena_width: int = 10
    arena_height: int = 10
    move_interval: float = 0.150  # seconds per movement tick
    food_interval: float = 1.0  # seconds between food spawns
    head_start: tuple[int, int] = (3, 3)
    body_start: tuple[int, int] = (3, 2)
    start_direction: str = "up"
    head_size: float = 0.8
    segment_size: float = 0.65
    food_size: float = 0.8
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.arena_width < 1 or self.arena_height < 1:
            raise ValueError("Arena dimensions must be at least 1×1.")
        if self.move_interval <= 0 or self.food_interval <= 0:
            raise ValueError("Timer intervals must be positive.")
        Direction.from_name(self.start_direction)

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.start_direction)


@dataclass(frozen=True)
class WindowConfig:
    """Static window parameters for a rendering front end."""

    title: str = "Block Bite"
    width: float = 500.0
    height: float = 500.0
    clear_color: tuple[float, float, float] = (0.04, 0.04, 0.04)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Window size must be positive.")


@dataclass(frozen=True)
class GameConfig:
    """Full configuration. Supports JSON serialization."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    window: WindowConfig = field(default_factory=WindowConfig)

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        _reject_unknown(raw, {"simulation", "window"}, "config")
        sim = dict(raw.get("simulation", {}))
        _reject_unknown(sim, _field_names(SimulationConfig), "simulation")
        for key in ("head_start", "body_start"):
            if key in sim:
                sim[key] = tuple(sim[key])
        win = dict(raw.get("window", {}))
        _reject_unknown(win, _field_names(WindowConfig), "window")
        if "clear_color" in win:
            win["clear_color"] = tuple(win["clear_color"])
        return cls(
            simulation=SimulationConfig(**sim), window=WindowConfig(**win),
        )


def _field_names(cls: type) -> set[str]:
    return {f.name for f in fields(cls)}


def _reject_unknown(section: dict, allowed: set[str], name: str) -> None:
    unknown = sorted(set(section) - allowed)
    if unknown:
        raise ValueError(f"Unknown {name} keys: {', '.join(unknown)}.")
