"""Mapping from grid cells to window pixels for a rendering front end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from block_bite.entities import EntityKind

if TYPE_CHECKING:
    from block_bite.config import WindowConfig
    from block_bite.simulation import Simulation

COLORS: dict[EntityKind, tuple[float, float, float]] = {
    EntityKind.HEAD: (0.7, 0.7, 0.7),
    EntityKind.SEGMENT: (0.3, 0.3, 0.3),
    EntityKind.FOOD: (1.0, 0.0, 1.0),
}


@dataclass(frozen=True)
class RenderItem:
    """Pixel-space placement of one entity, origin at the window centre."""

    handle: int
    kind: EntityKind
    x: float
    y: float
    width: float
    height: float
    color: tuple[float, float, float]


def to_screen(
    pos: np.ndarray | float,
    window_size: np.ndarray | float,
    extent: np.ndarray | float,
) -> np.ndarray:
    """Centre of a cell in pixels, for a window centred on the origin."""
    pos = np.asarray(pos, dtype=np.float64)
    window_size = np.asarray(window_size, dtype=np.float64)
    extent = np.asarray(extent, dtype=np.float64)
    tile = window_size / extent
    return pos / extent * window_size - window_size / 2.0 + tile / 2.0


def scale_for(
    size: np.ndarray | float,
    window_size: np.ndarray | float,
    extent: np.ndarray | float,
) -> np.ndarray:
    """Pixel footprint of an entity whose size is given in cells."""
    size = np.asarray(size, dtype=np.float64)
    return size / np.asarray(extent, dtype=np.float64) * np.asarray(
        window_size, dtype=np.float64,
    )


def render_items(sim: Simulation, window: WindowConfig) -> list[RenderItem]:
    """Translate every entity of *sim* into window coordinates."""
    entities = list(sim.table)
    if not entities:
        return []
    window_size = np.array([window.width, window.height])
    extent = np.array(sim.arena.extent)
    cells = np.array([[e.position.x, e.position.y] for e in entities])
    sizes = np.array([[e.size, e.size] for e in entities])
    centres = to_screen(cells, window_size, extent)
    footprints = scale_for(sizes, window_size, extent)
    return [
        RenderItem(
            handle=e.handle,
            kind=e.kind,
            x=float(centre[0]),
            y=float(centre[1]),
            width=float(footprint[0]),
            height=float(footprint[1]),
            color=COLORS[e.kind],
        )
        for e, centre, footprint in zip(
            entities, centres, footprints, strict=True,
        )
    ]
