"""Throughput benchmark for the frame pass."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from block_bite.config import SimulationConfig
from block_bite.controls import Key, KeyState
from block_bite.simulation import Simulation

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_frames: int
    total_ticks: int
    final_length: int
    wall_time_seconds: float
    frames_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_frames} frames, "
            f"{self.total_ticks} ticks in {self.wall_time_seconds:.2f}s | "
            f"{self.frames_per_second:.1f} frames/s, "
            f"final length {self.final_length}"
        )


def benchmark_throughput(
    *,
    num_frames: int = 10_000,
    dt: float = 1 / 60,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw frame throughput with random held keys.

    Each frame holds one random arrow key, or none, drawn from a seeded
    NumPy generator.
    """
    if num_frames < 1:
        raise ValueError("num_frames must be at least 1.")
    sim = Simulation(SimulationConfig(seed=seed))
    rng = np.random.default_rng(seed)
    keys = list(Key)
    choices = rng.integers(len(keys) + 1, size=num_frames).tolist()

    start = time.perf_counter()
    for choice in choices:
        held = {keys[choice]} if choice < len(keys) else set()
        sim.frame(dt, KeyState(frozenset(held)))
    elapsed = time.perf_counter() - start

    result = BenchmarkResult(
        total_frames=num_frames,
        total_ticks=sim.tick_count,
        final_length=len(sim.chain),
        wall_time_seconds=elapsed,
        frames_per_second=num_frames / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
