"""Headless command line runner for Block Bite."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from block_bite.config import GameConfig
from block_bite.controls import NO_KEYS, KeyState

logger = logging.getLogger(__name__)


def parse_turns(script: str) -> dict[int, KeyState]:
    """Parse ``"FRAME:KEY,FRAME:KEY"`` into held keys per frame index."""
    turns: dict[int, KeyState] = {}
    for item in filter(None, (part.strip() for part in script.split(","))):
        frame_text, sep, key_name = item.partition(":")
        if not sep:
            raise ValueError(f"Malformed turn {item!r}; expected FRAME:KEY.")
        try:
            frame = int(frame_text)
        except ValueError:
            raise ValueError(f"Malformed frame index in {item!r}.") from None
        if frame < 0:
            raise ValueError(f"Frame index must be >= 0 in {item!r}.")
        turns[frame] = KeyState.from_names(key_name.strip())
    return turns


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="block-bite",
        description="Block Bite snake simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser("run", help="Run the simulation headless.")
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    run_p.add_argument("--frames", type=int, default=600)
    run_p.add_argument(
        "--dt", type=float, default=1 / 60,
        help="Seconds of wall time per frame.",
    )
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument(
        "--turns", type=str, default="",
        help='Held keys per frame, e.g. "10:left,40:down".',
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure frame throughput.",
    )
    bench_p.add_argument("--frames", type=int, default=10_000)
    bench_p.add_argument("--dt", type=float, default=1 / 60)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _run_simulation(args: argparse.Namespace) -> int:
    from block_bite.simulation import Simulation

    config = GameConfig.load(args.config) if args.config else GameConfig()
    sim_config = config.simulation
    if args.seed is not None:
        sim_config = dataclasses.replace(sim_config, seed=args.seed)

    turns = parse_turns(args.turns)
    sim = Simulation(sim_config)
    for frame in range(args.frames):
        sim.frame(args.dt, turns.get(frame, NO_KEYS))

    logger.info(
        "Ran %d frames (%d ticks); snake length %d.",
        sim.frame_count, sim.tick_count, len(sim.chain),
    )
    print(json.dumps(sim.get_state()))  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from block_bite.benchmark import benchmark_throughput

    result = benchmark_throughput(
        num_frames=args.frames, dt=args.dt, seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``block-bite`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_simulation,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
