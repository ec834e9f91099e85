"""
Headless Flock Runner
=====================

Ticks a flock without opening a window and reports throughput and state
statistics. Useful for profiling backends and checking that a parameter
set keeps the simulation within its limits.

Usage:
    python -m tools.headless                       # 125 boids, 1000 ticks
    python -m tools.headless -n 500 -t 200         # Custom size and length
    python -m tools.headless --backend numba       # Compiled tick
    python -m tools.headless --preset swarm        # Named parameter set
    python -m tools.headless --seed 7 --every 100  # Reproducible, periodic report
"""

import sys
import time
import argparse
from typing import Dict, List, Optional, Sequence

from boids import Flock
from boids.flock import BACKENDS
from tools.presets import PRESETS, get_preset_list, get_preset_overrides


def parse_number(value: str) -> int:
    """Parse number with optional suffix (k, m, K, M)."""
    value = value.strip().lower()
    multipliers = {'k': 1_000, 'm': 1_000_000}

    for suffix, mult in multipliers.items():
        if value.endswith(suffix):
            return int(float(value[:-1]) * mult)

    return int(value)


def format_stats(stats: Dict[str, object]) -> str:
    """One-line summary of Flock.stats()."""
    cx, cy, cz = stats["centroid"]
    return (
        f"tick {stats['tick']:>6} | "
        f"speed avg {stats['mean_speed']:.3f} max {stats['max_speed']:.3f} | "
        f"force avg {stats['mean_force']:.4f} | "
        f"neighbors {stats['mean_neighbors']:.1f} | "
        f"centroid ({cx:.1f}, {cy:.1f}, {cz:.1f})"
    )


def run(flock: Flock, ticks: int, every: int = 0) -> List[str]:
    """
    Advance ``flock`` by ``ticks`` ticks, printing a report every ``every``.

    Returns the invariant violations found after the final tick.
    """
    start = time.perf_counter()
    for _ in range(ticks):
        flock.update()
        if every and flock.tick % every == 0:
            print(f"[Headless] {format_stats(flock.stats())}")
    elapsed = time.perf_counter() - start

    rate = ticks / elapsed if elapsed > 0 else float("inf")
    print(f"[Headless] {ticks:,} ticks in {elapsed:.2f}s ({rate:,.1f} ticks/s)")
    print(f"[Headless] {format_stats(flock.stats())}")

    return flock.check_invariants() if ticks > 0 else []


def print_presets():
    """Print the preset table grouped by category."""
    current_category = None
    for key, preset in get_preset_list():
        if preset["category"] != current_category:
            current_category = preset["category"]
            print(f"\n  {current_category}")
        print(f"    {key:<12} {preset['name']:<15} {preset['description']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the boids simulation without a window")
    parser.add_argument("--boids", "-n", type=str, help="Number of boids (e.g., 125, 1k)")
    parser.add_argument("--ticks", "-t", type=int, default=1000, help="Ticks to simulate (default: 1000)")
    parser.add_argument("--seed", type=int, help="Random seed for initial placement")
    parser.add_argument("--backend", choices=BACKENDS, help="Tick implementation")
    parser.add_argument("--preset", choices=sorted(PRESETS), help="Named parameter set")
    parser.add_argument("--list-presets", action="store_true", help="List presets and exit")
    parser.add_argument("--reset-acceleration", action="store_true",
                        help="Zero each boid's steering accumulator at the start of every tick")
    parser.add_argument("--every", type=int, default=0, metavar="TICKS",
                        help="Print a status line every N ticks (0 = only at the end)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_presets:
        print_presets()
        return 0

    overrides = {}
    if args.preset:
        overrides.update(get_preset_overrides(args.preset))
        print(f"[Headless] Using preset: {args.preset}")

    num_boids = overrides.pop("count", None)
    preset_backend = overrides.pop("backend", None)
    backend = args.backend or preset_backend
    if args.boids:
        try:
            num_boids = parse_number(args.boids)
        except ValueError:
            print(f"[Headless] Invalid boids value: {args.boids}")
            return 2

    if args.reset_acceleration:
        overrides["reset_acceleration"] = True

    if args.ticks < 0:
        print(f"[Headless] Invalid ticks value: {args.ticks}")
        return 2

    try:
        flock = Flock(num_boids=num_boids, seed=args.seed, backend=backend, **overrides)
    except ValueError as e:
        print(f"[Headless] {e}")
        return 2

    problems = run(flock, args.ticks, args.every)
    if problems:
        print(f"[Headless] {len(problems)} invariant violation(s):")
        for problem in problems[:20]:
            print(f"  - {problem}")
        return 1

    print("[Headless] ✓ All invariants hold")
    return 0


if __name__ == "__main__":
    sys.exit(main())
