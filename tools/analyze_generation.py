"""Report bar spacing statistics for seeded worlds."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, replace
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from swing_game.analysis import analyze
from swing_game.config import ConfigError, GameConfig


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Measure gaps between generated bars across many seeds.")
    parser.add_argument("--seeds", type=int, default=200, help="Number of seeds to sample (0..N-1).")
    parser.add_argument("--chunks", type=int, default=10, help="Chunks generated per world.")
    parser.add_argument(
        "--enforce-reachability",
        action="store_true",
        help="Clamp spacing to the estimated jump reach before generating.",
    )
    parser.add_argument("--output", help="Optional JSON path for the full report.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.seeds < 1 or args.chunks < 1:
        print("--seeds and --chunks must both be at least 1.", file=sys.stderr)
        raise SystemExit(1)

    config = GameConfig()
    if args.enforce_reachability:
        try:
            config = replace(config, world=replace(config.world, enforce_reachability=True))
        except ConfigError as exc:
            print(f"Invalid configuration: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc

    report = analyze(config, range(args.seeds), args.chunks)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w") as fh:
            json.dump(asdict(report), fh, indent=2)
        print(f"Report saved to {output_path}")

    print(f"Worlds: {report.worlds}, bars: {report.bars}")
    print(f"Gap mean {report.gaps.mean:.1f} ± {report.gaps.std:.1f} (max {report.gaps.maximum:.1f})")
    print(f"Climb p90 {report.climbs.p90:.1f} (max {report.climbs.maximum:.1f})")
    print(f"Estimated reach: gap {report.reach.max_gap:.1f}, climb {report.reach.max_rise:.1f}")
    print(f"Gaps beyond reach: {report.unreachable_gaps}, climbs beyond reach: {report.unreachable_climbs}")
    print(f"Diamonds per gap {report.pickups_per_bar:.2f}, obstacles per gap {report.obstacles_per_bar:.2f}")


if __name__ == "__main__":
    main()
