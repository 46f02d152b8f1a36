"""CLI runner for the Tower of Hanoi solvers."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
for path in (str(SRC), str(ROOT)):
    if path not in sys.path:
        sys.path.insert(0, path)

from hanoi_search import (  # pylint: disable=wrong-import-position
    ALGORITHMS,
    HanoiError,
    Move,
    SearchConfig,
    SearchLogger,
    SolveRecord,
    TraceDB,
    load_config,
    replay,
    solve_config,
)


def format_moves(moves: Sequence[Move]) -> List[str]:
    """Render a move list exactly as the console output prints it."""
    lines = [f"Solution found in {len(moves)} moves:"]
    lines.extend(m.describe() for m in moves)
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve the Tower of Hanoi.")
    parser.add_argument("--n", type=int, default=None, help="Number of disks (default: 3, or the config value)")
    parser.add_argument("--algorithm", choices=ALGORITHMS, default=None, help="Solver to run (default: astar)")
    parser.add_argument("--config", type=Path, default=None, help="YAML run configuration")
    parser.add_argument("--log-out", type=Path, default=None, help="Write search frames to this JSON file")
    parser.add_argument("--trace-out", type=Path, default=None, help="Append a solve record to this JSONL file")
    parser.add_argument("--show-pegs", action="store_true", help="Print the pegs after replaying the solution")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else SearchConfig()
        if args.n is not None:
            config.num_disks = args.n
        if args.algorithm is not None:
            config.algorithm = args.algorithm
        if args.log_out is not None:
            config.trace = True
        config.validate()
    except (HanoiError, ValueError, OSError, yaml.YAMLError) as exc:
        parser.error(str(exc))

    logger = SearchLogger() if config.trace else None
    result = solve_config(config, logger)

    if args.trace_out is not None:
        db = TraceDB(args.trace_out)
        db.add_record(SolveRecord.from_result(config, result))
        db.close()
    if logger is not None and args.log_out is not None:
        logger.to_json(str(args.log_out))

    if not result.solved:
        print(f"No solution found after {result.expanded} expansions")
        return 1

    for line in format_moves(result.moves):
        print(line)

    if args.show_pegs:
        hanoi = replay(config.num_disks, result.moves, config.source_peg)
        print()
        print(hanoi)
        print(f"Goal reached: {hanoi.is_goal(config.target_peg)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
