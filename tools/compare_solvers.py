#!/usr/bin/env python3
"""
Run every solver over a range of disk counts and check that they agree.

Usage:
    uv run python tools/compare_solvers.py --min-n 0 --max-n 8
    uv run python tools/compare_solvers.py --max-n 10 --out reports/solvers.jsonl
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

PROJECT_ROOT = Path(__file__).resolve().parents[1]
for target in (PROJECT_ROOT / "src", PROJECT_ROOT):
    if str(target) not in sys.path:
        sys.path.insert(0, str(target))

from hanoi_search import (  # pylint: disable=wrong-import-position
    ALGORITHMS,
    SearchConfig,
    SolveRecord,
    TraceDB,
    optimal_move_count,
    replay,
    solve_config,
)


def run_all(min_n: int, max_n: int) -> List[SolveRecord]:
    records = []
    for n in range(min_n, max_n + 1):
        for algorithm in ALGORITHMS:
            config = SearchConfig(num_disks=n, algorithm=algorithm).validate()
            t0 = time.perf_counter()
            result = solve_config(config)
            elapsed = (time.perf_counter() - t0) * 1000.0
            rec = SolveRecord.from_result(config, result, elapsed_ms=elapsed)
            rec.notes["optimal"] = result.cost == optimal_move_count(n)
            rec.notes["replay_ok"] = result.solved and replay(n, result.moves).is_goal()
            records.append(rec)
    return records


def growth_rate(records: List[SolveRecord], algorithm: str) -> Optional[float]:
    """Fitted per-disk growth factor of expansions (2**slope of log2 fit)."""
    pts = [(r.num_disks, r.expanded) for r in records if r.algorithm == algorithm and r.expanded > 0]
    if len(pts) < 2:
        return None
    xs = np.array([p[0] for p in pts], dtype=float)
    ys = np.log2(np.array([p[1] for p in pts], dtype=float))
    slope, _ = np.polyfit(xs, ys, 1)
    return float(2.0 ** slope)


def print_table(records: List[SolveRecord]) -> None:
    print(f"{'n':>3}  {'algorithm':<10} {'moves':>7} {'expanded':>9} {'ms':>9}  ok")
    for r in records:
        ok = r.notes.get("optimal") and r.notes.get("replay_ok")
        print(f"{r.num_disks:>3}  {r.algorithm:<10} {r.cost:>7} {r.expanded:>9} {r.elapsed_ms or 0.0:>9.2f}  {'yes' if ok else 'NO'}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Compare Tower of Hanoi solvers")
    parser.add_argument("--min-n", type=int, default=0)
    parser.add_argument("--max-n", type=int, default=8)
    parser.add_argument("--out", type=Path, default=None, help="JSONL file to append solve records to")
    args = parser.parse_args()

    if args.min_n < 0 or args.max_n < args.min_n:
        parser.error("need 0 <= --min-n <= --max-n")

    records = run_all(args.min_n, args.max_n)
    print_table(records)

    rates: Dict[str, Optional[float]] = {a: growth_rate(records, a) for a in ("astar", "ucs")}
    print()
    for algorithm, rate in rates.items():
        if rate is not None:
            print(f"{algorithm}: expansions grow ~{rate:.2f}x per disk")

    if args.out is not None:
        db = TraceDB(args.out)
        for r in records:
            db.add_record(r)
        db.close()
        print(f"\nWrote {len(records)} records to {args.out}")

    bad = [r for r in records if not (r.notes.get("optimal") and r.notes.get("replay_ok"))]
    return 1 if bad else 0


if __name__ == "__main__":
    sys.exit(main())
