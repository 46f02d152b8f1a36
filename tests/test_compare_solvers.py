import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
for target in (PROJECT_ROOT / "src", PROJECT_ROOT):
    target_str = str(target)
    if target_str not in sys.path:
        sys.path.append(target_str)

from tools.compare_solvers import growth_rate, run_all  # type: ignore  # pylint: disable=wrong-import-position


def test_all_solvers_agree():
    records = run_all(0, 4)
    assert len(records) == 5 * 4
    for rec in records:
        assert rec.status == "SOLVED"
        assert rec.cost == 2 ** rec.num_disks - 1
        assert rec.notes["optimal"] and rec.notes["replay_ok"]


def test_growth_rate():
    records = run_all(1, 4)
    assert growth_rate(records, "astar") > 1.0
    assert growth_rate(records, "ucs") > 1.0
    # baselines report no expansions
    assert growth_rate(records, "bfs") is None
