from itertools import product

from hanoi_search.heuristic import misplaced_disks, null_heuristic
from hanoi_search.search import astar_search
from hanoi_search.state import HanoiState, goal_state, start_state
from hanoi_search.transitions import neighbors


def test_goal_is_zero_and_start_is_n():
    for n in range(6):
        assert misplaced_disks(goal_state(n)) == 0
        assert misplaced_disks(start_state(n)) == n


def test_respects_target_peg():
    s = HanoiState((0, 1, 1))
    assert misplaced_disks(s, target=1) == 1
    assert misplaced_disks(s, target=0) == 2


def test_consistent_across_every_transition():
    for pos in product(range(3), repeat=3):
        s = HanoiState(pos)
        for nxt, _ in neighbors(s):
            assert misplaced_disks(nxt) >= misplaced_disks(s) - 1


def test_never_overestimates():
    for pos in product(range(3), repeat=3):
        s = HanoiState(pos)
        true_cost = astar_search(s, heuristic=null_heuristic).cost
        assert misplaced_disks(s) <= true_cost
