"""Tests for the informed best-first search engine."""

import pytest

from hanoi_search.env import replay
from hanoi_search.errors import InvalidDiskCount, NoSolutionFound
from hanoi_search.heuristic import null_heuristic
from hanoi_search.logger import SearchLogger
from hanoi_search.reference import bfs_solve, plan_hanoi
from hanoi_search.search import (
    SearchNode,
    SearchStatus,
    astar_search,
    reconstruct_path,
    solve,
)
from hanoi_search.state import HanoiState, Move, goal_state, start_state


class TestSolve:
    """Known answers for small disk counts."""

    def test_zero_disks(self):
        assert solve(0) == []

    def test_one_disk(self):
        assert solve(1) == [Move(0, 0, 2)]

    def test_two_disks(self):
        assert solve(2) == [Move(0, 0, 1), Move(1, 0, 2), Move(0, 1, 2)]

    def test_three_disks_matches_classical_pattern(self):
        assert solve(3) == [
            Move(0, 0, 2),
            Move(1, 0, 1),
            Move(0, 2, 1),
            Move(2, 0, 2),
            Move(0, 1, 0),
            Move(1, 1, 2),
            Move(0, 0, 2),
        ]

    @pytest.mark.parametrize("n", range(0, 7))
    def test_move_count_is_optimal(self, n):
        moves = solve(n)
        assert len(moves) == 2 ** n - 1
        assert len(moves) == len(bfs_solve(n)) == len(plan_hanoi(n))

    @pytest.mark.parametrize("n", range(1, 6))
    def test_replay_reaches_goal_legally(self, n):
        hanoi = replay(n, solve(n))
        assert hanoi.is_goal()
        assert hanoi.state() == goal_state(n)

    def test_deterministic(self):
        assert solve(5) == solve(5)

    def test_negative_disk_count(self):
        with pytest.raises(InvalidDiskCount):
            solve(-1)
        with pytest.raises(ValueError):
            solve(-3)

    def test_non_integer_disk_count(self):
        with pytest.raises(InvalidDiskCount):
            solve(2.5)


class TestAstarSearch:
    def test_start_already_goal(self):
        result = astar_search(goal_state(4))
        assert result.status is SearchStatus.SOLVED
        assert result.moves == []
        assert result.expanded == 0

    def test_custom_pegs(self):
        result = astar_search(start_state(3, peg=1), target=0)
        assert result.solved
        assert result.cost == 7
        assert replay(3, result.moves, source=1).is_goal(target=0)

    def test_uniform_cost_agrees_on_cost(self):
        informed = astar_search(start_state(5))
        uninformed = astar_search(start_state(5), heuristic=null_heuristic)
        assert informed.cost == uninformed.cost == 31

    def test_unreachable_goal_is_empty_result(self):
        # No peg 5 exists, so the whole state space is exhausted.
        result = astar_search(start_state(2), target=5)
        assert result.status is SearchStatus.NO_SOLUTION
        assert result.moves == []
        assert result.expanded == 3 ** 2
        with pytest.raises(NoSolutionFound):
            result.require_moves()

    def test_require_moves_when_solved(self):
        result = astar_search(start_state(2))
        assert result.require_moves() == result.moves

    def test_runs_are_independent(self):
        first = astar_search(start_state(3))
        astar_search(start_state(4))
        again = astar_search(start_state(3))
        assert first.moves == again.moves
        assert first.expanded == again.expanded


class TestReconstructPath:
    def test_walks_back_to_origin(self):
        a, b, c = HanoiState((0, 0)), HanoiState((1, 0)), HanoiState((1, 2))
        came_from = {
            "00": SearchNode(a, 0, 2),
            "10": SearchNode(b, 1, 2, Move(0, 0, 1), "00"),
            "12": SearchNode(c, 2, 1, Move(1, 0, 2), "10"),
        }
        assert reconstruct_path(came_from, "12") == [Move(0, 0, 1), Move(1, 0, 2)]
        assert reconstruct_path(came_from, "00") == []

    def test_missing_key_gives_empty_path(self):
        assert reconstruct_path({}, "22") == []


class TestSearchLogger:
    def test_frames_cover_the_run(self):
        logger = SearchLogger()
        result = astar_search(start_state(3), logger=logger)

        assert logger.events[0]["type"] == "start"
        assert logger.events[0]["h"] == 3
        assert logger.events[-1]["type"] == "result"
        assert logger.events[-1]["status"] == "SOLVED"
        assert logger.events[-1]["cost"] == 7

        expands = logger.frames("expand")
        assert len(expands) == result.expanded
        assert [f["step"] for f in expands] == list(range(1, result.expanded + 1))
        # consistent heuristic: expanded f never decreases
        fs = [f["f"] for f in expands]
        assert fs == sorted(fs)

    def test_max_frames_keeps_result(self):
        logger = SearchLogger(max_frames=3)
        astar_search(start_state(4), logger=logger)
        assert len(logger.events) == 4
        assert logger.events[-1]["type"] == "result"
        assert logger.dropped > 0

    def test_to_json(self, tmp_path):
        import json

        logger = SearchLogger()
        astar_search(start_state(2), logger=logger)
        path = tmp_path / "frames.json"
        logger.to_json(str(path))
        data = json.loads(path.read_text())
        assert data["events"][-1]["moves"] == [[0, 0, 1], [1, 0, 2], [0, 1, 2]]


class TestFrontierBookkeeping:
    def test_stale_entries_are_discarded(self):
        logger = SearchLogger()
        result = astar_search(start_state(5), logger=logger)

        assert result.cost == 31
        stale = logger.frames("stale")
        assert stale
        expanded_keys = [f["key"] for f in logger.frames("expand")]
        assert len(expanded_keys) == len(set(expanded_keys))
        # a stale pop is always for a state that was already expanded
        assert all(f["key"] in expanded_keys for f in stale)

    def test_ties_on_f_pop_lowest_key_first(self):
        # From "10" the successors are generated as 00, 20, 12; with a zero
        # heuristic they all have f == 1 and must come off by key.
        logger = SearchLogger()
        astar_search(HanoiState((1, 0)), heuristic=null_heuristic, logger=logger)
        keys = [f["key"] for f in logger.frames("expand")]
        assert keys[:4] == ["10", "00", "12", "20"]
