# src/hanoi_search/heuristic.py
from typing import Protocol

from .state import TARGET_PEG, HanoiState


class Heuristic(Protocol):
    def __call__(self, state: HanoiState, target: int = TARGET_PEG) -> int:
        """Lower bound on the number of moves left to reach the goal."""


def misplaced_disks(state: HanoiState, target: int = TARGET_PEG) -> int:
    # One move relocates one disk, so this never overestimates and drops by
    # at most one per move.
    return sum(1 for p in state.pos if p != target)


def null_heuristic(state: HanoiState, target: int = TARGET_PEG) -> int:
    return 0
