"""Uninformed solvers used as baselines for the A* engine."""
from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from .errors import check_disk_count
from .state import AUX_PEG, SOURCE_PEG, TARGET_PEG, Move, start_state
from .transitions import neighbors


def plan_hanoi(n: int, src: int = SOURCE_PEG, aux: int = AUX_PEG, dst: int = TARGET_PEG) -> List[Move]:
    """Return the classical recursive plan moving disks 0..n-1 from src to dst."""
    check_disk_count(n)
    plan: List[Move] = []
    _plan_into(plan, n, src, aux, dst)
    return plan


def _plan_into(plan: List[Move], n: int, src: int, aux: int, dst: int) -> None:
    if n <= 0:
        return
    _plan_into(plan, n - 1, src, dst, aux)
    plan.append(Move(n - 1, src, dst))  # largest disk of this subproblem
    _plan_into(plan, n - 1, aux, src, dst)


def bfs_solve(n: int, src: int = SOURCE_PEG, dst: int = TARGET_PEG) -> Optional[List[Move]]:
    """
    Shortest move list found by FIFO breadth-first graph search.

    Returns None if the goal is unreachable, which does not happen for three
    pegs but keeps the contract symmetric with the informed search.
    """
    check_disk_count(n)
    start = start_state(n, src)
    start_key = start.key()
    parents: Dict[str, Tuple[Optional[str], Optional[Move]]] = {start_key: (None, None)}
    queue: Deque = deque([start])

    while queue:
        current = queue.popleft()
        ck = current.key()
        if current.is_goal(dst):
            return _unwind(parents, ck)
        for next_state, move in neighbors(current):
            nk = next_state.key()
            if nk not in parents:
                parents[nk] = (ck, move)
                queue.append(next_state)
    return None


def _unwind(parents: Dict[str, Tuple[Optional[str], Optional[Move]]], key: str) -> List[Move]:
    moves: List[Move] = []
    parent, move = parents[key]
    while parent is not None:
        moves.append(move)
        parent, move = parents[parent]
    moves.reverse()
    return moves


def optimal_move_count(n: int) -> int:
    return (1 << n) - 1
