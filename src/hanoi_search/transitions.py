"""Legal single-disk moves out of a state."""
from __future__ import annotations

from typing import List, Tuple

from .state import NUM_PEGS, HanoiState, Move


def is_legal(state: HanoiState, move: Move) -> bool:
    """True iff `move.disk` is on top of `move.src` and may land on `move.dst`."""
    if move.src == move.dst:
        return False
    if not 0 <= move.disk < state.n or not 0 <= move.dst < NUM_PEGS:
        return False
    if state.pos[move.disk] != move.src or not state.is_top(move.disk):
        return False
    top = state.top_disk_on_peg(move.dst)
    return top is None or top > move.disk


def neighbors(state: HanoiState) -> List[Tuple[HanoiState, Move]]:
    """
    Enumerate successors as (next_state, move) pairs.

    Order is disk ascending, then destination peg ascending. Each successor
    differs from `state` in exactly one disk's peg.
    """
    out: List[Tuple[HanoiState, Move]] = []
    for disk in range(state.n):
        if not state.is_top(disk):
            continue
        src = state.pos[disk]
        for dst in range(NUM_PEGS):
            if dst == src:
                continue
            top = state.top_disk_on_peg(dst)
            # larger index = larger disk
            if top is None or top > disk:
                move = Move(disk, src, dst)
                out.append((state.apply(move), move))
    return out
