"""
Informed best-first (A*) search over puzzle states.

All bookkeeping (frontier, best-g map, predecessor map, closed set) is local
to one `astar_search` call, so the engine is reentrant. The frontier is a
binary heap ordered by (f, state key, insertion seq): ties on f are broken by
the key so that identical inputs always yield identical move lists.
"""
from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Set, Tuple

from .config import SearchConfig
from .errors import NoSolutionFound, check_disk_count
from .heuristic import Heuristic, misplaced_disks, null_heuristic
from .logger import SearchLogger
from .reference import bfs_solve, plan_hanoi
from .state import SOURCE_PEG, TARGET_PEG, HanoiState, Move, start_state
from .transitions import neighbors


class SearchStatus(Enum):
    SOLVED = auto()
    NO_SOLUTION = auto()


@dataclass
class SearchNode:
    state: HanoiState
    g: int                        # moves from the start
    h: int                        # heuristic estimate
    move: Optional[Move] = None   # move that produced this node
    parent: Optional[str] = None  # parent key; None marks the origin

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class SearchResult:
    status: SearchStatus
    moves: List[Move] = field(default_factory=list)
    expanded: int = 0
    generated: int = 0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def cost(self) -> int:
        return len(self.moves)

    def require_moves(self) -> List[Move]:
        """Return the moves, raising NoSolutionFound for an exhausted search."""
        if not self.solved:
            raise NoSolutionFound(
                f"Search exhausted after {self.expanded} expansions without reaching the goal"
            )
        return self.moves


def reconstruct_path(came_from: Dict[str, SearchNode], goal_key: str) -> List[Move]:
    """Walk predecessor entries back from `goal_key`; returns start-to-goal order."""
    moves: List[Move] = []
    cur = goal_key
    while True:
        node = came_from.get(cur)
        if node is None or node.parent is None:
            break
        moves.append(node.move)
        cur = node.parent
    moves.reverse()
    return moves


def astar_search(
    start: HanoiState,
    target: int = TARGET_PEG,
    heuristic: Heuristic = misplaced_disks,
    logger: Optional[SearchLogger] = None,
) -> SearchResult:
    """
    Best-first search from `start` to the all-on-`target` state.

    Stale frontier entries (states re-reached after they were expanded) are
    dropped lazily when popped. With a consistent heuristic the returned move
    list has minimum length.
    """
    start_key = start.key()
    start_node = SearchNode(start, 0, heuristic(start, target))

    seq = 0
    frontier: List[Tuple[int, str, int, SearchNode]] = [(start_node.f, start_key, seq, start_node)]
    best_g: Dict[str, int] = {start_key: 0}
    came_from: Dict[str, SearchNode] = {start_key: start_node}
    closed: Set[str] = set()
    expanded = 0
    generated = 1

    if logger is not None:
        logger.start(start_key, start_node.h, target)

    while frontier:
        _, ck, _, current = heapq.heappop(frontier)

        if current.state.is_goal(target):
            result = SearchResult(
                SearchStatus.SOLVED,
                reconstruct_path(came_from, ck),
                expanded=expanded,
                generated=generated,
            )
            if logger is not None:
                logger.result(result)
            return result

        if ck in closed:
            if logger is not None:
                logger.stale(ck, current.g)
            continue
        closed.add(ck)
        expanded += 1
        if logger is not None:
            logger.expand(expanded, ck, current.g, current.h, len(frontier), len(closed))

        for next_state, move in neighbors(current.state):
            nk = next_state.key()
            if nk in closed:
                continue
            tentative_g = current.g + 1
            known_g = best_g.get(nk)
            if known_g is None or tentative_g < known_g:
                node = SearchNode(next_state, tentative_g, heuristic(next_state, target), move, ck)
                best_g[nk] = tentative_g
                came_from[nk] = node
                seq += 1
                generated += 1
                heapq.heappush(frontier, (node.f, nk, seq, node))

    result = SearchResult(SearchStatus.NO_SOLUTION, [], expanded=expanded, generated=generated)
    if logger is not None:
        logger.result(result)
    return result


def solve(n: int) -> List[Move]:
    """Optimal move list for `n` disks from peg 0 to peg 2 (empty when n == 0)."""
    check_disk_count(n)
    return astar_search(start_state(n, SOURCE_PEG), TARGET_PEG).moves


def solve_config(config: SearchConfig, logger: Optional[SearchLogger] = None) -> SearchResult:
    """
    Run the solver selected by `config`.

    `astar` and `ucs` go through the informed engine (UCS uses a zero
    heuristic); `bfs` and `recursive` are the uninformed baselines and report
    no expansion counts.
    """
    config.validate()
    n = config.num_disks
    if config.algorithm in ("astar", "ucs"):
        heuristic = misplaced_disks if config.algorithm == "astar" else null_heuristic
        return astar_search(start_state(n, config.source_peg), config.target_peg, heuristic, logger)
    if config.algorithm == "bfs":
        moves = bfs_solve(n, config.source_peg, config.target_peg)
        if moves is None:
            return SearchResult(SearchStatus.NO_SOLUTION)
        return SearchResult(SearchStatus.SOLVED, moves)
    return SearchResult(
        SearchStatus.SOLVED,
        plan_hanoi(n, config.source_peg, config.aux_peg, config.target_peg),
    )
