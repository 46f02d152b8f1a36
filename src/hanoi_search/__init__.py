"""
Tower of Hanoi solvers over a shared peg-assignment state model.

The informed best-first (A*) engine is the primary solver; the recursive and
breadth-first solvers are baselines whose move counts it must match.
"""

from .state import HanoiState, Move, NUM_PEGS, SOURCE_PEG, AUX_PEG, TARGET_PEG, start_state, goal_state
from .transitions import neighbors, is_legal
from .heuristic import Heuristic, misplaced_disks, null_heuristic
from .search import SearchNode, SearchResult, SearchStatus, astar_search, reconstruct_path, solve, solve_config
from .reference import plan_hanoi, bfs_solve, optimal_move_count
from .env import Hanoi, replay
from .errors import HanoiError, InvalidDiskCount, NoSolutionFound, IllegalMoveError
from .config import ALGORITHMS, SearchConfig, load_config, save_config
from .logger import SearchLogger
from .trace_db import SolveRecord, TraceDB

__all__ = [
    # State model
    "HanoiState", "Move", "NUM_PEGS", "SOURCE_PEG", "AUX_PEG", "TARGET_PEG",
    "start_state", "goal_state", "neighbors", "is_legal",
    # Search
    "Heuristic", "misplaced_disks", "null_heuristic",
    "SearchNode", "SearchResult", "SearchStatus",
    "astar_search", "reconstruct_path", "solve", "solve_config",
    # Baselines and simulation
    "plan_hanoi", "bfs_solve", "optimal_move_count", "Hanoi", "replay",
    # Errors
    "HanoiError", "InvalidDiskCount", "NoSolutionFound", "IllegalMoveError",
    # Config / tracing
    "ALGORITHMS", "SearchConfig", "load_config", "save_config", "SearchLogger",
    "SolveRecord", "TraceDB",
]
