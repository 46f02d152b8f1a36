"""Peg-stack simulator used to replay and display move lists."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from .errors import IllegalMoveError, check_disk_count
from .state import NUM_PEGS, SOURCE_PEG, TARGET_PEG, HanoiState, Move
from .transitions import is_legal


@dataclass
class Hanoi:
    """Tower of Hanoi with explicit stacks; disks are 0-based, 0 smallest."""

    n: int
    source: int = SOURCE_PEG
    pegs: List[List[int]] = field(init=False)
    moves: int = field(default=0, init=False)
    history: List[Move] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        check_disk_count(self.n)
        self.pegs = [[] for _ in range(NUM_PEGS)]
        # Bottom of the list is the bottom of the peg.
        self.pegs[self.source] = list(reversed(range(self.n)))

    def legal(self, src: int, dst: int) -> bool:
        """Return True iff moving the top disk from src to dst is legal."""
        if not 0 <= src < NUM_PEGS or not self.pegs[src]:
            return False
        return is_legal(self.state(), Move(self.pegs[src][-1], src, dst))

    def move(self, src: int, dst: int) -> bool:
        """Attempt to move a disk; returns True on success, False otherwise."""
        if not self.legal(src, dst):
            return False
        disk = self.pegs[src].pop()
        self.pegs[dst].append(disk)
        self.moves += 1
        self.history.append(Move(disk, src, dst))
        return True

    def apply(self, move: Move) -> bool:
        """Like `move`, but also requires `move.disk` to be the disk on top of src."""
        if not 0 <= move.src < NUM_PEGS or not self.pegs[move.src] or self.pegs[move.src][-1] != move.disk:
            return False
        return self.move(move.src, move.dst)

    def is_goal(self, target: int = TARGET_PEG) -> bool:
        return len(self.pegs[target]) == self.n

    def state(self) -> HanoiState:
        pos = [0] * self.n
        for peg, stack in enumerate(self.pegs):
            for disk in stack:
                pos[disk] = peg
        return HanoiState(tuple(pos))

    def __str__(self) -> str:
        """Render the pegs as ASCII rows (top row first)."""
        levels = []
        for level in range(self.n - 1, -1, -1):
            row = []
            for peg in self.pegs:
                if len(peg) > level:
                    row.append(str(peg[level] + 1).rjust(2))
                else:
                    row.append(" |")
            levels.append("  ".join(row))
        labels = "  ".join(str(p).rjust(2) for p in range(NUM_PEGS))
        return "\n".join(levels + [labels])


def replay(n: int, moves: Iterable[Move], source: int = SOURCE_PEG) -> Hanoi:
    """Apply `moves` from the all-on-`source` start; raise on the first illegal one."""
    hanoi = Hanoi(n, source)
    for idx, move in enumerate(moves):
        if not hanoi.apply(move):
            raise IllegalMoveError(f"Move #{idx + 1} is illegal: {move.describe()}")
    return hanoi
