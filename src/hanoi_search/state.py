"""
Puzzle state model.

A state only records which peg every disk sits on; disk 0 is the smallest.
The stacking order on a peg is implied: a disk is on top of its peg iff no
smaller disk shares that peg. States are immutable and compared by value.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

NUM_PEGS = 3
SOURCE_PEG = 0
AUX_PEG = 1
TARGET_PEG = 2


@dataclass(frozen=True)
class Move:
    disk: int
    src: int
    dst: int

    def describe(self) -> str:
        """Human-readable form with 1-based disk numbers."""
        return f"Move disk {self.disk + 1} from {self.src} to {self.dst}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.disk, self.src, self.dst)

    def to_dict(self) -> Dict[str, int]:
        return {"disk": self.disk, "src": self.src, "dst": self.dst}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Move":
        return cls(disk=int(data["disk"]), src=int(data["src"]), dst=int(data["dst"]))


@dataclass(frozen=True)
class HanoiState:
    pos: Tuple[int, ...]  # pos[d] = peg of disk d

    def __post_init__(self) -> None:
        pos = tuple(int(p) for p in self.pos)
        for disk, peg in enumerate(pos):
            if not 0 <= peg < NUM_PEGS:
                raise ValueError(f"Disk {disk} assigned to unknown peg {peg}")
        object.__setattr__(self, "pos", pos)

    @property
    def n(self) -> int:
        return len(self.pos)

    def key(self) -> str:
        """One digit per disk; equal keys iff equal peg assignments."""
        return "".join(str(p) for p in self.pos)

    @classmethod
    def from_key(cls, key: str) -> "HanoiState":
        return cls(tuple(int(ch) for ch in key))

    def is_goal(self, target: int = TARGET_PEG) -> bool:
        return all(p == target for p in self.pos)

    def is_top(self, disk: int) -> bool:
        peg = self.pos[disk]
        return all(self.pos[smaller] != peg for smaller in range(disk))

    def top_disk_on_peg(self, peg: int) -> Optional[int]:
        """Smallest disk on `peg`, or None when the peg is empty."""
        for disk, p in enumerate(self.pos):
            if p == peg:
                return disk
        return None

    def apply(self, move: Move) -> "HanoiState":
        """Return the successor with `move.disk` relocated; no legality check."""
        pos = list(self.pos)
        pos[move.disk] = move.dst
        return HanoiState(tuple(pos))

    def __str__(self) -> str:
        return self.key()


def start_state(n: int, peg: int = SOURCE_PEG) -> HanoiState:
    return HanoiState((peg,) * n)


def goal_state(n: int, peg: int = TARGET_PEG) -> HanoiState:
    return HanoiState((peg,) * n)
