"""
Run configuration for the solvers.

YAML layout (all keys optional):

    num_disks: 5
    source_peg: 0
    target_peg: 2
    algorithm: astar     # astar | ucs | bfs | recursive
    trace: false
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .errors import check_disk_count
from .state import NUM_PEGS, SOURCE_PEG, TARGET_PEG

ALGORITHMS = ("astar", "ucs", "bfs", "recursive")


@dataclass
class SearchConfig:
    """Which solver to run and on which instance."""
    num_disks: int = 3
    source_peg: int = SOURCE_PEG
    target_peg: int = TARGET_PEG
    algorithm: str = "astar"
    trace: bool = False      # collect SearchLogger frames (informed solvers only)

    @property
    def aux_peg(self) -> int:
        return 3 - self.source_peg - self.target_peg

    def validate(self) -> "SearchConfig":
        check_disk_count(self.num_disks)
        for name in ("source_peg", "target_peg"):
            peg = getattr(self, name)
            if isinstance(peg, bool) or not isinstance(peg, int):
                raise ValueError(f"{name} must be an integer peg id (got {peg!r})")
            if not 0 <= peg < NUM_PEGS:
                raise ValueError(f"{name} must be in 0..{NUM_PEGS - 1} (got {peg})")
        if self.source_peg == self.target_peg:
            raise ValueError("source_peg and target_peg must differ")
        if self.algorithm not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm {self.algorithm!r}; expected one of {ALGORITHMS}")
        if not isinstance(self.trace, bool):
            raise ValueError(f"trace must be true or false (got {self.trace!r})")
        return self

    def as_dict(self) -> Dict[str, Any]:
        return {
            "num_disks": self.num_disks,
            "source_peg": self.source_peg,
            "target_peg": self.target_peg,
            "algorithm": self.algorithm,
            "trace": self.trace,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SearchConfig":
        unknown = set(d) - set(cls().as_dict())
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(
            num_disks=d.get("num_disks", 3),
            source_peg=d.get("source_peg", SOURCE_PEG),
            target_peg=d.get("target_peg", TARGET_PEG),
            algorithm=str(d.get("algorithm", "astar")).lower(),
            trace=d.get("trace", False),
        )


def load_config(path: Union[str, Path]) -> SearchConfig:
    """Load and validate a SearchConfig from a YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return SearchConfig.from_dict(data).validate()


def save_config(config: SearchConfig, path: Union[str, Path]) -> None:
    with open(path, "w") as f:
        yaml.dump(config.as_dict(), f, default_flow_style=False, sort_keys=False)
