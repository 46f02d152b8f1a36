"""
Lightweight TraceDB for logging solver runs.

Intent:
- One JSONL line per solve so comparison scripts can emit and reload
  consistent records.
- Keep everything buffered in memory until `flush()`; benchmark loops call
  the solvers many times in a row.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .state import Move


@dataclass
class SolveRecord:
    algorithm: str
    num_disks: int
    status: str                     # SearchStatus name
    cost: int
    expanded: int = 0
    generated: int = 0
    source_peg: int = 0
    target_peg: int = 2
    elapsed_ms: Optional[float] = None
    moves: List[Move] = field(default_factory=list)
    notes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_result(cls, config, result, elapsed_ms: Optional[float] = None) -> "SolveRecord":
        return cls(
            algorithm=config.algorithm,
            num_disks=config.num_disks,
            status=result.status.name,
            cost=result.cost,
            expanded=result.expanded,
            generated=result.generated,
            source_peg=config.source_peg,
            target_peg=config.target_peg,
            elapsed_ms=elapsed_ms,
            moves=list(result.moves),
        )

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "algorithm": self.algorithm,
            "num_disks": self.num_disks,
            "status": self.status,
            "cost": self.cost,
            "expanded": self.expanded,
            "generated": self.generated,
            "source_peg": self.source_peg,
            "target_peg": self.target_peg,
            "moves": [m.to_dict() for m in self.moves],
        }
        if self.elapsed_ms is not None:
            out["elapsed_ms"] = round(self.elapsed_ms, 3)
        notes = {k: v for k, v in self.notes.items() if v not in (None, [], {})}
        if notes:
            out["notes"] = notes
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SolveRecord":
        """Reconstruct a SolveRecord from a dict (e.g., loaded from JSONL)."""
        return cls(
            algorithm=data.get("algorithm", ""),
            num_disks=data.get("num_disks", 0),
            status=data.get("status", ""),
            cost=data.get("cost", 0),
            expanded=data.get("expanded", 0),
            generated=data.get("generated", 0),
            source_peg=data.get("source_peg", 0),
            target_peg=data.get("target_peg", 2),
            elapsed_ms=data.get("elapsed_ms"),
            moves=[Move.from_dict(m) for m in data.get("moves", [])],
            notes=data.get("notes", {}),
        )


class TraceDB:
    """
    Append-only JSONL trace writer. Keeps everything in memory until flush to
    minimize IO during tight loops; call `flush()` periodically or at teardown.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.buffer: List[SolveRecord] = []

    def add_record(self, record: SolveRecord) -> None:
        self.buffer.append(record)

    def flush(self) -> None:
        if not self.buffer:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as fh:
            for rec in self.buffer:
                fh.write(json.dumps(rec.to_dict()) + "\n")
        self.buffer.clear()

    def close(self) -> None:
        self.flush()

    @staticmethod
    def load_records(path: Path) -> List[SolveRecord]:
        records = []
        with Path(path).open("r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line:
                    continue
                records.append(SolveRecord.from_dict(json.loads(line)))
        return records
