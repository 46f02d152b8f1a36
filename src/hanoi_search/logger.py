import json
from typing import Any, Dict, List, Optional


class SearchLogger:
    """
    Collects per-expansion frames for replay/inspection of a search run.

    Frame schema (type is always present):
      {"type": "start",  "key": str, "h": int, "target": int}
      {"type": "expand", "step": int, "key": str, "g": int, "h": int, "f": int,
                         "frontier": int, "closed": int}
      {"type": "stale",  "key": str, "g": int}
      {"type": "result", "status": str, "cost": int, "expanded": int,
                         "generated": int, "moves": [[disk, src, dst], ...]}
    """

    def __init__(self, max_frames: Optional[int] = None):
        self.events: List[Dict[str, Any]] = []
        self.max_frames = max_frames
        self.dropped = 0

    def _emit(self, frame: Dict[str, Any]) -> None:
        if self.max_frames is not None and len(self.events) >= self.max_frames and frame["type"] != "result":
            self.dropped += 1
            return
        self.events.append(frame)

    def start(self, key: str, h: int, target: int) -> None:
        self._emit({"type": "start", "key": key, "h": h, "target": target})

    def expand(self, step: int, key: str, g: int, h: int, frontier: int, closed: int) -> None:
        self._emit({
            "type": "expand",
            "step": step,
            "key": key,
            "g": g,
            "h": h,
            "f": g + h,
            "frontier": frontier,
            "closed": closed,
        })

    def stale(self, key: str, g: int) -> None:
        self._emit({"type": "stale", "key": key, "g": g})

    def result(self, result) -> None:
        self._emit({
            "type": "result",
            "status": result.status.name,
            "cost": result.cost,
            "expanded": result.expanded,
            "generated": result.generated,
            "moves": [list(m.as_tuple()) for m in result.moves],
        })

    def frames(self, frame_type: str) -> List[Dict[str, Any]]:
        return [f for f in self.events if f["type"] == frame_type]

    def to_json(self, path: str):
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"events": self.events, "dropped": self.dropped}, f, indent=2)
