import json
from typing import Any, Dict, List, Optional

from .features import disk_positions


class SessionRecorder:
    """
    Collects per-event frames for replay/visualization.

    Frame schema (all optional except type/seq/pegs):
      {
        "type": "reset" | "move" | "reject" | "select" | "tick" | "solve",
        "seq": int,
        "note": str,
        "pegs": [[disk, ...], [...], [...]],
        "move_count": int,
        "elapsed_seconds": int,
        "selected_peg": int | None,
        "is_solving": bool,
        "positions": [peg_of_disk_1, ...],
        "move": [source, target]
      }
    """

    def __init__(self, keep_positions: bool = False):
        self.events: List[Dict[str, Any]] = []
        self.keep_positions = keep_positions
        self._seq = 0

    def record(
        self,
        kind: str,
        snapshot,
        note: str = "",
        move: Optional[tuple] = None,
    ) -> Dict[str, Any]:
        frame: Dict[str, Any] = {
            "type": kind,
            "seq": self._seq,
            "note": note,
            "pegs": [list(peg) for peg in snapshot.pegs],
            "move_count": snapshot.move_count,
            "elapsed_seconds": snapshot.elapsed_seconds,
            "selected_peg": snapshot.selected_peg,
            "is_solving": snapshot.is_solving,
        }
        if move is not None:
            frame["move"] = list(move)
        if self.keep_positions:
            frame["positions"] = disk_positions(snapshot.pegs).tolist()
        self._seq += 1
        self.events.append(frame)
        return frame

    def frames(self, kind: Optional[str] = None) -> List[Dict[str, Any]]:
        if kind is None:
            return list(self.events)
        return [f for f in self.events if f["type"] == kind]

    def clear(self) -> None:
        self.events.clear()
        self._seq = 0

    def to_json(self, path: str):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.events, f, indent=2)
