import json
from collections import deque
from typing import Deque, List, Dict, Any, Optional


class RunLogger:
    """
    Collects per-call frames for replay/diagnostics.

    Frame schema (all optional except type/seq):
      {
        "type": "reset" | "move" | "rejected" | "hint" | "snapshot",
        "seq": int,
        "note": str,
        "board": { "pegA": [...], "pegB": [...], "pegC": [...] },
        "move": { "from": "A", "to": "C" },
        "error": str,
        "solved": bool
      }

    Frames describe what happened to the board; nothing reads them back to
    restore state. With ``max_events`` set only the newest frames are kept;
    ``seq`` keeps counting so dropped frames show up as gaps.
    """

    def __init__(self, max_events: Optional[int] = None):
        if max_events is not None and max_events <= 0:
            raise ValueError(f"max_events must be positive, got {max_events!r}")
        self.max_events = max_events
        self.events: Deque[Dict[str, Any]] = deque(maxlen=max_events)
        self._seq = 0

    def record(self, kind: str, board=None, **fields: Any) -> Dict[str, Any]:
        frame: Dict[str, Any] = {"type": kind, "seq": self._seq}
        self._seq += 1
        if board is not None:
            frame["board"] = board.as_dict()
            frame["solved"] = board.is_solved()
        for key, value in fields.items():
            if value is None:
                continue
            # Move and friends serialise themselves
            frame[key] = value.as_dict() if hasattr(value, "as_dict") else value
        self.events.append(frame)
        return frame

    def snapshot(self, board, note: str = "") -> Dict[str, Any]:
        return self.record("snapshot", board, note=note)

    def events_of(self, kind: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["type"] == kind]

    def last(self) -> Optional[Dict[str, Any]]:
        return self.events[-1] if self.events else None

    def clear(self) -> None:
        self.events.clear()
        self._seq = 0

    def to_json(self, path: str):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(list(self.events), f, indent=2)
