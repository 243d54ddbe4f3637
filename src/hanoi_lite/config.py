"""Configuration for a hosted Hanoi game."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .board import is_integer
from .errors import InvalidSizeError


@dataclass
class GameConfig:
    """Defaults used by HanoiService and the CLI."""
    initial_size: int = 5           # board held at startup
    reset_size: int = 3             # size used by reset() without an argument
    random_start: bool = False      # reset() deals a random board instead of the canonical one
    seed: Optional[int] = None      # seed for the random generator (None = fresh entropy)
    max_events: Optional[int] = 1000  # newest event frames the service keeps (None = all)

    def __post_init__(self) -> None:
        for name in ("initial_size", "reset_size"):
            value = getattr(self, name)
            if not is_integer(value) or value <= 0:
                raise InvalidSizeError(f"{name} must be a positive integer, got {value!r}")
            setattr(self, name, int(value))
        if self.max_events is not None and (not is_integer(self.max_events) or self.max_events <= 0):
            raise ValueError(f"max_events must be a positive integer or None, got {self.max_events!r}")
        if self.max_events is not None:
            self.max_events = int(self.max_events)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameConfig":
        return cls(
            initial_size=d.get("initial_size", 5),
            reset_size=d.get("reset_size", 3),
            random_start=d.get("random_start", False),
            seed=d.get("seed"),
            max_events=d.get("max_events", 1000),
        )
