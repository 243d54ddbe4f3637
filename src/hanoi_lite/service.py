"""Host-side wrapper holding the one current board.

``HanoiService`` is what a transport layer (HTTP handler, CLI loop, ...)
talks to: reset, read, apply a move, ask for a hint. Errors from the board
and solver pass through untouched; callers decide how to present them.
Access is not synchronised; a concurrent host must serialise calls.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Union

import numpy as np

from .board import Board, Move
from .config import GameConfig
from .errors import HanoiError, InvalidPegError
from .logger import RunLogger
from .solver import next_move

MoveLike = Union[Move, str, Dict[str, Any], Sequence[Any]]


def coerce_move(value: MoveLike) -> Move:
    """Build a Move from a Move, move text, a wire dict or a (src, dst) pair."""
    if isinstance(value, Move):
        return value
    if isinstance(value, str):
        return Move.parse(value)
    if isinstance(value, dict):
        return Move.from_dict(value)
    try:
        src, dst = value
    except (TypeError, ValueError):
        raise InvalidPegError(f"Cannot read a move from {value!r}") from None
    return Move(src, dst)


class HanoiService:
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        logger: Optional[RunLogger] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config or GameConfig()
        self.logger = logger if logger is not None else RunLogger(max_events=self.config.max_events)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self._board = Board.initialize_with_size(self.config.initial_size)
        self.logger.record("reset", self._board, size=self.config.initial_size, note="startup")

    def reset(self, size: Optional[int] = None) -> Board:
        """Replace the current board with a fresh one and return it."""
        size = self.config.reset_size if size is None else size
        if self.config.random_start:
            board = Board.random_with_size(size, rng=self.rng)
        else:
            board = Board.initialize_with_size(size)
        self._board = board
        self.logger.record("reset", board, size=size)
        return board

    def current_board(self) -> Board:
        return self._board

    def apply_move(self, move: MoveLike) -> Board:
        """Apply ``move`` to the current board and return it."""
        try:
            move = coerce_move(move)
            self._board.move(move)
        except HanoiError as exc:
            shown = move if isinstance(move, Move) else repr(move)
            self.logger.record("rejected", self._board, move=shown, error=str(exc))
            raise
        self.logger.record("move", self._board, move=move)
        return self._board

    def hint(self) -> Move:
        move = next_move(self._board)
        self.logger.record("hint", move=move)
        return move
