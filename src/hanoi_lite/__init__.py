# src/hanoi_lite/__init__.py
"""
Tower of Hanoi board model and next-move solver.

The board validates and applies single-disk moves; the solver returns the
next move of the canonical recursive strategy toward "all disks on peg C".
``HanoiService`` wraps both for a host that keeps one game alive.
"""

from .board import Board, Move, Peg, PEGS
from .errors import (
    HanoiError,
    InvalidBoardError,
    InvalidSizeError,
    InvalidPegError,
    InvalidMoveError,
    EmptySourceError,
    IllegalSizeOrderError,
    SameSourceTargetError,
    NoSuchDiskError,
    AlreadySolvedError,
)
from .solver import next_move, iter_solution, expected_moves
from .config import GameConfig
from .logger import RunLogger
from .service import HanoiService

__version__ = "0.1.0"

__all__ = [
    # Model
    "Board", "Move", "Peg", "PEGS",
    # Solver
    "next_move", "iter_solution", "expected_moves",
    # Host surface
    "HanoiService", "GameConfig", "RunLogger",
    # Errors
    "HanoiError", "InvalidBoardError", "InvalidSizeError", "InvalidPegError",
    "InvalidMoveError", "EmptySourceError", "IllegalSizeOrderError",
    "SameSourceTargetError", "NoSuchDiskError", "AlreadySolvedError",
]
