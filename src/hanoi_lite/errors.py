"""Error hierarchy for the Hanoi board and solver.

Every error is raised where the violation is detected and propagates to the
caller unchanged. The built-in bases let callers that only know about
``ValueError``/``LookupError`` keep working.
"""

from __future__ import annotations


class HanoiError(Exception):
    """Base class for all hanoi_lite errors."""


class InvalidBoardError(HanoiError, ValueError):
    """Peg ordering is broken or a disk appears more than once."""


class InvalidSizeError(HanoiError, ValueError):
    """A board was requested with a non-positive number of disks."""


class InvalidPegError(HanoiError, ValueError):
    """A value could not be interpreted as one of the pegs A, B, C."""


class InvalidMoveError(HanoiError, ValueError):
    """A move was rejected."""


class EmptySourceError(InvalidMoveError):
    def __init__(self, peg):
        super().__init__(f"Cannot move from an empty peg: {peg.name}")
        self.peg = peg


class IllegalSizeOrderError(InvalidMoveError):
    """Larger disk would land on a smaller one. The board is left untouched."""

    def __init__(self, disk: int, blocking_disk: int, peg):
        super().__init__(
            f"Cannot place larger disk ({disk}) on smaller disk ({blocking_disk}) on peg: {peg.name}"
        )
        self.disk = disk
        self.blocking_disk = blocking_disk
        self.peg = peg


class SameSourceTargetError(InvalidMoveError):
    def __init__(self, peg):
        super().__init__(f"Cannot move to self: {peg.name}")
        self.peg = peg


class NoSuchDiskError(HanoiError, LookupError):
    def __init__(self, disk):
        super().__init__(f"There is no disk with size {disk}")
        self.disk = disk


class AlreadySolvedError(HanoiError):
    def __init__(self, message: str = "Board is solved. No hint available."):
        super().__init__(message)
