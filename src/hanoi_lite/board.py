"""Tower of Hanoi board model.

Each disk is a unique integer from 0 (smallest) to N-1 (largest). Each peg
is a list whose first item is the lowest disk in the stack; the last item is
the top. The board is the only place peg contents change, and only through
``Board.move``.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import (
    EmptySourceError,
    IllegalSizeOrderError,
    InvalidBoardError,
    InvalidPegError,
    InvalidSizeError,
    NoSuchDiskError,
    SameSourceTargetError,
)


def is_integer(value: Any) -> bool:
    """True for Python and numpy integers, but not for bools."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class Peg(Enum):
    """Identifies one of the three pegs (rods/poles/sticks)."""

    A = "A"  # usually the starting location
    B = "B"  # usually the auxiliary pole
    C = "C"  # target location, fixed by convention

    @classmethod
    def parse(cls, value: Union["Peg", str, int]) -> "Peg":
        """Accept a Peg, a letter (any case) or an index 0..2."""
        if isinstance(value, Peg):
            return value
        if isinstance(value, str):
            if value.strip().isdigit():
                return cls.parse(int(value))
            try:
                return cls(value.strip().upper())
            except ValueError:
                raise InvalidPegError(f"Unknown peg: {value!r}") from None
        if is_integer(value):
            if 0 <= int(value) < len(PEGS):
                return PEGS[int(value)]
        raise InvalidPegError(f"Unknown peg: {value!r}")


PEGS: Tuple[Peg, Peg, Peg] = (Peg.A, Peg.B, Peg.C)

PegLike = Union[Peg, str, int]


@dataclass(frozen=True)
class Move:
    """A potentially valid move of a single disk, oblivious of the actual board."""

    src: Peg
    dst: Peg

    def __post_init__(self) -> None:
        src = Peg.parse(self.src)
        dst = Peg.parse(self.dst)
        if src == dst:
            raise SameSourceTargetError(src)
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "src", src)
        object.__setattr__(self, "dst", dst)

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Parse ``"AC"``, ``"a c"``, ``"A->C"`` or ``"A,C"``. Only peg letters count."""
        letters = [ch for ch in text if ch.isalpha()]
        if len(letters) != 2:
            raise InvalidPegError(f"Cannot read a move from {text!r}")
        return cls(letters[0], letters[1])

    def as_dict(self) -> Dict[str, str]:
        return {"from": self.src.value, "to": self.dst.value}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Move":
        try:
            return cls(d["from"], d["to"])
        except KeyError as exc:
            raise InvalidPegError(f"Move is missing field {exc.args[0]!r}") from None

    def __str__(self) -> str:
        return f"{self.src.value} -> {self.dst.value}"


def _check_disks(name: str, disks: Iterable[Any]) -> List[int]:
    peg: List[int] = []
    for disk in disks:
        if not is_integer(disk) or disk < 0:
            raise InvalidBoardError(f"Invalid disk on peg {name}: {disk!r}")
        peg.append(int(disk))
    # strictly decreasing bottom-to-top
    for lower, upper in zip(peg, peg[1:]):
        if upper >= lower:
            raise InvalidBoardError(
                f"Invalid peg {name}: cannot stack large disks on small ones ({peg})"
            )
    return peg


class Board:
    """A mutable Tower of Hanoi state.

    Construction validates the layout; afterwards the board changes only
    through :meth:`move`, which either applies a legal move or raises and
    leaves the pegs as they were.
    """

    def __init__(
        self,
        peg_a: Iterable[int] = (),
        peg_b: Iterable[int] = (),
        peg_c: Iterable[int] = (),
    ):
        self._pegs: Dict[Peg, List[int]] = {
            Peg.A: _check_disks("A", peg_a),
            Peg.B: _check_disks("B", peg_b),
            Peg.C: _check_disks("C", peg_c),
        }
        counts = Counter(d for peg in self._pegs.values() for d in peg)
        duplicates = sorted(d for d, c in counts.items() if c > 1)
        if duplicates:
            raise InvalidBoardError(f"Duplicate disks found: {duplicates}")

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def initialize_with_size(cls, number_of_pieces: int) -> "Board":
        """Create a new board with all disks on peg A: [N-1, ..., 1, 0]."""
        if not is_integer(number_of_pieces):
            raise InvalidSizeError(f"Board size must be an integer, got {number_of_pieces!r}")
        if number_of_pieces <= 0:
            raise InvalidSizeError("Must use at least one disk")
        return cls(peg_a=range(int(number_of_pieces) - 1, -1, -1))

    @classmethod
    def random_with_size(
        cls,
        number_of_pieces: int,
        rng: Optional[np.random.Generator] = None,
    ) -> "Board":
        """Create a new board with randomly distributed disks.

        Walks peg A from the bottom up and sends every disk to a peg drawn
        uniformly from A, B, C. Disks keep their relative order on each
        destination, so every outcome is a valid board. This is a per-disk
        draw, not a uniform sample over reachable configurations.
        """
        board = cls.initialize_with_size(number_of_pieces)
        rng = rng if rng is not None else np.random.default_rng()

        peg_a = board._pegs[Peg.A]
        kept: List[int] = []
        for disk in peg_a:
            target = PEGS[int(rng.integers(len(PEGS)))]
            if target == Peg.A:
                kept.append(disk)
            else:
                board._pegs[target].append(disk)
        peg_a[:] = kept
        return board

    @classmethod
    def from_dict(cls, d: Dict[str, Sequence[int]]) -> "Board":
        return cls(d.get("pegA", ()), d.get("pegB", ()), d.get("pegC", ()))

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def peg_a(self) -> Tuple[int, ...]:
        return tuple(self._pegs[Peg.A])

    @property
    def peg_b(self) -> Tuple[int, ...]:
        return tuple(self._pegs[Peg.B])

    @property
    def peg_c(self) -> Tuple[int, ...]:
        return tuple(self._pegs[Peg.C])

    def disks_on(self, peg: PegLike) -> Tuple[int, ...]:
        return tuple(self._pegs[Peg.parse(peg)])

    def top(self, peg: PegLike) -> Optional[int]:
        """Smallest disk on ``peg`` (the one a move would take), or None."""
        stack = self._pegs[Peg.parse(peg)]
        return stack[-1] if stack else None

    def is_solved(self) -> bool:
        """True in case all disks are on peg C."""
        return not self._pegs[Peg.A] and not self._pegs[Peg.B]

    def number_of_pieces(self) -> int:
        return sum(len(peg) for peg in self._pegs.values())

    def __len__(self) -> int:
        return self.number_of_pieces()

    def peg_of(self, disk: int) -> Peg:
        """Which peg currently holds ``disk``; NoSuchDiskError if none does."""
        for peg in PEGS:
            if disk in self._pegs[peg]:
                return peg
        raise NoSuchDiskError(disk)

    def locations(self) -> Dict[int, Peg]:
        """Map every disk to the peg holding it."""
        return {disk: peg for peg in PEGS for disk in self._pegs[peg]}

    def copy(self) -> "Board":
        """A fresh, independent copy of this board."""
        clone = Board.__new__(Board)
        clone._pegs = {peg: list(disks) for peg, disks in self._pegs.items()}
        return clone

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def move(self, move: Move) -> None:
        """Move the top disk of ``move.src`` onto ``move.dst``.

        Raises EmptySourceError or IllegalSizeOrderError; on failure the
        board is exactly as before the call.
        """
        from_peg = self._pegs[move.src]
        to_peg = self._pegs[move.dst]

        if not from_peg:
            raise EmptySourceError(move.src)

        disk = from_peg.pop()

        if to_peg and to_peg[-1] < disk:
            from_peg.append(disk)
            raise IllegalSizeOrderError(disk, to_peg[-1], move.dst)

        to_peg.append(disk)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def as_dict(self) -> Dict[str, List[int]]:
        return {
            "pegA": list(self._pegs[Peg.A]),
            "pegB": list(self._pegs[Peg.B]),
            "pegC": list(self._pegs[Peg.C]),
        }

    def render(self) -> str:
        """Render the pegs as ASCII rows (top row first)."""
        height = max(1, max(len(disks) for disks in self._pegs.values()))
        width = max(2, len(str(max(self.locations(), default=0))))
        levels = []
        for level in range(height - 1, -1, -1):
            row = []
            for peg in PEGS:
                disks = self._pegs[peg]
                if len(disks) > level:
                    row.append(str(disks[level]).rjust(width))
                else:
                    row.append("|".rjust(width))
            levels.append("  ".join(row))
        labels = "  ".join(peg.value.rjust(width) for peg in PEGS)
        return "\n".join(levels + [labels])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pegs == other._pegs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(peg_a={self.peg_a!r}, peg_b={self.peg_b!r}, peg_c={self.peg_c!r})"

    def __str__(self) -> str:
        return "A:%s, B:%s, C:%s" % (
            self._pegs[Peg.A], self._pegs[Peg.B], self._pegs[Peg.C]
        )
