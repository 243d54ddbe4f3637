"""Next-move ("hint") solver for the Tower of Hanoi.

The solver canonicalises any board to the frame "largest disk on the source
peg, heading for the target peg, with the third peg as auxiliary" by
relabelling which real peg plays which role, then continues with one disk
less. Because the frame always names real pegs, the move found at the end
needs no translation back.

Works from any valid board, not only from positions reached by optimal play
from the canonical start.
"""
from __future__ import annotations

from typing import Dict, Iterator, NamedTuple

from .board import Board, Move, Peg, PEGS
from .errors import AlreadySolvedError, NoSuchDiskError


class Frame(NamedTuple):
    """Which real peg plays source, auxiliary and target."""

    source: Peg
    aux: Peg
    target: Peg


CANONICAL_FRAME = Frame(source=Peg.A, aux=Peg.B, target=Peg.C)


def expected_moves(n: int) -> int:
    """Length of the optimal solution from the canonical start with ``n`` disks."""
    return (1 << n) - 1


def next_move(board: Board) -> Move:
    """Return the next move toward all disks on peg C. Never mutates ``board``.

    Raises AlreadySolvedError if the board is solved.
    """
    if board.is_solved():
        raise AlreadySolvedError()
    return _next_move(board.locations(), board.number_of_pieces(), CANONICAL_FRAME)


def _next_move(locations: Dict[int, Peg], count: int, frame: Frame) -> Move:
    # Each step of the recursion is a tail call, so it runs as a loop. Only
    # disks 0..count-1 take part; larger ones are already settled, and
    # on_peg counts the disks still taking part on each real peg.
    on_peg = {peg: 0 for peg in PEGS}
    for disk in range(count):
        if disk in locations:
            on_peg[locations[disk]] += 1

    while True:
        if on_peg[frame.target] == count:
            raise AlreadySolvedError()

        largest = count - 1
        peg = locations.get(largest)
        if peg is None:
            raise NoSuchDiskError(largest)

        if peg == frame.target:
            on_peg[peg] -= 1
            count = largest
            continue

        if peg == frame.aux:
            frame = frame._replace(source=frame.aux, aux=frame.source)
            continue

        if on_peg[frame.target] == 0 and on_peg[frame.source] == 1:
            return Move(frame.source, frame.target)

        # Clear the smaller disks onto the auxiliary peg first.
        on_peg[peg] -= 1
        count = largest
        frame = frame._replace(aux=frame.target, target=frame.aux)


def iter_solution(board: Board) -> Iterator[Move]:
    """Yield hints until solved, applying each one to a private copy of ``board``."""
    work = board.copy()
    while not work.is_solved():
        move = next_move(work)
        work.move(move)
        yield move
