"""CLI runner for hanoi_lite: auto-solve with hints, or play interactively."""
from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, List, Optional

from .board import Board
from .config import GameConfig
from .errors import HanoiError, InvalidSizeError
from .service import HanoiService
from .solver import expected_moves

HELP = "commands: AC | a c | A->C (move), hint, show, reset [N], quit"

Printer = Callable[[str], None]


def solve(service: HanoiService, out: Printer = print, show_boards: bool = True) -> int:
    """Follow hints on the current board until solved; return the move count."""
    board = service.current_board()
    out("Initial state:")
    out(board.render())
    out("")

    moves = 0
    while not board.is_solved():
        move = service.hint()
        board = service.apply_move(move)
        moves += 1
        out(f"Move {moves:03d}: {move}")
        if show_boards:
            out(board.render())
            out("")

    out("Final state:")
    out(board.render())
    out("")
    return moves


def _reset(service: HanoiService, args: List[str]) -> Board:
    if not args:
        return service.reset()
    try:
        size = int(args[0])
    except ValueError:
        raise InvalidSizeError(f"Board size must be an integer, got {args[0]!r}") from None
    return service.reset(size)


def play(service: HanoiService, lines: Iterable[str], out: Printer = print) -> int:
    """Read commands from ``lines`` until exhausted or ``quit``; return moves applied."""
    out(service.current_board().render())
    out(HELP)
    moves = 0
    for line in lines:
        words = line.split()
        if not words:
            continue
        command = words[0].lower()
        try:
            if command in ("quit", "exit"):
                break
            elif command == "hint":
                out(f"hint: {service.hint()}")
            elif command == "show":
                out(service.current_board().render())
            elif command == "reset":
                out(_reset(service, words[1:]).render())
            elif command == "help":
                out(HELP)
            else:
                board = service.apply_move(line)
                moves += 1
                out(board.render())
                if board.is_solved():
                    out(f"Solved! ({moves} moves this session)")
        except HanoiError as exc:
            out(f"error: {exc}")
    return moves


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tower of Hanoi with an optimal-move hint solver.")
    parser.add_argument("--n", type=int, default=3, help="Number of disks (default: 3)")
    parser.add_argument("--random", action="store_true", help="Start from a randomly dealt board")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument("--play", action="store_true", help="Read moves from stdin instead of auto-solving")
    parser.add_argument("--quiet", action="store_true", help="Only print the move list when auto-solving")
    parser.add_argument("--log-json", type=str, default=None, help="Write the event log to this JSON file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = GameConfig(initial_size=args.n, reset_size=args.n, random_start=args.random, seed=args.seed)
    except HanoiError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    service = HanoiService(config)
    if args.random:
        service.reset()

    if args.play:
        play(service, sys.stdin)
    else:
        moves = solve(service, show_boards=not args.quiet)
        print(f"Solved in {moves} moves")
        if not args.random:
            print(f"Expected moves: {expected_moves(args.n)}")

    if args.log_json:
        service.logger.to_json(args.log_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
