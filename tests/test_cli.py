import json
import sys
from pathlib import Path

from hanoi_lite import GameConfig, HanoiService
from hanoi_lite.cli import main, play, solve


def _collect():
    lines = []
    return lines, lines.append


def test_solve_prints_each_move():
    """solve prints one numbered line per hinted move."""
    lines, out = _collect()
    service = HanoiService(GameConfig(initial_size=3))
    moves = solve(service, out=out, show_boards=False)
    assert moves == 7
    assert lines[0] == "Initial state:"
    assert sum(1 for line in lines if line.startswith("Move ")) == 7
    assert "Move 001: A -> C" in lines
    assert service.current_board().is_solved()


def test_play_session():
    """A scripted session plays, reports an error and finishes solved."""
    lines, out = _collect()
    service = HanoiService(GameConfig(initial_size=2))
    commands = ["hint", "AB", "a c", "", "AB", "B->C", "show", "quit", "AC"]
    moves = play(service, commands, out=out)

    assert moves == 3
    assert "hint: A -> B" in lines
    assert any(line.startswith("error:") for line in lines)  # second AB moves from an empty peg
    assert any(line.startswith("Solved!") for line in lines)
    assert service.current_board().is_solved()


def test_play_reset_and_errors():
    """Bad resets and bad moves are printed as errors without ending play."""
    lines, out = _collect()
    service = HanoiService(GameConfig(initial_size=2, reset_size=4))
    play(service, ["reset", "reset x", "reset 0", "AA", "XY"], out=out)
    assert service.current_board().number_of_pieces() == 4
    assert sum(1 for line in lines if line.startswith("error:")) == 4


def test_play_hint_on_solved_board():
    """Asking for a hint after solving prints the solved error."""
    lines, out = _collect()
    service = HanoiService(GameConfig(initial_size=1))
    play(service, ["AC", "hint"], out=out)
    assert lines[-1].startswith("error: Board is solved")


def test_main_auto_solve(capsys, tmp_path: Path):
    """The default run solves, prints the summary lines and writes the log."""
    log_path = tmp_path / "run.json"
    assert main(["--n", "3", "--quiet", "--log-json", str(log_path)]) == 0
    captured = capsys.readouterr().out
    lines = captured.splitlines()
    assert lines[-2:] == ["Solved in 7 moves", "Expected moves: 7"]

    events = json.loads(log_path.read_text())
    assert sum(1 for e in events if e["type"] == "move") == 7


def test_main_random_start(capsys):
    """A random start solves but has no expected move count."""
    assert main(["--n", "5", "--random", "--seed", "1", "--quiet"]) == 0
    captured = capsys.readouterr().out
    assert "Solved in" in captured
    assert "Expected moves" not in captured


def test_main_rejects_bad_size(capsys):
    """A non-positive --n exits with status 2."""
    assert main(["--n", "0"]) == 2
    assert "error:" in capsys.readouterr().err


def test_main_play_from_stdin(monkeypatch, capsys):
    """--play reads commands from stdin."""
    monkeypatch.setattr(sys, "stdin", iter(["AC\n", "quit\n"]))
    assert main(["--n", "1", "--play"]) == 0
    assert "Solved!" in capsys.readouterr().out
