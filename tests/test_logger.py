import json
from pathlib import Path

import pytest

from hanoi_lite.board import Board, Move, Peg
from hanoi_lite.logger import RunLogger


def test_record_frames():
    """A frame carries type, sequence number, board and serialised fields."""
    logger = RunLogger()
    board = Board.initialize_with_size(2)
    frame = logger.record("move", board, move=Move(Peg.A, Peg.B), note=None)
    assert frame == {
        "type": "move",
        "seq": 0,
        "board": {"pegA": [1, 0], "pegB": [], "pegC": []},
        "solved": False,
        "move": {"from": "A", "to": "B"},
    }


def test_snapshot_and_filter():
    """Snapshots, filtering, last and clear work together."""
    logger = RunLogger()
    logger.snapshot(Board([], [], [0]), note="done")
    logger.record("hint", move=Move("A", "C"))
    assert [e["seq"] for e in logger.events] == [0, 1]
    assert logger.events_of("snapshot")[0]["solved"] is True
    assert logger.events_of("snapshot")[0]["note"] == "done"
    assert logger.last()["type"] == "hint"

    logger.clear()
    assert len(logger.events) == 0
    assert logger.last() is None
    assert logger.record("hint")["seq"] == 0


def test_max_events_keeps_newest():
    """With a bound only the newest frames stay, seq keeps counting."""
    logger = RunLogger(max_events=3)
    for _ in range(10):
        logger.record("hint")
    assert [e["seq"] for e in logger.events] == [7, 8, 9]


def test_unbounded_by_default():
    """Without a bound every frame is kept."""
    logger = RunLogger()
    for _ in range(2000):
        logger.record("hint")
    assert len(logger.events) == 2000


def test_rejects_non_positive_bound():
    """A zero bound would drop every frame and is refused."""
    with pytest.raises(ValueError):
        RunLogger(max_events=0)


def test_to_json(tmp_path: Path):
    """to_json writes the retained frames as a JSON list."""
    logger = RunLogger(max_events=2)
    logger.record("reset", Board.initialize_with_size(1), size=1)
    logger.record("hint", move=Move("A", "C"))
    logger.record("reset", Board.initialize_with_size(2), size=2)
    path = tmp_path / "events.json"
    logger.to_json(str(path))

    data = json.loads(path.read_text())
    assert [e["type"] for e in data] == ["hint", "reset"]
    assert data[1]["size"] == 2
    assert data[1]["board"]["pegA"] == [1, 0]
