import pytest

import cli
import game_engine
from game_engine import MansionGame
from models import MansionLayout, RoomSpec


def _feed(monkeypatch, lines):
    """Make input() return `lines` one by one, then raise EOFError."""
    remaining = iter(lines)

    def fake_input(prompt=""):
        print(prompt, end="")
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


class TrackingGame(MansionGame):
    instances = []

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.close_calls = 0
        TrackingGame.instances.append(self)

    def close(self):
        self.close_calls += 1
        return super().close()


@pytest.fixture()
def tracking(monkeypatch):
    TrackingGame.instances = []
    monkeypatch.setattr(cli, "MansionGame", TrackingGame)
    return TrackingGame.instances


def test_full_session_correct_accusation(monkeypatch, capsys, tracking):
    _feed(monkeypatch, ["e", "e", "s", "lady ashworth"])
    assert cli.run_cli() == 0
    out = capsys.readouterr().out

    assert "You are in: Entrance Hall" in out
    assert 'You found a clue: "Muddy footprints"' in out
    clue_block = out.split("Collected clues (alphabetical order)")[1]
    assert clue_block.index(" - Muddy footprints") < clue_block.index(
        " - Note signed with the letter A"
    ) < clue_block.index(" - Page torn from a diary")
    assert "Collected 3 of 9 clues." in out
    assert "Clues pointing at lady ashworth: 2 (needed: 2)" in out
    assert "Correct accusation!" in out
    assert tracking[0].close_calls == 1


def test_rejected_input_reprompts(monkeypatch, capsys, tracking):
    _feed(monkeypatch, ["x", "", "e", "e", "e", "s", "Nobody"])
    assert cli.run_cli() == 0
    out = capsys.readouterr().out

    assert "Invalid option. Use 'e', 'd' or 's'." in out
    assert "Invalid input. Try again." in out
    assert "There is no path to the left from this room." in out
    assert "Go left -> (not available)" in out
    assert "Incorrect accusation." in out


def test_end_of_input_leaves_the_mansion(monkeypatch, capsys, tracking):
    _feed(monkeypatch, [])
    assert cli.run_cli() == 0
    out = capsys.readouterr().out

    assert "Leaving the exploration..." in out
    assert " - Note signed with the letter A" in out
    assert "Clues pointing at (nobody): 0" in out
    assert tracking[0].close_calls == 1


def test_interrupt_still_closes_the_game(monkeypatch, tracking):
    def interrupted(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)
    with pytest.raises(KeyboardInterrupt):
        cli.run_cli()
    assert tracking[0].close_calls == 1


def test_out_of_memory_exits_with_error(monkeypatch, capsys):
    def no_memory(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(cli, "MansionGame", no_memory)
    assert cli.run_cli() == 1
    assert "not enough memory" in capsys.readouterr().err


def test_invalid_layout_exits_with_error(monkeypatch, capsys):
    def broken_layout():
        return MansionLayout(entrance="Nowhere", rooms=[RoomSpec(name="Hall")])

    monkeypatch.setattr(game_engine, "load_layout", broken_layout)
    assert cli.run_cli() == 1
    assert "invalid mansion layout" in capsys.readouterr().err
