import pytest

from clue_index import ClueIndex
from game_engine import ExplorationEngine, MansionGame, parse_command
from mansion import build_mansion, create_room
from models import EventKind


@pytest.fixture()
def game(small_layout, small_suspects):
    g = MansionGame(layout=small_layout, suspect_table=small_suspects)
    yield g
    g.close()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("e", "left"), ("E", "left"),
        ("d", "right"), ("D", "right"),
        ("s", "exit"), ("S", "exit"),
        (" e \n", "left"),
        ("x", None), ("left", None), ("ed", None), ("", None),
    ],
)
def test_parse_command(raw, expected):
    assert parse_command(raw) == expected


def test_start_collects_entrance_clue(game):
    events = game.start()
    assert [e.kind for e in events] == [EventKind.CLUE_FOUND]
    assert events[0].clue == "clue1"
    assert game.collected_clues() == ["clue1"]


def test_scenario_a_left_then_exit(game):
    game.start()
    assert game.step("e")[0].kind == EventKind.CLUE_FOUND
    assert game.step("s")[0].kind == EventKind.EXITED
    assert game.exited
    assert game.collected_clues() == ["clue1", "clue2"]

    ana = game.make_accusation("Ana")
    assert (ana.matches, ana.correct) == (2, True)
    carlos = game.make_accusation("Carlos")
    assert (carlos.matches, carlos.correct) == (0, False)


def test_scenario_b_no_path_from_leaf(game):
    game.start()
    game.step("e")
    room = game.current_room
    events = game.step("e")
    assert [e.kind for e in events] == [EventKind.NO_PATH]
    assert game.current_room is room
    assert not game.exited


def test_scenario_c_nothing_collected():
    kitchen_only = ExplorationEngine(create_room("Kitchen"), ClueIndex())
    clues = kitchen_only.explore(["s"])
    assert clues.in_order() == []
    assert kitchen_only.history[0].kind == EventKind.NO_CLUE


def test_revisits_do_not_reinsert(small_layout):
    hall = build_mansion(small_layout)
    index = ClueIndex()
    engine = ExplorationEngine(hall, index)
    engine.start()
    engine.step("e")
    # Jump back to the hall by hand; the engine itself only moves downward.
    first = engine._enter(hall)
    second = engine._enter(hall)
    assert first.kind == EventKind.ALREADY_COLLECTED
    assert second.kind == EventKind.ALREADY_COLLECTED
    assert len(index) == 2
    found = [e for e in engine.history if e.kind == EventKind.CLUE_FOUND]
    assert [e.clue for e in found] == ["clue1", "clue2"]


def test_room_without_clue(game):
    game.start()
    events = game.step("d")
    assert events[0].kind == EventKind.NO_CLUE
    assert game.current_room.name == "Kitchen"
    assert game.collected_clues() == ["clue1"]


def test_invalid_and_malformed_input_keep_state(game):
    game.start()
    room = game.current_room
    assert game.step("x")[0].kind == EventKind.INVALID_OPTION
    assert game.step("   ")[0].kind == EventKind.MALFORMED_INPUT
    assert game.step("back to hall")[0].kind == EventKind.INVALID_OPTION
    assert game.current_room is room
    assert all(e.message for e in game.engine.history)


def test_commands_after_exit_are_ignored(game):
    game.start()
    game.step("s")
    assert game.step("e")[0].kind == EventKind.EXITED
    assert game.current_room is None


def test_empty_map():
    engine = ExplorationEngine(None, ClueIndex())
    assert engine.exited
    assert engine.start()[0].kind == EventKind.EMPTY_MAP


def test_explore_stops_at_exit(small_layout):
    index = ClueIndex()
    engine = ExplorationEngine(build_mansion(small_layout), index)
    result = engine.explore(["e", "s", "d"])
    assert result is index
    assert index.in_order() == ["clue1", "clue2"]
    assert engine.exited


def test_engine_never_changes_tree_shape(small_layout):
    hall = build_mansion(small_layout)
    study, kitchen = hall.left, hall.right
    ExplorationEngine(hall, ClueIndex()).explore(["e", "e", "d", "x", "s"])
    assert hall.left is study and hall.right is kitchen
    assert study.left is None and study.right is None


def test_total_clues_and_suspects(game):
    assert game.total_clues() == 2
    assert game.suspects() == ["Ana"]


def test_default_game_builds_full_mansion():
    game = MansionGame()
    try:
        assert game.total_clues() == 9
        assert game.layout.entrance == "Entrance Hall"
        assert len(game.suspects()) == 3
    finally:
        game.close()


def test_close_releases_everything_once(game):
    game.start()
    game.step("e")
    assert game.close() == {"rooms": 3, "clues": 2, "suspects": 2}
    assert game.close() == {"rooms": 0, "clues": 0, "suspects": 0}
    assert game.exited


def test_reset_starts_over(game):
    game.start()
    game.step("e")
    game.step("s")
    game.make_accusation("Ana")
    game.reset()
    assert not game.exited
    assert game.accusation is None
    assert game.collected_clues() == []
    assert game.start()[0].kind == EventKind.CLUE_FOUND
