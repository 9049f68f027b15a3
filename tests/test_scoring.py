import pytest

from clue_index import ClueIndex
from scoring import evaluate_accusation
from suspect_lookup import SuspectLookup


def _setup(collected, table):
    index = ClueIndex()
    for clue in collected:
        index.insert(clue)
    lookup = SuspectLookup()
    for clue, suspect in table.items():
        lookup.register(clue, suspect)
    return index, lookup


@pytest.mark.parametrize(
    "collected, expected_matches, expected_correct",
    [
        ([], 0, False),
        (["k1"], 1, False),
        (["k1", "k2"], 2, True),
        (["k1", "k2", "k3"], 3, True),
        (["k1", "k4"], 1, False),
    ],
)
def test_verdict_needs_two_matching_clues(collected, expected_matches, expected_correct):
    index, lookup = _setup(
        collected, {"k1": "Ana", "k2": "Ana", "k3": "Ana", "k4": "Carlos"},
    )
    result = evaluate_accusation(index, lookup, "Ana")
    assert result.matches == expected_matches
    assert result.correct is expected_correct


def test_name_compared_ignoring_case_and_whitespace():
    index, lookup = _setup(["k1", "k2"], {"k1": "Ana", "k2": "Ana"})
    result = evaluate_accusation(index, lookup, "  aNA \n")
    assert result.accused == "aNA"
    assert result.matches == 2
    assert result.correct


def test_unregistered_clues_and_blank_name_never_match():
    index, lookup = _setup(["k1", "stray"], {"k1": "Ana"})
    assert evaluate_accusation(index, lookup, "Ana").matches == 1
    assert evaluate_accusation(index, lookup, "").matches == 0
    assert evaluate_accusation(index, lookup, "   ").matches == 0


def test_implicating_clues_listed_alphabetically():
    index, lookup = _setup(
        ["zeta", "Alpha", "mid"], {"zeta": "Ana", "Alpha": "Ana", "mid": "Carlos"},
    )
    result = evaluate_accusation(index, lookup, "Ana")
    assert result.implicating_clues == ["Alpha", "zeta"]


def test_custom_threshold():
    index, lookup = _setup(["k1"], {"k1": "Ana"})
    assert evaluate_accusation(index, lookup, "Ana", threshold=1).correct
