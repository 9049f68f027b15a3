"""
scoring.py
==========
Deterministic, side-effect-free accusation logic.

Kept apart from the game engine so it can be unit-tested against a
hand-built clue index and suspect table, and tuned through
GameConfig.accusation_threshold without touching any game or UI code.
"""

from __future__ import annotations

import logging
from typing import List

from clue_index import ClueIndex
from config import GAME_CONFIG
from models import AccusationResult
from suspect_lookup import SuspectLookup

logger = logging.getLogger("haunted_mansion.scoring")


def evaluate_accusation(
    clue_index: ClueIndex,
    lookup:     SuspectLookup,
    accused:    str,
    threshold:  int = GAME_CONFIG.accusation_threshold,
) -> AccusationResult:
    """
    Count how many collected clues implicate `accused` and judge the accusation.

    Each clue in the index is looked up in the suspect table; a clue counts
    when its suspect equals the accused name ignoring case and surrounding
    whitespace. Clues with no registered suspect never count, and neither
    does a blank name.

    Args:
        clue_index: Clues the player collected.
        lookup:     Clue → suspect table.
        accused:    Free-text name typed by the player.
        threshold:  Matches needed for a correct accusation (default: 2).

    Returns:
        AccusationResult with the tally, the verdict and the matching clues.

    Examples:
        Two collected clues both registered to "Ana":
        >>> evaluate_accusation(index, lookup, "ana").matches
        2
        >>> evaluate_accusation(index, lookup, "Carlos").correct
        False
    """
    name = accused.strip()
    wanted = name.lower()

    implicating: List[str] = []
    if wanted:
        for clue in clue_index:
            suspect = lookup.lookup(clue)
            if suspect is not None and suspect.strip().lower() == wanted:
                implicating.append(clue)

    matches = len(implicating)
    correct = matches >= threshold

    logger.info(
        "Accusation evaluated: accused=%r, matches=%d, threshold=%d, correct=%s",
        name, matches, threshold, correct,
    )
    return AccusationResult(
        accused=name,
        matches=matches,
        correct=correct,
        implicating_clues=implicating,
    )
