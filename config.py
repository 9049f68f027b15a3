"""
config.py
=========
Central configuration module for Haunted Mansion: Clue Hunt.

All tunable constants and key bindings live here so they can be adjusted
without touching game logic or either front end.

Usage:
    from config import GAME_CONFIG, COMMAND_KEYS
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


# ---------------------------------------------------------------------------
# Game parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Game-balance and data-structure settings.

    Attributes:
        accusation_threshold: Minimum number of collected clues that must
                              point at the accused for the accusation to be
                              correct. A fixed policy, independent of how
                              many clues the mansion holds.
        suspect_buckets:      Number of buckets in the clue -> suspect table.
        clue_marker:          Prefix printed before each collected clue.
        log_level:            Level passed to logging.basicConfig by the CLI.
                              Kept above INFO so log lines do not interleave
                              with the interactive prompt.
    """
    accusation_threshold: int = 2
    suspect_buckets:      int = 31
    clue_marker:          str = " - "
    log_level:            str = "WARNING"


# ---------------------------------------------------------------------------
# Singleton instance (import-ready)
# ---------------------------------------------------------------------------

GAME_CONFIG = GameConfig()


# ---------------------------------------------------------------------------
# Command key bindings
# ---------------------------------------------------------------------------

LEFT  = "left"
RIGHT = "right"
EXIT  = "exit"

COMMAND_KEYS: Dict[str, str] = {
    "e": LEFT,  "E": LEFT,
    "d": RIGHT, "D": RIGHT,
    "s": EXIT,  "S": EXIT,
}
"""
Single characters accepted at the room prompt, mapped to engine commands.

Any other input is rejected by the engine with a re-prompt.
"""
