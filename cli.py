"""
cli.py
======
Command-line interface for Haunted Mansion: Clue Hunt.

Provides the text-based game loop. All game logic is delegated to
MansionGame; this module only handles I/O.

Usage:
    python cli.py

Commands in each room:
    e / E : go left
    d / D : go right
    s / S : leave the mansion and list the collected clues

After leaving, type the name of the suspect you accuse.

Exit codes:
    0 : normal completion
    1 : the game could not be set up (out of memory or invalid layout)
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from config import GAME_CONFIG
from game_engine import MansionGame
from models import EventKind, ExplorationEvent
from ui_helpers import exit_options, format_clue_lines, format_verdict

logger = logging.getLogger("haunted_mansion.cli")


def _read_line(prompt: str) -> Optional[str]:
    """input() that returns None at end of input instead of raising."""
    try:
        return input(prompt)
    except EOFError:
        return None


_ROOM_ENTRY = {EventKind.CLUE_FOUND, EventKind.ALREADY_COLLECTED, EventKind.NO_CLUE}


def _show(events: List[ExplorationEvent]) -> None:
    for event in events:
        if event.kind in _ROOM_ENTRY:
            print(f"\nYou are in: {event.room}")
        print(event.message)


def _explore(game: MansionGame) -> None:
    """Room prompt loop; returns once the player leaves or input runs out."""
    _show(game.start())

    while not game.exited:
        room = game.current_room
        print("\nChoose a path:")
        for key, label in exit_options(room):
            print(f"  ({key}) {label}")

        raw = _read_line("Your choice: ")
        if raw is None:
            print()
            _show(game.step("s"))
            break

        _show(game.step(raw))


def _report_clues(game: MansionGame) -> None:
    clues = game.collected_clues()
    print("\n=== Collected clues (alphabetical order) ===")
    if not clues:
        print("No clues were collected.")
    else:
        for line in format_clue_lines(clues):
            print(line)
    print(f"Collected {len(clues)} of {game.total_clues()} clues.")


def _accuse(game: MansionGame) -> None:
    print("\n=== Accusation ===")
    print("Suspects: " + ", ".join(game.suspects()))
    name = _read_line("Who do you accuse? ") or ""
    result = game.make_accusation(name)
    for line in format_verdict(result, game.threshold):
        print(line)


def run_cli() -> int:
    """
    Main CLI game loop.

    Builds the game session, explores the mansion interactively, lists the
    collected clues and asks for an accusation. The session is closed on
    every path out of this function.

    Returns:
        Process exit code.
    """
    try:
        game = MansionGame()
    except MemoryError:
        logger.error("Out of memory while building the mansion.", exc_info=True)
        print("Error: not enough memory to build the mansion.", file=sys.stderr)
        return 1
    except ValidationError as exc:
        logger.error("Invalid mansion layout: %s", exc)
        print(f"Error: invalid mansion layout.\n{exc}", file=sys.stderr)
        return 1

    try:
        print("\n" + "=" * 60)
        print("   HAUNTED MANSION: CLUE HUNT")
        print("=" * 60)
        print(f"\nStarting at the {game.layout.entrance}.")
        print("Type 'e' to go left, 'd' to go right, 's' to leave.")

        _explore(game)
        _report_clues(game)
        _accuse(game)

        print("\nThe end. Good investigating!")
        return 0
    finally:
        game.close()


if __name__ == "__main__":
    # Configure logging at the entry point so all haunted_mansion.* loggers
    # share one handler. Raise the level in config.py to see the session log.
    logging.basicConfig(
        level=GAME_CONFIG.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    sys.exit(run_cli())
