"""
game_engine.py
==============
Core game engine for Haunted Mansion: Clue Hunt.

Contains:
  ExplorationEngine: the state machine that walks the room tree, picking up
                     each room's clue the first time it is entered.
  MansionGame      : the session object that owns the room tree, the clue
                     index and the suspect table, and exposes the API
                     consumed by both the CLI (cli.py) and the Streamlit
                     UI (app.py).

Public API summary:
    game = MansionGame()
    game.start()                 → [ExplorationEvent]
    game.step(raw_command)       → [ExplorationEvent]
    game.current_room            → Room | None
    game.collected_clues()       → [str], alphabetical
    game.make_accusation(name)   → AccusationResult
    game.reset()                 → None
    game.close()                 → {structure: nodes released}

Logging
-------
The logger name for this module is ``haunted_mansion.game_engine``.
Configure level and destination once at the entry point (cli.py / app.py).
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from clue_index import ClueIndex
from config import COMMAND_KEYS, EXIT, GAME_CONFIG
from mansion import build_mansion, iter_rooms, release_rooms
from mansion_data import SUSPECT_TABLE, load_layout
from models import (
    AccusationResult,
    EventKind,
    ExplorationEvent,
    MansionLayout,
    Room,
    SuspectSpec,
)
from scoring import evaluate_accusation
from suspect_lookup import SuspectLookup

logger = logging.getLogger("haunted_mansion.game_engine")


def parse_command(raw: str) -> Optional[str]:
    """
    Translate one line of player input into an engine command.

    Surrounding whitespace is ignored. Only the single characters in
    COMMAND_KEYS are accepted; anything else returns None.
    """
    return COMMAND_KEYS.get(raw.strip())


class ExplorationEngine:
    """
    Walks the room tree one command at a time.

    The engine is either at a room or exited. It never adds or removes
    rooms; the only thing it changes in the tree is each room's
    `collected` flag, through Room.collect().

    Attributes:
        current:    The room the player is in, or None once exited.
        clue_index: Where collected clues are inserted.
        exited:     True after the exit command (or for an empty mansion).
        history:    Every event emitted so far, oldest first.
    """

    def __init__(self, entrance: Optional[Room], clue_index: ClueIndex) -> None:
        self.current: Optional[Room] = entrance
        self.clue_index = clue_index
        self.exited = entrance is None
        self.history: List[ExplorationEvent] = []

    def _emit(self, event: ExplorationEvent) -> ExplorationEvent:
        self.history.append(event)
        return event

    def start(self) -> List[ExplorationEvent]:
        """Enter the entrance room (or report that there is nothing to explore)."""
        if self.current is None:
            self.exited = True
            return [self._emit(ExplorationEvent(
                EventKind.EMPTY_MAP, message="Empty map. Nothing to explore.",
            ))]
        return [self._enter(self.current)]

    def _enter(self, room: Room) -> ExplorationEvent:
        self.current = room
        logger.info("Entered room %r", room.name)

        if room.collect():
            self.clue_index.insert(room.clue)
            logger.info("Clue collected in %r: %r", room.name, room.clue)
            return self._emit(ExplorationEvent(
                EventKind.CLUE_FOUND, room=room.name, clue=room.clue,
                message=f'You found a clue: "{room.clue}"',
            ))
        if room.has_clue:
            return self._emit(ExplorationEvent(
                EventKind.ALREADY_COLLECTED, room=room.name, clue=room.clue,
                message="This room's clue has already been collected.",
            ))
        return self._emit(ExplorationEvent(
            EventKind.NO_CLUE, room=room.name, message="There is no clue in this room.",
        ))

    def step(self, raw: str) -> List[ExplorationEvent]:
        """
        Apply one line of player input.

        Returns:
            The events to show the player. Rejected input always produces
            exactly one event explaining why, and leaves the state unchanged.
        """
        if self.exited or self.current is None:
            return [self._emit(ExplorationEvent(
                EventKind.EXITED, message="The exploration is already over.",
            ))]

        room = self.current
        if not raw.strip():
            return [self._emit(ExplorationEvent(
                EventKind.MALFORMED_INPUT, room=room.name,
                message="Invalid input. Try again.",
            ))]

        command = parse_command(raw)
        if command is None:
            logger.warning("Rejected command %r in room %r", raw, room.name)
            return [self._emit(ExplorationEvent(
                EventKind.INVALID_OPTION, room=room.name,
                message="Invalid option. Use 'e', 'd' or 's'.",
            ))]

        if command == EXIT:
            self.exited = True
            self.current = None
            logger.info("Exploration finished in room %r", room.name)
            return [self._emit(ExplorationEvent(
                EventKind.EXITED, room=room.name, message="Leaving the exploration...",
            ))]

        child = room.child(command)
        if child is None:
            logger.info("No %s path from room %r", command, room.name)
            return [self._emit(ExplorationEvent(
                EventKind.NO_PATH, room=room.name,
                message=f"There is no path to the {command} from this room.",
            ))]
        return [self._enter(child)]

    def explore(self, commands: Iterable[str]) -> ClueIndex:
        """
        Drive the engine with a scripted command sequence.

        Stops at the exit command or when `commands` runs out, and returns
        the clue index in its final state.
        """
        if not self.history:
            self.start()
        for raw in commands:
            if self.exited:
                break
            self.step(raw)
        return self.clue_index


class MansionGame:
    """
    One play session.

    Owns the three data structures of the game and tears all of them down
    in close(). Nothing here is module-level state: two MansionGame objects
    never share rooms, clues or suspects.

    Attributes:
        layout:         The validated mansion layout this session was built from.
        entrance:       Root of the room tree.
        clue_index:     Clues collected so far.
        suspect_lookup: Clue → suspect table.
        engine:         The ExplorationEngine walking `entrance`.
        accusation:     The AccusationResult once make_accusation() ran.
    """

    def __init__(
        self,
        layout:        Optional[MansionLayout] = None,
        suspect_table: Iterable[SuspectSpec] = SUSPECT_TABLE,
        threshold:     int = GAME_CONFIG.accusation_threshold,
    ) -> None:
        self.layout        = layout if layout is not None else load_layout()
        self.suspect_table = list(suspect_table)
        self.threshold     = threshold
        self._build()

    def _build(self) -> None:
        self.entrance:       Optional[Room] = build_mansion(self.layout)
        self.suspect_lookup: SuspectLookup  = SuspectLookup.from_specs(self.suspect_table)
        self.clue_index:     ClueIndex      = ClueIndex()
        self.engine = ExplorationEngine(self.entrance, self.clue_index)
        self.accusation: Optional[AccusationResult] = None
        self.closed = False
        logger.info(
            "MansionGame initialised: entrance=%r, threshold=%d",
            self.layout.entrance,
            self.threshold,
        )

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    @property
    def current_room(self) -> Optional[Room]:
        return self.engine.current

    @property
    def exited(self) -> bool:
        return self.engine.exited

    def start(self) -> List[ExplorationEvent]:
        return self.engine.start()

    def step(self, raw: str) -> List[ExplorationEvent]:
        return self.engine.step(raw)

    def collected_clues(self) -> List[str]:
        return self.clue_index.in_order()

    def total_clues(self) -> int:
        """Number of rooms in the mansion that hold a clue."""
        return sum(1 for room in iter_rooms(self.entrance) if room.has_clue)

    def suspects(self) -> List[str]:
        return self.suspect_lookup.suspects()

    # ------------------------------------------------------------------
    # Accusation
    # ------------------------------------------------------------------

    def make_accusation(self, accused: str) -> AccusationResult:
        """
        Judge an accusation against the clues collected so far.

        The result is also stored on `accusation` for the UIs to render.
        """
        self.accusation = evaluate_accusation(
            self.clue_index, self.suspect_lookup, accused, self.threshold,
        )
        return self.accusation

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> Dict[str, int]:
        """
        Release the room tree, the clue index and the suspect table.

        Safe to call more than once; later calls release nothing.

        Returns:
            Number of nodes released per structure.
        """
        if self.closed:
            return {"rooms": 0, "clues": 0, "suspects": 0}

        released = {
            "rooms":    release_rooms(self.entrance),
            "clues":    self.clue_index.clear(),
            "suspects": self.suspect_lookup.clear(),
        }
        self.entrance = None
        self.engine.current = None
        self.engine.exited  = True
        self.closed = True
        logger.info(
            "Session closed: released rooms=%d, clues=%d, suspects=%d",
            released["rooms"], released["clues"], released["suspects"],
        )
        return released

    def reset(self) -> None:
        """Tear the current session down and build a fresh one from the same data."""
        logger.info("Game reset requested.")
        self.close()
        self._build()
