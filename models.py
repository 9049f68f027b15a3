"""
models.py
=========
Shared data models for Haunted Mansion: Clue Hunt.

Contains:
  - RoomSpec / EdgeSpec / MansionLayout : Pydantic schema for authoring a
                                          mansion as rooms plus edges.
  - SuspectSpec                         : Pydantic schema for one clue -> suspect row.
  - AccusationResult                    : Pydantic result of an accusation.
  - Room                                : Dataclass node of the room tree.
  - EventKind / ExplorationEvent        : What the exploration engine reports.

Keeping these in one module guarantees a single source of truth for data
shapes used across mansion.py, game_engine.py, scoring.py and both UIs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Literal, Optional, Set, Tuple

from pydantic import BaseModel, model_validator


# ---------------------------------------------------------------------------
# Layout schema
# ---------------------------------------------------------------------------

class RoomSpec(BaseModel):
    """One room of a mansion layout. An empty clue means the room holds none."""

    name: str
    clue: str = ""


class EdgeSpec(BaseModel):
    """A tree edge: `child` hangs off `parent` on the given side."""

    parent:    str
    direction: Literal["left", "right"]
    child:     str


class MansionLayout(BaseModel):
    """
    Validated description of a mansion as a binary tree of rooms.

    The validator guarantees the layout is a proper tree rooted at
    `entrance`, so build_mansion() never has to check anything:

      - room names are unique;
      - the entrance and both ends of every edge are declared rooms;
      - each (parent, direction) slot is used at most once;
      - every room has at most one parent and the entrance has none;
      - every room is reachable from the entrance.
    """

    entrance: str
    rooms:    List[RoomSpec]
    edges:    List[EdgeSpec] = []

    @model_validator(mode="after")
    def check_tree_shape(self) -> "MansionLayout":
        names: Set[str] = set()
        for room in self.rooms:
            if room.name in names:
                raise ValueError(f"duplicate room name: {room.name!r}")
            names.add(room.name)

        if self.entrance not in names:
            raise ValueError(f"entrance {self.entrance!r} is not a declared room")

        slots:   Set[Tuple[str, str]] = set()
        parents: Dict[str, str]       = {}
        children: Dict[str, List[str]] = {name: [] for name in names}
        for edge in self.edges:
            for end in (edge.parent, edge.child):
                if end not in names:
                    raise ValueError(f"edge refers to unknown room {end!r}")
            slot = (edge.parent, edge.direction)
            if slot in slots:
                raise ValueError(
                    f"room {edge.parent!r} already has a {edge.direction} child"
                )
            slots.add(slot)
            if edge.child in parents:
                raise ValueError(
                    f"room {edge.child!r} already hangs off {parents[edge.child]!r}"
                )
            if edge.child == self.entrance:
                raise ValueError("the entrance cannot be a child room")
            parents[edge.child] = edge.parent
            children[edge.parent].append(edge.child)

        reached: Set[str] = set()
        stack = [self.entrance]
        while stack:
            name = stack.pop()
            reached.add(name)
            stack.extend(children[name])
        unreachable = sorted(names - reached)
        if unreachable:
            raise ValueError(f"rooms not reachable from the entrance: {unreachable}")
        return self


class SuspectSpec(BaseModel):
    """One row of the clue -> suspect table."""

    clue:    str
    suspect: str


# ---------------------------------------------------------------------------
# Accusation result
# ---------------------------------------------------------------------------

class AccusationResult(BaseModel):
    """
    Outcome of evaluate_accusation().

    Fields:
        accused:           The name as typed by the player (stripped).
        matches:           Number of collected clues pointing at the accused.
        correct:           True when `matches` reached the accusation threshold.
        implicating_clues: The matching clues, in alphabetical order.
    """

    accused:           str
    matches:           int
    correct:           bool
    implicating_clues: List[str] = []


# ---------------------------------------------------------------------------
# Room tree node
# ---------------------------------------------------------------------------

@dataclass
class Room:
    """
    A room of the mansion and a node of the room tree.

    Attributes:
        name:      Display name.
        clue:      The clue found here, or "" if the room holds none.
        collected: True once the clue has been picked up. Only ever moves
                   from False to True, through collect().
        left:      Child room reached with the "left" command, if any.
        right:     Child room reached with the "right" command, if any.
    """

    name:      str
    clue:      str = ""
    collected: bool = False
    left:      Optional["Room"] = None
    right:     Optional["Room"] = None

    @property
    def has_clue(self) -> bool:
        return bool(self.clue)

    def child(self, direction: str) -> Optional["Room"]:
        """Return the child on `direction` ("left" or "right")."""
        return self.left if direction == "left" else self.right

    def collect(self) -> bool:
        """
        Mark the clue as collected.

        Returns True only the first time it is called on a room that holds
        a clue; the caller inserts the clue exactly when this returns True.
        """
        if not self.clue or self.collected:
            return False
        self.collected = True
        return True


# ---------------------------------------------------------------------------
# Exploration events
# ---------------------------------------------------------------------------

class EventKind(str, Enum):
    CLUE_FOUND        = "clue_found"
    ALREADY_COLLECTED = "already_collected"
    NO_CLUE           = "no_clue"
    NO_PATH           = "no_path"
    INVALID_OPTION    = "invalid_option"
    MALFORMED_INPUT   = "malformed_input"
    EXITED            = "exited"
    EMPTY_MAP         = "empty_map"


@dataclass(frozen=True)
class ExplorationEvent:
    """Something the player should be told after entering a room or issuing a command."""

    kind:    EventKind
    room:    str = ""
    clue:    str = ""
    message: str = ""
