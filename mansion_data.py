"""
mansion_data.py
===============
All narrative content for the haunted mansion.

Centralising story data here means you can swap out the whole mansion
(rooms, their clues, who each clue points at) without touching the engine,
the data structures, or either UI.

To create a new mansion:
    1. Replace ROOMS and EDGES with your own tree. MansionLayout checks the
       shape when the game starts, so mistakes fail loudly at startup.
    2. Replace SUSPECT_TABLE so each clue text matches a room clue exactly
       (the lookup is case-sensitive).
    3. Give the culprit at least GameConfig.accusation_threshold clues.
"""

from __future__ import annotations

from typing import List

from models import EdgeSpec, MansionLayout, RoomSpec, SuspectSpec


# ---------------------------------------------------------------------------
# Rooms and their clues
# ---------------------------------------------------------------------------

ROOMS: List[RoomSpec] = [
    RoomSpec(name="Entrance Hall", clue="Note signed with the letter A"),
    RoomSpec(name="Living Room",   clue="Muddy footprints"),
    RoomSpec(name="Kitchen",       clue="Knife with a broken handle"),
    RoomSpec(name="Library",       clue="Page torn from a diary"),
    RoomSpec(name="Garden",        clue="Tyre tracks"),
    RoomSpec(name="Cellar",        clue="Empty chemical flasks"),
    RoomSpec(name="Secret Room",   clue="Clock stopped at 03:15"),
    RoomSpec(name="Bathroom",      clue="Handkerchief with floral perfume"),
    RoomSpec(name="Study",         clue="Golden key"),
]


# ---------------------------------------------------------------------------
# Tree edges
#
#                    Entrance Hall
#                  /               \
#           Living Room           Kitchen
#            /      \             /      \
#       Library    Garden     Cellar    Bathroom
#                                \          \
#                             Secret Room   Study
# ---------------------------------------------------------------------------

EDGES: List[EdgeSpec] = [
    EdgeSpec(parent="Entrance Hall", direction="left",  child="Living Room"),
    EdgeSpec(parent="Entrance Hall", direction="right", child="Kitchen"),
    EdgeSpec(parent="Living Room",   direction="left",  child="Library"),
    EdgeSpec(parent="Living Room",   direction="right", child="Garden"),
    EdgeSpec(parent="Kitchen",       direction="left",  child="Cellar"),
    EdgeSpec(parent="Kitchen",       direction="right", child="Bathroom"),
    EdgeSpec(parent="Cellar",        direction="right", child="Secret Room"),
    EdgeSpec(parent="Bathroom",      direction="right", child="Study"),
]

ENTRANCE = "Entrance Hall"


def load_layout() -> MansionLayout:
    """Validate ROOMS and EDGES into a MansionLayout (raises pydantic.ValidationError)."""
    return MansionLayout(entrance=ENTRANCE, rooms=ROOMS, edges=EDGES)


# ---------------------------------------------------------------------------
# Who each clue points at
# ---------------------------------------------------------------------------

SUSPECT_TABLE: List[SuspectSpec] = [
    SuspectSpec(clue="Note signed with the letter A",    suspect="Lady Ashworth"),
    SuspectSpec(clue="Handkerchief with floral perfume", suspect="Lady Ashworth"),
    SuspectSpec(clue="Page torn from a diary",           suspect="Lady Ashworth"),
    SuspectSpec(clue="Muddy footprints",                 suspect="Groundskeeper Finch"),
    SuspectSpec(clue="Tyre tracks",                      suspect="Groundskeeper Finch"),
    SuspectSpec(clue="Knife with a broken handle",       suspect="Groundskeeper Finch"),
    SuspectSpec(clue="Empty chemical flasks",            suspect="Doctor Crane"),
    SuspectSpec(clue="Clock stopped at 03:15",           suspect="Doctor Crane"),
    SuspectSpec(clue="Golden key",                       suspect="Doctor Crane"),
]
"""
Clue text → suspect name.

Every suspect has three clues, so any of them can be correctly accused if
the player gathers enough evidence along their path. Only the clues the
player actually collected count toward an accusation.
"""
