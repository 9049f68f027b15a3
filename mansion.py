"""
mansion.py
==========
Construction and teardown of the room tree.

The tree itself knows nothing about any particular mansion: a layout is
authored as data (see mansion_data.py), validated by MansionLayout, and
turned into linked Room nodes by build_mansion().

Public API summary:
    create_room(name, clue)  → Room
    build_mansion(layout)    → Room (the entrance)
    iter_rooms(root)         → Iterator[Room], pre-order
    release_rooms(root)      → int, number of rooms released
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional

from models import MansionLayout, Room

logger = logging.getLogger("haunted_mansion.mansion")


def create_room(name: str, clue: Optional[str] = None) -> Room:
    """
    Allocate a leaf room.

    Args:
        name: Display name of the room.
        clue: Clue text found in the room. None or "" means no clue.

    Returns:
        A Room with no children and nothing collected.
    """
    return Room(name=name, clue=clue or "")


def build_mansion(layout: MansionLayout) -> Room:
    """
    Build the room tree described by `layout` and return its entrance.

    Rooms are created first, then every edge attaches a child to its
    parent. MansionLayout has already checked that the edges form a tree
    rooted at the entrance.
    """
    rooms: Dict[str, Room] = {
        spec.name: create_room(spec.name, spec.clue) for spec in layout.rooms
    }
    for edge in layout.edges:
        setattr(rooms[edge.parent], edge.direction, rooms[edge.child])

    logger.info(
        "Mansion built: entrance=%r, rooms=%d, clues=%d",
        layout.entrance,
        len(rooms),
        sum(1 for r in rooms.values() if r.has_clue),
    )
    return rooms[layout.entrance]


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room reachable from `root`, parents before children."""
    stack = [root] if root is not None else []
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def release_rooms(root: Optional[Room]) -> int:
    """
    Tear the room tree down, visiting every room exactly once.

    Each room has its child links cut as it is visited, so nothing keeps a
    reference into the tree once this returns.

    Returns:
        Number of rooms released.
    """
    released = 0
    stack = [root] if root is not None else []
    while stack:
        room = stack.pop()
        for child in (room.left, room.right):
            if child is not None:
                stack.append(child)
        room.left = room.right = None
        released += 1
    logger.debug("Released %d rooms.", released)
    return released
