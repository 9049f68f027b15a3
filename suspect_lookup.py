"""
suspect_lookup.py
=================
Clue -> suspect hash table with separate chaining.

Keys are matched exactly (case-sensitive). New entries are always pushed on
the front of their bucket's chain and never overwrite older ones, so when a
clue has been registered more than once the most recent registration wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from config import GAME_CONFIG
from models import SuspectSpec

logger = logging.getLogger("haunted_mansion.suspect_lookup")


def hash_clue(clue: str, buckets: int) -> int:
    """djb2 over the UTF-8 bytes of `clue`, reduced to a bucket index."""
    h = 5381
    for byte in clue.encode("utf-8"):
        h = ((h << 5) + h + byte) & 0xFFFFFFFF
    return h % buckets


@dataclass
class SuspectEntry:
    clue:    str
    suspect: str
    next:    Optional["SuspectEntry"] = None


class SuspectLookup:
    """
    Fixed-size chained hash table mapping clue text to a suspect's name.

    Args:
        buckets: Number of buckets; defaults to GameConfig.suspect_buckets.
    """

    def __init__(self, buckets: int = GAME_CONFIG.suspect_buckets) -> None:
        if buckets < 1:
            raise ValueError("SuspectLookup needs at least one bucket")
        self._buckets: List[Optional[SuspectEntry]] = [None] * buckets
        self._size = 0

    @classmethod
    def from_specs(
        cls,
        specs: Iterable[SuspectSpec],
        buckets: int = GAME_CONFIG.suspect_buckets,
    ) -> "SuspectLookup":
        """Build a table by registering every spec in order."""
        table = cls(buckets)
        for spec in specs:
            table.register(spec.clue, spec.suspect)
        logger.info("Suspect table built: %d entries, %d buckets", len(table), buckets)
        return table

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def register(self, clue: str, suspect: str) -> None:
        """Associate `clue` with `suspect`, in front of any earlier entry."""
        index = hash_clue(clue, len(self._buckets))
        self._buckets[index] = SuspectEntry(clue, suspect, self._buckets[index])
        self._size += 1
        logger.debug("Registered %r -> %r in bucket %d", clue, suspect, index)

    def lookup(self, clue: str) -> Optional[str]:
        """Return the suspect registered for exactly `clue`, or None."""
        entry = self._buckets[hash_clue(clue, len(self._buckets))]
        while entry is not None:
            if entry.clue == clue:
                return entry.suspect
            entry = entry.next
        return None

    def _entries(self) -> Iterator[SuspectEntry]:
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry
                entry = entry.next

    def suspects(self) -> List[str]:
        """Distinct suspect names, sorted alphabetically."""
        return sorted({entry.suspect for entry in self._entries()}, key=str.lower)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None

    def clear(self) -> int:
        """
        Release every entry exactly once and empty all buckets.

        Returns:
            Number of entries released.
        """
        released = 0
        for i, head in enumerate(self._buckets):
            entry = head
            while entry is not None:
                following, entry.next = entry.next, None
                entry = following
                released += 1
            self._buckets[i] = None
        self._size = 0
        logger.debug("Released %d suspect entries.", released)
        return released
