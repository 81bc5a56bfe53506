"""Bounded history of position hashes for threefold-repetition detection."""

from __future__ import annotations

CAPACITY = 256
REPETITION_LIMIT = 3


class RepetitionTable:
    """A stack of position hashes holding at most ``CAPACITY`` entries."""

    def __init__(self) -> None:
        self._hashes: list[int] = []

    def add(self, key: int) -> None:
        """Push a hash; silently ignored once the table is full."""
        if len(self._hashes) < CAPACITY:
            self._hashes.append(key)

    def pop_last(self) -> None:
        if not self._hashes:
            raise IndexError("pop from empty repetition table")
        self._hashes.pop()

    def contains(self, key: int) -> bool:
        """True if the hash occurs at least three times."""
        return self._hashes.count(key) >= REPETITION_LIMIT

    def __len__(self) -> int:
        return len(self._hashes)