"""Transposition table with mate-score correction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from bismuth_search.moves import Move

DEFAULT_ENTRY_SIZE = 48
MATE_THRESHOLD = 9_000_000


class NodeType(Enum):
    EXACT = "exact"
    LOWER_BOUND = "lower"
    UPPER_BOUND = "upper"


@dataclass(frozen=True)
class Entry:
    key: int = 0
    value: int = 0
    depth: int = 0
    node_type: NodeType = NodeType.EXACT
    move: Optional[Move] = None


_EMPTY = Entry()


def is_mate_score(score: int) -> bool:
    return abs(score) > MATE_THRESHOLD


def _sign(score: int) -> int:
    return (score > 0) - (score < 0)


def _for_storage(score: int, ply: int) -> int:
    if is_mate_score(score):
        sign = _sign(score)
        return (score * sign + ply) * sign
    return score


def _for_retrieval(score: int, ply: int) -> int:
    if is_mate_score(score):
        sign = _sign(score)
        return (score * sign - ply) * sign
    return score


class TranspositionTable:
    """Fixed-slot hash table indexed by ``key % count``; newer entries replace older ones."""

    def __init__(self, size_mb: int, entry_size: int = DEFAULT_ENTRY_SIZE) -> None:
        if entry_size <= 0:
            raise ValueError("entry size must be positive")
        self.count = size_mb * 1024 * 1024 // entry_size
        if self.count <= 0:
            raise ValueError("transposition table would hold no entries")
        self._entries: dict[int, Entry] = {}

    def clear(self) -> None:
        self._entries.clear()

    def index(self, key: int) -> int:
        return key % self.count

    def entry(self, key: int) -> Entry:
        """The entry in the slot the key maps to (an empty entry if unused)."""
        return self._entries.get(self.index(key), _EMPTY)

    def stored_move(self, key: int) -> Optional[Move]:
        return self.entry(key).move

    def lookup(
        self, key: int, depth: int, ply_from_root: int, alpha: int, beta: int
    ) -> Optional[int]:
        """A usable stored score for this key and window, or None."""
        entry = self.entry(key)
        if entry.key != key or entry.depth < depth:
            return None
        score = _for_retrieval(entry.value, ply_from_root)
        if entry.node_type is NodeType.EXACT:
            return score
        if entry.node_type is NodeType.UPPER_BOUND and score <= alpha:
            return score
        if entry.node_type is NodeType.LOWER_BOUND and score >= beta:
            return score
        return None

    def store(
        self,
        key: int,
        depth: int,
        ply_from_root: int,
        value: int,
        node_type: NodeType,
        move: Optional[Move] = None,
    ) -> None:
        self._entries[self.index(key)] = Entry(
            key, _for_storage(value, ply_from_root), depth, node_type, move
        )