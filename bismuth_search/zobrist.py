"""Zobrist hashing of board positions."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional, Sequence

MASK64 = (1 << 64) - 1
KEY_COUNT = 781
DEFAULT_SEED = (1, 1)
PIECE_BOARD_COUNT = 12
SIDE_TO_MOVE_INDEX = 768
CASTLING_BASE_INDEX = 769
EN_PASSANT_BASE_INDEX = 722


class Xorshift128:
    """The xorshift128+ pseudo-random generator over 64-bit words."""

    def __init__(self, seed: Iterable[int]) -> None:
        state = [value & MASK64 for value in seed]
        if len(state) != 2:
            raise ValueError("xorshift128 needs a seed of exactly two words")
        if not any(state):
            raise ValueError("xorshift128 seed must not be all zero")
        self._state = state

    def next_u64(self) -> int:
        s1, s0 = self._state
        self._state[0] = s0
        s1 = (s1 ^ (s1 << 23)) & MASK64
        self._state[1] = s1 ^ s0 ^ (s1 >> 17) ^ (s0 >> 26)
        return (self._state[1] + s0) & MASK64


def generate_keys(seed: Iterable[int] = DEFAULT_SEED) -> tuple[int, ...]:
    """The 781 random numbers used for hashing, reproducible from the seed."""
    rng = Xorshift128(seed)
    return tuple(rng.next_u64() for _ in range(KEY_COUNT))


@lru_cache(maxsize=1)
def _default_keys() -> tuple[int, ...]:
    return generate_keys(DEFAULT_SEED)


def _squares(bitboard: int) -> Iterable[int]:
    while bitboard:
        lowest = bitboard & -bitboard
        yield lowest.bit_length() - 1
        bitboard ^= lowest


def zobrist_hash(
    pieces: Sequence[int],
    white_to_move: bool,
    castling_rights: int,
    last_double_pawn_push: int,
    keys: Optional[Sequence[int]] = None,
) -> int:
    """Hash a position.

    ``pieces`` holds twelve bitboards in the order white pawn, rook, knight,
    bishop, queen, king, then the same for black.
    """
    if len(pieces) != PIECE_BOARD_COUNT:
        raise ValueError(f"expected {PIECE_BOARD_COUNT} piece bitboards, got {len(pieces)}")
    if keys is None:
        keys = _default_keys()
    elif len(keys) != KEY_COUNT:
        raise ValueError(f"expected {KEY_COUNT} keys, got {len(keys)}")

    result = 0
    for kind, bitboard in enumerate(pieces):
        for square in _squares(bitboard & MASK64):
            result ^= keys[64 * kind + square]
    if white_to_move:
        result ^= keys[SIDE_TO_MOVE_INDEX]
    for right in range(4):
        if castling_rights & (1 << right):
            result ^= keys[CASTLING_BASE_INDEX + right]
    if last_double_pawn_push:
        result ^= keys[EN_PASSANT_BASE_INDEX + last_double_pawn_push % 8]
    return result