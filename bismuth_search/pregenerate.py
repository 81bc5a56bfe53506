"""Precomputed attack bitboards for knights and kings."""

from __future__ import annotations

from functools import lru_cache

_KNIGHT_DELTAS = ((2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))
_KING_DELTAS = ((1, 0), (1, 1), (1, -1), (0, 1), (0, -1), (-1, 0), (-1, 1), (-1, -1))


def _attack_table(deltas: tuple[tuple[int, int], ...]) -> tuple[int, ...]:
    def attacks(square: int) -> int:
        rank, file = divmod(square, 8)
        bits = 0
        for dr, df in deltas:
            r, f = rank + dr, file + df
            if 0 <= r < 8 and 0 <= f < 8:
                bits |= 1 << (r * 8 + f)
        return bits

    return tuple(attacks(square) for square in range(64))


@lru_cache(maxsize=None)
def knight_attacks() -> tuple[int, ...]:
    """Knight destination bitboards for each of the 64 squares."""
    return _attack_table(_KNIGHT_DELTAS)


@lru_cache(maxsize=None)
def king_attacks() -> tuple[int, ...]:
    """King destination bitboards for each of the 64 squares."""
    return _attack_table(_KING_DELTAS)