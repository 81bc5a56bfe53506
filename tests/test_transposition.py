import pytest

from bismuth_search.moves import Move, PieceType
from bismuth_search.transposition import (
    NodeType,
    TranspositionTable,
    is_mate_score,
)

MB = 1024 * 1024


@pytest.fixture
def table():
    return TranspositionTable(1)


def test_exact_round_trip(table):
    mv = Move(1 << 12, 1 << 28, PieceType.PAWN)
    table.store(123456789, 4, 0, 37, NodeType.EXACT, mv)
    assert table.lookup(123456789, 4, 0, -100, 100) == 37
    assert table.stored_move(123456789) == mv
    assert table.entry(123456789).depth == 4


def test_shallower_entry_is_not_used(table):
    table.store(555, 2, 0, 10, NodeType.EXACT)
    assert table.lookup(555, 3, 0, -100, 100) is None
    assert table.lookup(555, 2, 0, -100, 100) == 10


def test_upper_bound_needs_score_at_most_alpha(table):
    table.store(777, 3, 0, 50, NodeType.UPPER_BOUND)
    assert table.lookup(777, 3, 0, 40, 100) is None
    assert table.lookup(777, 3, 0, 50, 100) == 50


def test_lower_bound_needs_score_at_least_beta(table):
    table.store(888, 3, 0, 50, NodeType.LOWER_BOUND)
    assert table.lookup(888, 3, 0, -100, 60) is None
    assert table.lookup(888, 3, 0, -100, 50) == 50


@pytest.mark.parametrize("score", [9_999_990, -9_999_990])
def test_mate_score_round_trip_same_ply(table, score):
    table.store(999, 5, 3, score, NodeType.EXACT)
    assert table.lookup(999, 5, 3, -10**8, 10**8) == score
    assert abs(table.entry(999).value) > abs(score)


def test_ordinary_score_stored_unchanged(table):
    table.store(321, 1, 7, 123, NodeType.EXACT)
    assert table.entry(321).value == 123


def test_is_mate_score_threshold():
    assert is_mate_score(10_000_000)
    assert is_mate_score(-10_000_000)
    assert not is_mate_score(9_000_000)


def test_single_slot_collision_replaces():
    small = TranspositionTable(1, entry_size=MB)
    assert small.count == 1
    small.store(1, 1, 0, 5, NodeType.EXACT)
    small.store(2, 1, 0, 6, NodeType.EXACT)
    assert small.lookup(1, 1, 0, -100, 100) is None
    assert small.lookup(2, 1, 0, -100, 100) == 6


def test_key_mismatch_misses(table):
    table.store(10, 1, 0, 5, NodeType.EXACT)
    assert table.lookup(10 + table.count, 1, 0, -100, 100) is None
    assert table.index(10 + table.count) == table.index(10)


def test_clear_empties(table):
    table.store(42, 2, 0, 9, NodeType.EXACT)
    table.clear()
    assert table.lookup(42, 2, 0, -100, 100) is None
    assert table.stored_move(42) is None


def test_zero_entries_rejected():
    with pytest.raises(ValueError):
        TranspositionTable(0)
    with pytest.raises(ValueError):
        TranspositionTable(1, entry_size=0)