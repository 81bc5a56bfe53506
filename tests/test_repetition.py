import pytest

from bismuth_search.repetition import CAPACITY, RepetitionTable


def test_threefold_needed():
    table = RepetitionTable()
    table.add(42)
    table.add(7)
    table.add(42)
    assert not table.contains(42)
    table.add(42)
    assert table.contains(42)
    assert not table.contains(7)


def test_pop_last_removes_latest():
    table = RepetitionTable()
    for _ in range(3):
        table.add(5)
    assert table.contains(5)
    table.pop_last()
    assert len(table) == 2
    assert not table.contains(5)


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        RepetitionTable().pop_last()


def test_full_table_ignores_additions():
    table = RepetitionTable()
    for i in range(CAPACITY):
        table.add(i)
    for _ in range(3):
        table.add(99999)
    assert len(table) == CAPACITY
    assert not table.contains(99999)