import pytest

from bismuth_search.pregenerate import king_attacks, knight_attacks


def popcount(x):
    return bin(x).count("1")


@pytest.mark.parametrize("table", [knight_attacks, king_attacks])
def test_sixty_four_entries_within_board(table):
    entries = table()
    assert len(entries) == 64
    assert all(0 <= bb < (1 << 64) for bb in entries)


@pytest.mark.parametrize("table", [knight_attacks, king_attacks])
def test_symmetric_and_never_self(table):
    entries = table()
    for a in range(64):
        assert not entries[a] >> a & 1
        for b in range(64):
            assert bool(entries[a] >> b & 1) == bool(entries[b] >> a & 1)


def test_knight_corner_and_center_counts():
    entries = knight_attacks()
    assert popcount(entries[0]) == 2
    assert popcount(entries[63]) == 2
    assert popcount(entries[27]) == 8


def test_knight_total_move_count():
    assert sum(popcount(bb) for bb in knight_attacks()) == 336


def test_knight_from_a1_reaches_b3_and_c2():
    assert knight_attacks()[0] == (1 << 17) | (1 << 10)


def test_king_corner_edge_center_counts():
    entries = king_attacks()
    assert popcount(entries[0]) == 3
    assert popcount(entries[4]) == 5
    assert popcount(entries[36]) == 8


def test_king_moves_are_adjacent():
    entries = king_attacks()
    for sq, bb in enumerate(entries):
        for dest in range(64):
            if bb >> dest & 1:
                assert abs(dest // 8 - sq // 8) <= 1
                assert abs(dest % 8 - sq % 8) <= 1