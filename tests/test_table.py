import random

import pytest

from dominoes.table import Table, Tile, TileMismatchError


def _chain_ok(line):
    tiles = list(line)
    return all(a.right == b.left for a, b in zip(tiles, tiles[1:]))


def test_stock_holds_full_double_six_set():
    table = Table(random.Random(1))
    assert len(table.stock) == 28
    assert len(set(table.stock)) == 28
    assert all(0 <= t.left <= t.right <= 6 for t in table.stock)
    assert not table.line


def test_tile_str_and_flip():
    tile = Tile(1, 2)
    assert str(tile) == "[1|2]"
    assert tile.flipped() == Tile(2, 1)
    assert tile.flipped().flipped() == tile


def test_draw_empties_stock_then_returns_none():
    table = Table(random.Random(3))
    original = set(table.stock)
    drawn = [table.draw() for _ in range(28)]
    assert set(drawn) == original
    assert table.stock == []
    assert table.draw() is None


def test_draw_is_reproducible_with_seed():
    first = Table(random.Random(42))
    second = Table(random.Random(42))
    assert [first.draw() for _ in range(10)] == [second.draw() for _ in range(10)]


def test_place_on_empty_table():
    table = Table(random.Random(0))
    laid = table.place(Tile(3, 5))
    assert laid == Tile(3, 5)
    assert list(table.line) == [Tile(3, 5)]
    assert table.head == 3
    assert table.tail == 5


def test_place_at_head_turns_tile():
    table = Table(random.Random(0))
    table.place(Tile(3, 5))
    laid = table.place(Tile(3, 1))
    assert laid == Tile(1, 3)
    assert table.line[0] == Tile(1, 3)
    assert table.head == 1


def test_place_at_tail_and_turned_at_tail():
    table = Table(random.Random(0))
    table.place(Tile(3, 5))
    table.place(Tile(5, 6))
    laid = table.place(Tile(2, 6))
    assert laid == Tile(6, 2)
    assert table.line[-1] == Tile(6, 2)
    assert _chain_ok(table.line)


def test_place_mismatch_raises():
    table = Table(random.Random(0))
    table.place(Tile(3, 5))
    with pytest.raises(TileMismatchError):
        table.place(Tile(0, 1))
    assert list(table.line) == [Tile(3, 5)]


def test_matches():
    table = Table(random.Random(0))
    assert table.matches(Tile(3, 3)) is False
    table.place(Tile(3, 5))
    assert table.matches(Tile(5, 0)) is True
    assert table.matches(Tile(0, 3)) is True
    assert table.matches(Tile(0, 1)) is False


def test_render_lists_tiles():
    table = Table(random.Random(0))
    table.place(Tile(3, 5))
    table.place(Tile(5, 6))
    text = table.render()
    assert text.startswith("Kosci na stole:")
    assert "[3|5] [5|6]" in text