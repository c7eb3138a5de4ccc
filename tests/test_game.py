import random

import pytest

from dominoes.game import main, play
from dominoes.player import AIPlayer, Player
from dominoes.table import Table


def _chain_ok(line):
    tiles = list(line)
    return all(a.right == b.left for a, b in zip(tiles, tiles[1:]))


def _ai_game(seed, rounds=8):
    rng = random.Random(seed)
    table = Table(rng)
    first = Player(table, "gracza 1")
    second = Player(table, "gracza 2")
    out = []
    winner = play(
        table,
        first,
        AIPlayer(first, table, out.append, rng),
        second,
        AIPlayer(second, table, out.append, rng),
        out.append,
        rounds,
    )
    return table, first, second, winner, out


@pytest.mark.parametrize("seed", range(12))
def test_ai_game_keeps_invariants(seed):
    table, first, second, winner, _ = _ai_game(seed)
    assert len(table.stock) + len(table.line) + len(first) + len(second) == 28
    assert _chain_ok(table.line)
    assert winner in (None, first, second)
    if winner is not None:
        assert len(winner) == 0


def test_winner_is_announced():
    for seed in range(50):
        _, _, _, winner, out = _ai_game(seed, rounds=20)
        if winner is not None:
            assert out[-1].endswith(f"{winner.nickname} wygral")
            break
    else:
        pytest.fail("no game produced a winner")


def test_zero_rounds_only_opening_tile():
    table, first, second, winner, out = _ai_game(4, rounds=0)
    assert winner is None
    assert len(table.line) == 1
    assert len(first) == 6
    assert len(second) == 7
    assert any(line.startswith("Kosci na stole:") for line in out)


def test_main_runs_with_scripted_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda *args: "1")
    assert main(["--seed", "3"]) == 0
    captured = capsys.readouterr().out
    assert "Kosci na stole:" in captured
    assert "kosci gracza 2" in captured


def test_main_stops_on_end_of_input(monkeypatch):
    def _eof(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert main(["--seed", "3"]) == 1