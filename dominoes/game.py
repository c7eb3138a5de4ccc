"""A two-player game of dominoes: the computer against a person."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable

from dominoes.player import AIPlayer, HumanPlayer, MoveSet, Player
from dominoes.table import Table

SEPARATOR = "-" * 56
DEFAULT_ROUNDS = 8


def _turn(
    table: Table,
    player: Player,
    moves: MoveSet,
    output: Callable[[str], object],
) -> bool:
    """Play one turn; return True if the player has emptied the hand."""
    output(SEPARATOR)
    output(f"kosci {player.nickname}: ")
    output(player.render())
    if not moves.find_moves():
        output("brak ruchu, gracz pasuje.")
        return False
    table.place(moves.make_move())
    output(table.render())
    return len(player) == 0


def play(
    table: Table,
    first_player: Player,
    first_moves: MoveSet,
    second_player: Player,
    second_moves: MoveSet,
    output: Callable[[str], object] | None = None,
    rounds: int = DEFAULT_ROUNDS,
) -> Player | None:
    """Play the game and return the winner, or None if nobody won in time."""
    output = output if output is not None else print
    output(SEPARATOR)
    output(f"kosci {first_player.nickname}: ")
    output(first_player.render())
    table.place(first_moves.first_move())
    output(table.render())

    for _ in range(rounds):
        for player, moves in ((second_player, second_moves), (first_player, first_moves)):
            if _turn(table, player, moves, output):
                output(f"\n{player.nickname} wygral")
                return player
    return None


def main(argv: list[str] | None = None) -> int:
    """Run a game on the terminal."""
    parser = argparse.ArgumentParser(prog="dominoes", description="Play dominoes.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    table = Table(rng)
    computer = Player(table, "gracza 1")
    person = Player(table, "gracza 2")
    try:
        play(
            table,
            computer,
            AIPlayer(computer, table, rng=rng),
            person,
            HumanPlayer(person, table),
        )
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0