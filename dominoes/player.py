"""Players' hands and the ways they choose which tile to lay."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator

from dominoes.table import Table, Tile

HAND_SIZE = 7


class Player:
    """A player's hand of tiles, dealt from the table's stock."""

    def __init__(self, table: Table, nickname: str = "") -> None:
        self.table = table
        self.nickname = nickname
        self.hand: list[Tile] = []
        for _ in range(HAND_SIZE):
            tile = table.draw()
            if tile is None:
                raise ValueError("not enough tiles in the stock to deal a hand")
            self.hand.append(tile)

    def __len__(self) -> int:
        return len(self.hand)

    def __iter__(self) -> Iterator[Tile]:
        return iter(list(self.hand))

    def add(self, tile: Tile) -> None:
        """Put a tile at the end of the hand."""
        self.hand.append(tile)

    def take(self, tile: Tile) -> Tile:
        """Remove a tile from the hand and return it."""
        try:
            self.hand.remove(tile)
        except ValueError:
            raise ValueError(f"{tile} is not in the hand") from None
        return tile

    def render(self) -> str:
        """Numbered listing of the tiles in the hand."""
        return "".join(f"{i}. {tile}     " for i, tile in enumerate(self.hand, 1))


class MoveSet(ABC):
    """Finds playable tiles for a player and picks one to lay."""

    def __init__(
        self,
        player: Player,
        table: Table,
        output: Callable[[str], object] | None = None,
    ) -> None:
        self.player = player
        self.table = table
        self._output = output if output is not None else print
        self.moves: list[Tile] = []

    def find_moves(self) -> list[Tile]:
        """List tiles that fit the table, drawing from the stock until one does."""
        while True:
            self.moves = [tile for tile in self.player if self.table.matches(tile)]
            if self.moves or self.draw_tile() is None:
                break
        self.show_moves()
        return list(self.moves)

    def must_draw(self) -> bool:
        """Whether the last search found nothing to play."""
        return not self.moves

    def draw_tile(self) -> Tile | None:
        """Draw one tile from the stock into the hand; None if the stock is empty."""
        tile = self.table.draw()
        if tile is None:
            return None
        self._output("\nbrak pasujacych kosci. gracz dobiera kosc.")
        self.player.add(tile)
        return tile

    def _require_moves(self) -> None:
        if not self.moves:
            raise LookupError("no playable tile")

    @abstractmethod
    def first_move(self) -> Tile:
        """Choose the opening tile and remove it from the hand."""

    @abstractmethod
    def make_move(self) -> Tile:
        """Choose one of the found moves and remove it from the hand."""

    @abstractmethod
    def show_moves(self) -> None:
        """Report the found moves."""


def _parse_choice(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class HumanPlayer(MoveSet):
    """Moves chosen by a person typing tile numbers."""

    def __init__(
        self,
        player: Player,
        table: Table,
        output: Callable[[str], object] | None = None,
        read: Callable[[], str] | None = None,
    ) -> None:
        super().__init__(player, table, output)
        self._read = read if read is not None else input

    def _choose(self, prompt: str, retry: str, upper: int) -> int:
        self._output(prompt)
        while True:
            choice = _parse_choice(self._read())
            if choice is not None and 1 <= choice <= upper:
                return choice
            self._output(retry)

    def first_move(self) -> Tile:
        count = len(self.player)
        if count == 0:
            raise LookupError("the hand is empty")
        prompt = "Wybierz kosc ktora chcesz wylozyc na poczatek:\n"
        retry = f"Blad! Masz do wyboru {count} kosci.\n{prompt}"
        choice = self._choose(f"\n\n{prompt}", retry, count)
        return self.player.take(self.player.hand[choice - 1])

    def make_move(self) -> Tile:
        self._require_moves()
        choice = self._choose(
            "Wybierz kosc : ", "Bledny wybor, sprobuj ponownie: ", len(self.moves)
        )
        return self.player.take(self.moves[choice - 1])

    def show_moves(self) -> None:
        listing = "".join(f"{i}. {tile}     " for i, tile in enumerate(self.moves, 1))
        self._output(f"Mozliwe ruchy do wykonania:\n\n{listing}\n")


class AIPlayer(MoveSet):
    """Moves chosen by the computer."""

    def __init__(
        self,
        player: Player,
        table: Table,
        output: Callable[[str], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(player, table, output)
        self._rng = rng if rng is not None else random.Random()

    def first_move(self) -> Tile:
        if not self.player.hand:
            raise LookupError("the hand is empty")
        return self.player.take(self._rng.choice(self.player.hand))

    def make_move(self) -> Tile:
        self._require_moves()
        return self.player.take(self.moves[0])

    def show_moves(self) -> None:
        self._output("\n")