"""Domino tiles, the stock of undrawn tiles and the line of play on the table."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from itertools import islice

MAX_PIPS = 6
MAX_SHOWN = 28


@dataclass(frozen=True)
class Tile:
    """A domino tile with a pip count on each half."""

    left: int
    right: int

    def flipped(self) -> Tile:
        """Return the same tile turned end for end."""
        return Tile(self.right, self.left)

    def __str__(self) -> str:
        return f"[{self.left}|{self.right}]"


class TileMismatchError(ValueError):
    """Raised when a tile fits neither end of the line of play."""

    def __init__(self, tile: Tile, head: int, tail: int) -> None:
        super().__init__(
            f"Kosc {tile} nie pasuje do glowy [{head}] ani ogona [{tail}]."
        )
        self.tile = tile
        self.head = head
        self.tail = tail


class Table:
    """The game state: tiles left to draw and tiles laid out in a line."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.stock: list[Tile] = [
            Tile(i, j) for i in range(MAX_PIPS + 1) for j in range(i, MAX_PIPS + 1)
        ]
        self.line: deque[Tile] = deque()

    @property
    def head(self) -> int | None:
        """Open pip value at the start of the line, or None if the line is empty."""
        return self.line[0].left if self.line else None

    @property
    def tail(self) -> int | None:
        """Open pip value at the end of the line, or None if the line is empty."""
        return self.line[-1].right if self.line else None

    def draw(self) -> Tile | None:
        """Remove a random tile from the stock and return it; None when empty."""
        if not self.stock:
            return None
        return self.stock.pop(self._rng.randrange(len(self.stock)))

    def matches(self, tile: Tile) -> bool:
        """Whether the tile can be laid at either open end of the line."""
        if not self.line:
            return False
        pips = (tile.left, tile.right)
        return self.head in pips or self.tail in pips

    def place(self, tile: Tile) -> Tile:
        """Lay a tile on the table, turning it as needed; return it as laid."""
        if not self.line:
            self.line.append(tile)
            return tile

        head = self.head
        if tile.left == head:
            tile = tile.flipped()
        if tile.right == head:
            self.line.appendleft(tile)
            return tile

        tail = self.tail
        if tile.right == tail:
            tile = tile.flipped()
        if tile.left == tail:
            self.line.append(tile)
            return tile

        raise TileMismatchError(tile, head, tail)

    def render(self) -> str:
        """Text listing the tiles on the table."""
        shown = "".join(f"{tile} " for tile in islice(self.line, MAX_SHOWN))
        return f"Kosci na stole:\n\n{shown}\n"