# dominoes

A small console game of dominoes for two players: the computer and you.
The messages the game prints are in Polish.

## Installing

    pip install .

## Playing

    dominoes
    dominoes --seed 42

`--seed` fixes the random number generator, so the same deal and the same
computer choices come up again.

The game uses a double-six set of 28 tiles. Each player is dealt seven
tiles at random. The rest stay in the stock to draw from.

1. The computer opens by laying one of its tiles, picked at random.
2. After that, the players take turns, starting with you. On your turn the
   game shows your tiles and a numbered list of the ones that fit either
   end of the line on the table. Type the number of the tile you want to
   lay. If you type something that is not a number in range, you are asked
   again.
3. If none of a player's tiles fits, the player draws from the stock until
   one does. If the stock runs out and there is still nothing to play, the
   player passes.
4. A tile is turned round when needed, so that it meets the end it is laid
   against.
5. The computer always lays the first tile in its hand that fits.
6. The first player to lay down every tile wins. The game stops after at
   most eight rounds.

The command exits with status 0 when the game ends. It exits with status 1
if input ends or is interrupted.

## Using it from Python

The parts of the game can be used on their own.

- `dominoes.table.Tile` is a single tile with `left` and `right` pip
  counts. `flipped()` returns it turned round, and `str(tile)` gives
  `[left|right]`.
- `dominoes.table.Table` holds the `stock` of undrawn tiles and the `line`
  of tiles laid so far.
  - `head` and `tail` are the open pip values at the two ends of the line,
    or `None` while the line is empty.
  - `draw()` removes a random tile from the stock and returns it. It
    returns `None` once the stock is empty.
  - `matches(tile)` tells whether a tile fits either end.
  - `place(tile)` lays a tile and returns it as it was laid. A tile that
    fits neither end raises `TileMismatchError`.
  - `render()` returns the text that lists the tiles on the table.
- `dominoes.player.Player` is a hand of seven tiles dealt from a table. It
  has `len()`, iteration, `add(tile)`, `take(tile)` and `render()`.
- `dominoes.player.MoveSet` is the base class for choosing tiles.
  - `find_moves()` lists the tiles that can be played, drawing from the
    stock as needed.
  - `must_draw()` tells whether the last search found nothing.
  - `draw_tile()` draws one tile into the hand.
  - `first_move()` and `make_move()` pick a tile and take it out of the
    hand.
- `dominoes.player.HumanPlayer` asks for choices through a `read` callable,
  which defaults to `input`.
- `dominoes.player.AIPlayer` picks tiles itself, using an optional
  `random.Random`.
- Both report through an `output` callable, which defaults to `print`.
- `dominoes.game.play(...)` runs a whole game and returns the winning
  `Player`, or `None` if nobody has won within `rounds` rounds.
- `dominoes.game.main(argv)` is the console entry point.

The table and the computer player take a `random.Random` instance, so a
game can be repeated exactly by seeding it.

## What it does not do

There is no scoring and no count of points. When the round limit is
reached, no winner is named. There is no game between two people or
between two computers from the command line, no saving of games and no
play over a network.

## Running the tests

    pip install ".[test]"
    pytest