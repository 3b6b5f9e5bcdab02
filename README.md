# batalha-naval

A small battleship board: place ships horizontally, vertically or
diagonally on a square grid (10×10 by default), then stamp area
abilities (cone, cross, octahedron) over it and print the result.

## Install

    pip install .

## Command line

    batalha-naval

This prints the board of the `mestre` level. Pass a level name to
choose another one:

    batalha-naval novato
    batalha-naval aventureiro
    batalha-naval mestre

The levels are:

- **novato** – one horizontal and one vertical ship, printed under the
  heading `Tabuleiro:` as digits (`0` water, `3` ship).
- **aventureiro** – two straight and two diagonal ships, printed as
  digits under `Tabuleiro:`.
- **mestre** – the same ships as `aventureiro` plus cone, cross and
  octahedron ability areas, printed under `Tabuleiro Final:` as symbols
  (`.` water, `N` ship, `*` ability area).

If a ship of the `novato` or `aventureiro` layout cannot be placed, a
message such as `Erro ao posicionar navio horizontal!` is printed before
the board.

## Library

```python
from batalha_naval.board import Board, Orientation, Diagonal
from batalha_naval.abilities import cross_mask

board = Board(10)
if board.can_place_linear(2, 1, 3, Orientation.HORIZONTAL):
    board.place_linear(2, 1, 3, Orientation.HORIZONTAL)
board.place_diagonal(6, 0, 3, Diagonal.DOWN_RIGHT)
board.apply_ability(cross_mask(5), 5, 5)
print(board.render_symbols())
```

### `batalha_naval.board`

- `Board(size=10)` – a square grid, all water at first. `board[row, column]`
  returns the `Cell` there (`IndexError` outside the board); `rows()`
  returns a snapshot as tuples.
- `Cell` – `WATER` (0), `SHIP` (3), `ABILITY` (5); `cell.symbol` gives
  `.`, `N` or `*`.
- `Orientation.HORIZONTAL` / `VERTICAL` (also accepted as `"H"` / `"V"`)
  extend a ship right or down from its start.
- `Diagonal.DOWN_RIGHT` / `DOWN_LEFT` (also `"D"` / `"E"`) extend a ship
  diagonally downwards.
- `can_place_linear` and `can_place_diagonal` check without changing the
  board. `place_linear` and `place_diagonal` place the ship and return the
  cells it occupies, or raise `PlacementError` (a `ValueError`) if it would
  leave the board or overlap a cell that is not water.
- `apply_ability(mask, origin_row, origin_column)` centres a mask on the
  origin and marks the water cells it covers; parts outside the board are
  ignored and ships are never overwritten. It returns the number of cells
  newly marked.
- `render_digits()` and `render_symbols()` return the board as text, one
  row per line.

### `batalha_naval.abilities`

`cone_mask(size=5)`, `cross_mask(size=5)` and `octahedron_mask(size=5)`
return square masks of `0`/`1` values as tuples of tuples.

### `batalha_naval.levels`

`novice_board()`, `adventurer_board()` and `master_board()` return the
ready-made boards of the three levels. `run_level(level, out=None)`
builds the named level (`"novato"`, `"aventureiro"` or `"mestre"`),
writes it to `out` (standard output by default) and returns the board;
an unknown name raises `ValueError`. `LEVELS` holds the level names.

## What it does not do

There is no game to play: the package places fixed ship layouts and
ability areas and prints the result. It does not take shots, keep score,
read moves from the player or save boards.

## Tests

    pip install .[test]
    pytest