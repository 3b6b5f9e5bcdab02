"""The three game levels and the command that displays their boards."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import TextIO

from .abilities import Mask, cone_mask, cross_mask, octahedron_mask
from .board import Board, Diagonal, Orientation, PlacementError

SHIP_LENGTH = 3

Report = Callable[[str], None]


@dataclass(frozen=True)
class _Ship:
    row: int
    column: int
    kind: Orientation | Diagonal
    failure: str | None = None
    length: int = SHIP_LENGTH

    def place_on(self, board: Board) -> None:
        if isinstance(self.kind, Diagonal):
            board.place_diagonal(self.row, self.column, self.length, self.kind)
        else:
            board.place_linear(self.row, self.column, self.length, self.kind)


_NOVICE_SHIPS = (
    _Ship(2, 4, Orientation.HORIZONTAL, "Erro ao posicionar navio horizontal!"),
    _Ship(5, 7, Orientation.VERTICAL, "Erro ao posicionar navio vertical!"),
)

_ADVENTURER_SHIPS = (
    _Ship(2, 1, Orientation.HORIZONTAL, "Erro ao posicionar navio horizontal!"),
    _Ship(5, 5, Orientation.VERTICAL, "Erro ao posicionar navio vertical!"),
    _Ship(6, 0, Diagonal.DOWN_RIGHT, "Erro ao posicionar navio diagonal principal!"),
    _Ship(6, 9, Diagonal.DOWN_LEFT, "Erro ao posicionar navio diagonal secundária!"),
)

_MASTER_SHIPS = tuple(replace(ship, failure=None) for ship in _ADVENTURER_SHIPS)

_MASTER_ABILITIES: tuple[tuple[Callable[[], Mask], int, int], ...] = (
    (cone_mask, 1, 1),
    (cross_mask, 5, 5),
    (octahedron_mask, 8, 4),
)


def _place_ships(board: Board, ships: Sequence[_Ship], report: Report | None) -> None:
    for ship in ships:
        try:
            ship.place_on(board)
        except PlacementError:
            if report is not None and ship.failure:
                report(ship.failure)


def _build_novice(report: Report | None = None) -> Board:
    board = Board()
    _place_ships(board, _NOVICE_SHIPS, report)
    return board


def _build_adventurer(report: Report | None = None) -> Board:
    board = Board()
    _place_ships(board, _ADVENTURER_SHIPS, report)
    return board


def _build_master(report: Report | None = None) -> Board:
    board = Board()
    _place_ships(board, _MASTER_SHIPS, report)
    for factory, row, column in _MASTER_ABILITIES:
        board.apply_ability(factory(), row, column)
    return board


def novice_board() -> Board:
    """Board with one horizontal and one vertical ship."""
    return _build_novice()


def adventurer_board() -> Board:
    """Board with two straight and two diagonal ships."""
    return _build_adventurer()


def master_board() -> Board:
    """The adventurer's ships plus cone, cross and diamond ability areas."""
    return _build_master()


@dataclass(frozen=True)
class _Level:
    build: Callable[[Report | None], Board]
    title: str
    render: Callable[[Board], str]


_LEVELS = {
    "novato": _Level(_build_novice, "Tabuleiro:", Board.render_digits),
    "aventureiro": _Level(_build_adventurer, "Tabuleiro:", Board.render_digits),
    "mestre": _Level(_build_master, "Tabuleiro Final:", Board.render_symbols),
}

LEVELS = tuple(_LEVELS)


def run_level(level: str, out: TextIO | None = None) -> Board:
    """Build the named level's board, write it to ``out`` and return it."""
    try:
        spec = _LEVELS[level.lower()]
    except KeyError:
        raise ValueError(
            f"unknown level {level!r}; choose one of {', '.join(LEVELS)}"
        ) from None
    stream = sys.stdout if out is None else out
    board = spec.build(lambda message: print(message, file=stream))
    stream.write(f"\n{spec.title}\n")
    stream.write(spec.render(board))
    return board


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="batalha-naval", description="Show the board of a battleship level."
    )
    parser.add_argument(
        "level", nargs="?", default="mestre", choices=LEVELS, help="level to show"
    )
    args = parser.parse_args(argv)
    run_level(args.level, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())