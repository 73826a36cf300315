"""Coordinate helpers between GUI cells, algebraic names and engine positions.

GUI layout (row 0 at the top of the screen):
    (0, 0)=a8, (1, 0)=b8, ..., (7, 0)=h8
    ...
    (0, 7)=a1, (1, 7)=b1, ..., (7, 7)=h1
"""

from __future__ import annotations

from typing import NamedTuple, TypeAlias

AlgebraicSquare: TypeAlias = str  # "a1" .. "h8"


class Square(NamedTuple):
    """GUI cell, zero-based column and row."""

    column: int
    row: int


class EnginePosition(NamedTuple):
    """Rule-engine square, 1-indexed file and rank."""

    file: int
    rank: int


def is_on_board(column: int, row: int) -> bool:
    """Check whether a cell lies inside the 8×8 grid."""
    return 0 <= column < 8 and 0 <= row < 8


def square_to_algebraic(square: Square) -> AlgebraicSquare:
    """GUI cell → algebraic name, e.g. (4, 6) → 'e2'."""
    return chr(ord("a") + square.column) + chr(ord("8") - square.row)


def algebraic_to_square(name: AlgebraicSquare) -> Square:
    """Algebraic name → GUI cell, e.g. 'e4' → (4, 4)."""
    return Square(ord(name[0]) - ord("a"), ord("8") - ord(name[1]))


def square_to_engine_position(square: Square) -> EnginePosition:
    """GUI cell → engine position, e.g. (0, 0) → (1, 8)."""
    return EnginePosition(square.column + 1, 8 - square.row)


def engine_position_to_square(position: EnginePosition) -> Square:
    """Engine position → GUI cell."""
    return Square(position.file - 1, 8 - position.rank)


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(column, row) for row in range(8) for column in range(8)
)
