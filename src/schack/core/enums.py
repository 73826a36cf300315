"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side colour."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class GameStatus(IntEnum):
    """Game state as reported by the rule engine."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2


# Promotion choices, ordered by how often they are picked in real games.
PROMOTION_CHOICES: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
    PieceKind.BISHOP,
)
