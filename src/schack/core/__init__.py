"""Core domain layer — value types, coordinates and the capture ledger.

Quick start::

    from schack.core import Square, square_to_algebraic

    square_to_algebraic(Square(4, 6))  # 'e2'
"""

from schack.core.captures import CaptureLedger
from schack.core.coords import (
    ALL_SQUARES,
    AlgebraicSquare,
    EnginePosition,
    Square,
    algebraic_to_square,
    engine_position_to_square,
    is_on_board,
    square_to_algebraic,
    square_to_engine_position,
)
from schack.core.enums import PROMOTION_CHOICES, GameStatus, PieceKind, Side
from schack.core.piece import PieceIdentity

__all__ = [
    # Enums
    "GameStatus",
    "PieceKind",
    "PROMOTION_CHOICES",
    "Side",
    # Types / helpers
    "ALL_SQUARES",
    "AlgebraicSquare",
    "EnginePosition",
    "Square",
    "algebraic_to_square",
    "engine_position_to_square",
    "is_on_board",
    "square_to_algebraic",
    "square_to_engine_position",
    # Domain objects
    "CaptureLedger",
    "PieceIdentity",
]
