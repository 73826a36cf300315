"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from schack.core.enums import PieceKind, Side

_GLYPHS: dict[tuple[PieceKind, Side], str] = {
    (PieceKind.PAWN, Side.WHITE): "♙",
    (PieceKind.KNIGHT, Side.WHITE): "♘",
    (PieceKind.BISHOP, Side.WHITE): "♗",
    (PieceKind.ROOK, Side.WHITE): "♖",
    (PieceKind.QUEEN, Side.WHITE): "♕",
    (PieceKind.KING, Side.WHITE): "♔",
    (PieceKind.PAWN, Side.BLACK): "♟",
    (PieceKind.KNIGHT, Side.BLACK): "♞",
    (PieceKind.BISHOP, Side.BLACK): "♝",
    (PieceKind.ROOK, Side.BLACK): "♜",
    (PieceKind.QUEEN, Side.BLACK): "♛",
    (PieceKind.KING, Side.BLACK): "♚",
}


@dataclass(frozen=True, slots=True)
class PieceIdentity:
    """Immutable (kind, side) pair identifying a chess piece."""

    kind: PieceKind
    side: Side

    def __str__(self) -> str:
        return f"{self.side} {self.kind}"

    @property
    def glyph(self) -> str:
        """Unicode chess symbol used as the piece sprite, e.g. ♞."""
        return _GLYPHS[(self.kind, self.side)]

    @property
    def is_pawn(self) -> bool:
        return self.kind == PieceKind.PAWN
