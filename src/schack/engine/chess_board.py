"""ChessBoardEngine — RuleEngine backed by python-chess."""

from __future__ import annotations

import logging

import chess

from schack.core.coords import AlgebraicSquare, EnginePosition
from schack.core.enums import GameStatus, PieceKind, Side
from schack.core.piece import PieceIdentity
from schack.engine.interfaces import EngineResult, RuleEngine

_LOGGER = logging.getLogger(__name__)

_PROMOTION_NAMES: dict[str, chess.PieceType] = {
    "queen": chess.QUEEN,
    "knight": chess.KNIGHT,
    "rook": chess.ROOK,
    "bishop": chess.BISHOP,
}

_KINDS: dict[chess.PieceType, PieceKind] = {
    chess.PAWN: PieceKind.PAWN,
    chess.KNIGHT: PieceKind.KNIGHT,
    chess.BISHOP: PieceKind.BISHOP,
    chess.ROOK: PieceKind.ROOK,
    chess.QUEEN: PieceKind.QUEEN,
    chess.KING: PieceKind.KING,
}


def _side(color: chess.Color) -> Side:
    return Side.WHITE if color == chess.WHITE else Side.BLACK


class ChessBoardEngine(RuleEngine):
    """Wraps a :class:`chess.Board`.

    The promotion choice is sticky: it applies to every promoting move until
    changed, and starts out as a queen.
    """

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board() if fen is None else chess.Board(fen)
        self._promotion: chess.PieceType = chess.QUEEN

    @property
    def board(self) -> chess.Board:
        return self._board

    @property
    def promotion(self) -> str:
        """Name of the current promotion choice."""
        return chess.piece_name(self._promotion)

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, position: EnginePosition) -> PieceIdentity | None:
        piece = self._board.piece_at(chess.square(position.file - 1, position.rank - 1))
        if piece is None:
            return None
        return PieceIdentity(_KINDS[piece.piece_type], _side(piece.color))

    def legal_destinations(self, square: AlgebraicSquare) -> list[AlgebraicSquare] | None:
        from_sq = chess.parse_square(square)
        targets = sorted(
            {m.to_square for m in self._board.legal_moves if m.from_square == from_sq}
        )
        if not targets:
            return None
        return [chess.square_name(sq) for sq in targets]

    def game_status(self) -> GameStatus:
        if self._board.is_checkmate():
            return GameStatus.CHECKMATE
        if self._board.is_check():
            return GameStatus.CHECK
        return GameStatus.IN_PROGRESS

    def side_to_move(self) -> Side:
        return _side(self._board.turn)

    # ── Mutations ────────────────────────────────────────────────────────

    def commit_move(self, from_sq: AlgebraicSquare, to_sq: AlgebraicSquare) -> EngineResult:
        try:
            origin = chess.parse_square(from_sq)
            target = chess.parse_square(to_sq)
        except ValueError as exc:
            return EngineResult.failure(str(exc))

        promotion: chess.PieceType | None = None
        if self._board.piece_type_at(origin) == chess.PAWN and chess.square_rank(
            target
        ) in (0, 7):
            promotion = self._promotion
        move = chess.Move(origin, target, promotion=promotion)

        if move not in self._board.legal_moves:
            return EngineResult.failure(f"Illegal move: {move.uci()}")

        self._board.push(move)
        _LOGGER.debug("Played %s", move.uci())
        return EngineResult.success()

    def set_promotion(self, kind_name: str) -> EngineResult:
        piece_type = _PROMOTION_NAMES.get(kind_name)
        if piece_type is None:
            return EngineResult.failure(f"Invalid promotion piece: {kind_name!r}")
        self._promotion = piece_type
        return EngineResult.success()

    def reset_game(self) -> ChessBoardEngine:
        return ChessBoardEngine()
