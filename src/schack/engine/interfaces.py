"""Abstract rule-engine interface consumed by the interaction layer.

The session depends on this ABC, not on a concrete chess library.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from schack.core.coords import AlgebraicSquare, EnginePosition
from schack.core.enums import GameStatus, Side
from schack.core.piece import PieceIdentity


@dataclass(frozen=True, slots=True)
class EngineResult:
    """Outcome of a mutating engine call."""

    ok: bool
    error: str | None = None

    @classmethod
    def success(cls) -> EngineResult:
        return cls(True)

    @classmethod
    def failure(cls, error: str) -> EngineResult:
        return cls(False, error)


class RuleEngine(ABC):
    """Chess rules, board storage and move execution."""

    # ── Queries ──────────────────────────────────────────────────────────

    @abstractmethod
    def piece_at(self, position: EnginePosition) -> PieceIdentity | None:
        """Piece occupying *position*, or ``None`` for an empty square."""

    @abstractmethod
    def legal_destinations(self, square: AlgebraicSquare) -> list[AlgebraicSquare] | None:
        """Destinations of the piece on *square*; ``None`` when there are none."""

    @abstractmethod
    def game_status(self) -> GameStatus:
        """In progress, check or checkmate."""

    @abstractmethod
    def side_to_move(self) -> Side: ...

    # ── Mutations ────────────────────────────────────────────────────────

    @abstractmethod
    def commit_move(self, from_sq: AlgebraicSquare, to_sq: AlgebraicSquare) -> EngineResult:
        """Execute a move, using the current promotion choice if needed."""

    @abstractmethod
    def set_promotion(self, kind_name: str) -> EngineResult:
        """Set the promotion piece: ``"queen"``, ``"knight"``, ``"rook"`` or ``"bishop"``."""

    @abstractmethod
    def reset_game(self) -> RuleEngine:
        """Return a fresh engine holding the starting position."""
