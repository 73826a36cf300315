"""InteractionSession — click-to-move state machine on top of a RuleEngine.

States:
    Idle        nothing selected
    Selecting   a square was clicked; its legal destinations are highlighted
    Promoting   a pawn reached the last rank; waiting for the piece choice

Pointer releases above the board height are board clicks. Below the board
they pick a promotion piece while promoting, or restart the game after
checkmate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from schack.core.captures import CaptureLedger
from schack.core.coords import (
    AlgebraicSquare,
    Square,
    algebraic_to_square,
    square_to_algebraic,
    square_to_engine_position,
)
from schack.core.enums import GameStatus, Side
from schack.engine.interfaces import EngineResult, RuleEngine
from schack.game.layout import BoardLayout

_LOGGER = logging.getLogger(__name__)

# GUI row a pawn of each side promotes on.
_PROMOTION_ROW: dict[Side, int] = {Side.WHITE: 0, Side.BLACK: 7}


@dataclass(frozen=True, slots=True)
class PendingMove:
    """A pawn move waiting for its promotion choice."""

    from_sq: AlgebraicSquare
    to_sq: AlgebraicSquare


@dataclass
class InteractionState:
    """Selection and promotion state of the session."""

    previous_click: Square | None = None
    legal_destinations: set[Square] = field(default_factory=set)
    promotion_pending: bool = False
    pending_move: PendingMove | None = None


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[AlgebraicSquare, AlgebraicSquare], None]  # from, to
PromotionCallback = Callable[[PendingMove], None]
ResetCallback = Callable[[], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_promotion_requested: list[PromotionCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class InteractionSession:
    """Owns the rule engine, the interaction state and the capture ledger.

    Thread-safety: called from the UI thread only; every transition runs to
    completion inside a single pointer event.
    """

    __slots__ = ("_engine", "_layout", "_state", "_captures", "events")

    def __init__(self, engine: RuleEngine, layout: BoardLayout | None = None) -> None:
        self._engine = engine
        self._layout = layout or BoardLayout()
        self._state = InteractionState()
        self._captures = CaptureLedger()
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> RuleEngine:
        return self._engine

    @property
    def layout(self) -> BoardLayout:
        return self._layout

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def captures(self) -> CaptureLedger:
        return self._captures

    @property
    def previous_click(self) -> Square | None:
        return self._state.previous_click

    @property
    def legal_destinations(self) -> frozenset[Square]:
        return frozenset(self._state.legal_destinations)

    @property
    def promotion_pending(self) -> bool:
        return self._state.promotion_pending

    @property
    def pending_move(self) -> PendingMove | None:
        return self._state.pending_move

    # ── Input ────────────────────────────────────────────────────────────

    def handle_pointer_release(self, x: float, y: float) -> None:
        """Process a primary-button release at pixel position (*x*, *y*)."""
        if self._layout.is_board_click(y):
            if self._state.promotion_pending:
                return
            square = self._layout.square_at(x, y)
            if square is None:
                _LOGGER.debug("Ignoring click outside the grid at (%s, %s)", x, y)
                return
            self._on_board_click(square)
            return

        if self._state.promotion_pending:
            if self._layout.in_promotion_row(y):
                self._on_promotion_click(x, y)
            return

        if self._engine.game_status() == GameStatus.CHECKMATE:
            self.new_game()

    def new_game(self) -> None:
        """Start over from the initial position."""
        self._engine = self._engine.reset_game()
        self._captures.clear()
        self._state = InteractionState()
        _LOGGER.info("New game started")
        for cb in self.events.on_reset:
            cb()

    # ── Board clicks ─────────────────────────────────────────────────────

    def _on_board_click(self, square: Square) -> None:
        state = self._state
        if square == state.previous_click:
            return
        if state.previous_click is not None and square in state.legal_destinations:
            self._on_move(state.previous_click, square)
        else:
            self._select(square)

    def _select(self, square: Square) -> None:
        destinations = self._engine.legal_destinations(square_to_algebraic(square))
        self._state.legal_destinations = {
            algebraic_to_square(name) for name in destinations or ()
        }
        self._state.previous_click = square

    def _on_move(self, origin: Square, target: Square) -> None:
        from_sq = square_to_algebraic(origin)
        to_sq = square_to_algebraic(target)
        mover = self._engine.piece_at(square_to_engine_position(origin))

        if (
            mover is not None
            and mover.is_pawn
            and target.row == _PROMOTION_ROW[mover.side]
        ):
            pending = PendingMove(from_sq, to_sq)
            self._state.promotion_pending = True
            self._state.pending_move = pending
            _LOGGER.debug("Promotion pending for %s-%s", from_sq, to_sq)
            for cb in self.events.on_promotion_requested:
                cb(pending)
            return

        self._record_capture(origin, target)
        self._commit(from_sq, to_sq)

    # ── Promotion ────────────────────────────────────────────────────────

    def _on_promotion_click(self, x: float, y: float) -> None:
        pending = self._state.pending_move
        kind = self._layout.promotion_choice_at(x, y)
        if kind is None or pending is None:
            # Committing here would reuse a stale promotion choice.
            return

        self._absorb(self._engine.set_promotion(str(kind)), "set_promotion")
        self._record_capture(
            algebraic_to_square(pending.from_sq), algebraic_to_square(pending.to_sq)
        )
        self._state.promotion_pending = False
        self._state.pending_move = None
        self._commit(pending.from_sq, pending.to_sq)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _record_capture(self, origin: Square, target: Square) -> None:
        """Log the piece a move from *origin* to *target* is about to remove."""
        mover = self._engine.piece_at(square_to_engine_position(origin))
        if mover is None:
            return
        captured = self._engine.piece_at(square_to_engine_position(target))
        if captured is None and mover.is_pawn and origin.column != target.column:
            # En passant: the captured pawn sits beside the origin square.
            captured = self._engine.piece_at(
                square_to_engine_position(Square(target.column, origin.row))
            )
        if captured is not None and captured.side != mover.side:
            self._captures.record_capture(captured)

    def _commit(self, from_sq: AlgebraicSquare, to_sq: AlgebraicSquare) -> None:
        self._absorb(self._engine.commit_move(from_sq, to_sq), "commit_move")
        self._state.legal_destinations.clear()
        self._state.previous_click = None
        for cb in self.events.on_move:
            cb(from_sq, to_sq)

    @staticmethod
    def _absorb(result: EngineResult, operation: str) -> None:
        # Moves are pre-filtered through legal_destinations, so engine
        # failures are not surfaced to the user.
        if not result.ok:
            _LOGGER.debug("Engine %s failed: %s", operation, result.error)
