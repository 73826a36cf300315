"""Render adapter — turns session state into an ordered draw plan.

The plan is a flat list of primitive operations (fills, rectangles, circles,
piece glyphs, centred text). It is built from read-only queries and painted
by :class:`schack.ui.board_widget.BoardWidget`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from PyQt6.QtGui import QColor

from schack.core.coords import ALL_SQUARES, square_to_engine_position
from schack.core.enums import PROMOTION_CHOICES, GameStatus, Side
from schack.core.piece import PieceIdentity
from schack.game.session import InteractionSession
from schack.ui.i18n import Strings, t
from schack.ui.theme import BoardTheme

_INDICATOR_RADIUS = 25  # legal-move circle radius at a 90 px cell
_TRAY_STEP = 20.0


@dataclass(frozen=True, slots=True)
class FillOp:
    color: QColor


@dataclass(frozen=True, slots=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    color: QColor


@dataclass(frozen=True, slots=True)
class CircleOp:
    cx: float
    cy: float
    radius: float
    color: QColor


@dataclass(frozen=True, slots=True)
class GlyphOp:
    """Piece sprite drawn inside the square box at (x, y)."""

    piece: PieceIdentity
    x: float
    y: float
    size: float


@dataclass(frozen=True, slots=True)
class TextOp:
    text: str
    cx: float
    cy: float
    font_size: int
    color: QColor


DrawOp: TypeAlias = FillOp | RectOp | CircleOp | GlyphOp | TextOp


def status_caption(status: GameStatus, side: Side, strings: Strings) -> str:
    """Caption for the game status; *side* is the side to move."""
    if status == GameStatus.CHECK:
        return strings.caption_check
    if status == GameStatus.CHECKMATE:
        return (
            strings.caption_mate_white
            if side == Side.WHITE
            else strings.caption_mate_black
        )
    name = strings.side_white if side == Side.WHITE else strings.side_black
    return strings.caption_turn.format(side=name)


def build_draw_plan(
    session: InteractionSession,
    theme: BoardTheme | None = None,
    *,
    show_legal_moves: bool = True,
) -> list[DrawOp]:
    """Describe one frame for the current session state."""
    theme = theme or BoardTheme.graphite()
    engine = session.engine
    layout = session.layout
    side = engine.side_to_move()
    cell = layout.cell_size
    board = layout.board_size

    plan: list[DrawOp] = [
        FillOp(theme.background_white if side == Side.WHITE else theme.background_black)
    ]

    legal = session.legal_destinations if show_legal_moves else frozenset()
    for sq in ALL_SQUARES:
        x, y = sq.column * cell, sq.row * cell
        is_light = (sq.column + sq.row) % 2 == 0
        plan.append(
            RectOp(x, y, cell, cell, theme.light_square if is_light else theme.dark_square)
        )

        piece = engine.piece_at(square_to_engine_position(sq))
        if piece is not None:
            plan.append(GlyphOp(piece, x, y, cell))

        if sq in legal:
            radius = _INDICATOR_RADIUS * cell / 90
            plan.append(CircleOp(x + cell / 2, y + cell / 2, radius, theme.highlight_to))

    if session.promotion_pending:
        left = layout.band_edges[0]
        plan.append(
            RectOp(
                left,
                layout.promotion_top,
                board - 2 * left,
                layout.promotion_bottom - layout.promotion_top,
                theme.panel,
            )
        )
        for index, kind in enumerate(PROMOTION_CHOICES):
            ix, iy = layout.promotion_icon_origin(index)
            plan.append(GlyphOp(PieceIdentity(kind, side), ix, iy, cell))
        return plan

    strings = t()
    status = engine.game_status()
    plan.append(
        TextOp(status_caption(status, side, strings), board / 2, board + 80, 30, theme.text)
    )
    if status == GameStatus.CHECKMATE:
        plan.append(TextOp(strings.caption_replay, board / 2, board + 120, 20, theme.text))

    plan.append(RectOp(5, board + 5, board - 10, 40, theme.panel))
    icon = cell * 2 / 5
    for index, piece in enumerate(session.captures.sequence_for(Side.WHITE)):
        plan.append(GlyphOp(piece, 10 + _TRAY_STEP * index, board + 10, icon))
    for index, piece in enumerate(session.captures.sequence_for(Side.BLACK)):
        plan.append(GlyphOp(piece, board - 50 - _TRAY_STEP * index, board + 10, icon))
    return plan
