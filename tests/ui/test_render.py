"""Tests for the render adapter draw plan."""

from __future__ import annotations

from collections.abc import Callable

from schack.core.enums import PROMOTION_CHOICES, GameStatus, PieceKind, Side
from schack.core.piece import PieceIdentity
from schack.engine.chess_board import ChessBoardEngine
from schack.game.session import InteractionSession
from schack.ui.i18n import set_language, t
from schack.ui.render import (
    CircleOp,
    FillOp,
    GlyphOp,
    RectOp,
    TextOp,
    build_draw_plan,
    status_caption,
)
from schack.ui.theme import BoardTheme

ClickFn = Callable[[InteractionSession, str], None]

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


def _ops(plan: list, kind: type) -> list:
    return [op for op in plan if isinstance(op, kind)]


class TestBoard:
    def test_background_follows_side_to_move(self, click: ClickFn) -> None:
        theme = BoardTheme.graphite()
        session = InteractionSession(ChessBoardEngine())
        assert build_draw_plan(session, theme)[0] == FillOp(theme.background_white)

        click(session, "e2")
        click(session, "e4")
        assert build_draw_plan(session, theme)[0] == FillOp(theme.background_black)

    def test_checkerboard_tiles(self) -> None:
        theme = BoardTheme.graphite()
        plan = build_draw_plan(InteractionSession(ChessBoardEngine()), theme)
        tiles = [op for op in _ops(plan, RectOp) if op.width == 90 and op.height == 90]
        assert len(tiles) == 64
        assert tiles[0] == RectOp(0, 0, 90, 90, theme.light_square)
        assert tiles[1] == RectOp(90, 0, 90, 90, theme.dark_square)
        assert tiles[8] == RectOp(0, 90, 90, 90, theme.dark_square)

    def test_pieces_from_engine(self) -> None:
        plan = build_draw_plan(InteractionSession(ChessBoardEngine()))
        glyphs = _ops(plan, GlyphOp)
        assert len(glyphs) == 32
        assert GlyphOp(PieceIdentity(PieceKind.ROOK, Side.BLACK), 0, 0, 90) in glyphs
        assert GlyphOp(PieceIdentity(PieceKind.KING, Side.WHITE), 360, 630, 90) in glyphs

    def test_legal_destinations_get_indicators(self, click: ClickFn) -> None:
        session = InteractionSession(ChessBoardEngine())
        click(session, "e2")
        circles = _ops(build_draw_plan(session), CircleOp)
        assert {(c.cx, c.cy) for c in circles} == {(405, 495), (405, 405)}
        assert all(c.radius == 25 for c in circles)

    def test_indicators_can_be_hidden(self, click: ClickFn) -> None:
        session = InteractionSession(ChessBoardEngine())
        click(session, "e2")
        assert _ops(build_draw_plan(session, show_legal_moves=False), CircleOp) == []


class TestPanel:
    def test_status_caption_in_progress(self) -> None:
        plan = build_draw_plan(InteractionSession(ChessBoardEngine()))
        texts = [op.text for op in _ops(plan, TextOp)]
        assert texts == ["Rustacean's turn!"]

    def test_checkmate_shows_replay_hint(self) -> None:
        plan = build_draw_plan(InteractionSession(ChessBoardEngine(FOOLS_MATE)))
        texts = [op.text for op in _ops(plan, TextOp)]
        assert texts == ["Rust lost? PANIC!", "Click in this area to replay!"]

    def test_capture_tray(self, click: ClickFn) -> None:
        session = InteractionSession(ChessBoardEngine())
        for name in ("e2", "e4", "d7", "d5", "e4", "d5"):
            click(session, name)
        plan = build_draw_plan(session)
        tray = [op for op in _ops(plan, GlyphOp) if op.y == 730]
        assert tray == [GlyphOp(PieceIdentity(PieceKind.PAWN, Side.BLACK), 670, 730, 36)]

    def test_promotion_overlay(self, click: ClickFn) -> None:
        session = InteractionSession(ChessBoardEngine("7k/P7/8/8/8/8/8/K7 w - - 0 1"))
        click(session, "a7")
        click(session, "a8")
        plan = build_draw_plan(session)

        assert _ops(plan, TextOp) == []
        icons = [op for op in _ops(plan, GlyphOp) if op.y == 750]
        assert [op.piece.kind for op in icons] == list(PROMOTION_CHOICES)
        assert all(op.piece.side == Side.WHITE for op in icons)
        assert [op.x for op in icons] == [50, 230, 410, 590]
        assert RectOp(20, 740, 680, 110, BoardTheme.graphite().panel) in plan


class TestStatusCaption:
    def test_turn_names(self) -> None:
        s = t()
        assert status_caption(GameStatus.IN_PROGRESS, Side.BLACK, s) == "Haskeller's turn!"

    def test_check(self) -> None:
        assert status_caption(GameStatus.CHECK, Side.WHITE, t()) == "It's Check!!!"

    def test_checkmate_names_the_loser(self) -> None:
        s = t()
        assert status_caption(GameStatus.CHECKMATE, Side.BLACK, s) == "Farewell Haskell!"

    def test_swedish(self) -> None:
        set_language("Swedish")
        assert status_caption(GameStatus.CHECK, Side.WHITE, t()) == "Schack!!!"
