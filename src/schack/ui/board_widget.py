"""BoardWidget — paints the draw plan and feeds pointer releases to the session."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QFont, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QWidget

from schack.core.enums import Side
from schack.game.session import InteractionSession
from schack.ui.render import (
    CircleOp,
    DrawOp,
    FillOp,
    GlyphOp,
    RectOp,
    TextOp,
    build_draw_plan,
)
from schack.ui.theme import BoardTheme

_GLYPH_FONT = "DejaVu Sans"
_TEXT_FONT = "Helvetica Neue"


class BoardWidget(QWidget):
    """Fixed-size widget hosting the board and the panel below it.

    Signals:
        session_changed(): Emitted after every processed pointer release.
    """

    session_changed = pyqtSignal()

    def __init__(self, session: InteractionSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._session = session
        self._theme = BoardTheme.graphite()
        self._show_legal_moves = True

        width, height = session.layout.window_size
        self.setFixedSize(width, height)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def session(self) -> InteractionSession:
        return self._session

    @property
    def theme(self) -> BoardTheme:
        return self._theme

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self.update()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move indicators."""
        self._show_legal_moves = visible
        self.update()

    def draw_plan(self) -> list[DrawOp]:
        return build_draw_plan(
            self._session, self._theme, show_legal_moves=self._show_legal_moves
        )

    # ── Qt events ────────────────────────────────────────────────────────

    def mouseReleaseEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mouseReleaseEvent(event)

        pos = event.position()
        self._session.handle_pointer_release(pos.x(), pos.y())
        self.session_changed.emit()
        self.update()

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        for op in self.draw_plan():
            self._paint_op(painter, op)
        painter.end()

    # ── Painting ─────────────────────────────────────────────────────────

    def _paint_op(self, painter: QPainter, op: DrawOp) -> None:
        if isinstance(op, FillOp):
            painter.fillRect(self.rect(), op.color)
        elif isinstance(op, RectOp):
            painter.fillRect(QRectF(op.x, op.y, op.width, op.height), op.color)
        elif isinstance(op, CircleOp):
            painter.setPen(QPen(Qt.PenStyle.NoPen))
            painter.setBrush(QBrush(op.color))
            painter.drawEllipse(QPointF(op.cx, op.cy), op.radius, op.radius)
        elif isinstance(op, GlyphOp):
            font = QFont(_GLYPH_FONT)
            font.setPixelSize(max(1, int(op.size * 0.8)))
            painter.setFont(font)
            painter.setPen(
                self._theme.piece_white
                if op.piece.side == Side.WHITE
                else self._theme.piece_black
            )
            painter.drawText(
                QRectF(op.x, op.y, op.size, op.size),
                Qt.AlignmentFlag.AlignCenter,
                op.piece.glyph,
            )
        elif isinstance(op, TextOp):
            font = QFont(_TEXT_FONT)
            font.setPixelSize(op.font_size)
            painter.setFont(font)
            painter.setPen(op.color)
            box = QRectF(0, op.cy - op.font_size, self.width(), 2 * op.font_size)
            box.moveCenter(QPointF(op.cx, op.cy))
            painter.drawText(box, Qt.AlignmentFlag.AlignCenter, op.text)
