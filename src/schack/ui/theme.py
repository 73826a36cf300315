"""Visual theme constants for Schack."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and the panel below it."""

    light_square: QColor
    dark_square: QColor
    highlight_to: QColor  # legal move targets
    background_white: QColor  # window background while White moves
    background_black: QColor  # window background while Black moves
    panel: QColor  # capture tray and promotion overlay
    text: QColor
    piece_white: QColor
    piece_black: QColor

    @classmethod
    def graphite(cls) -> BoardTheme:
        return cls(
            light_square=QColor(70, 70, 70),
            dark_square=QColor(30, 30, 30),
            highlight_to=QColor(153, 255, 153, 128),  # translucent green
            background_white=QColor(247, 77, 0),  # orange
            background_black=QColor(94, 79, 135),  # purple
            panel=QColor(51, 51, 51),
            text=QColor(0, 0, 0),
            piece_white=QColor(250, 250, 250),
            piece_black=QColor(200, 200, 200),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_to=QColor(0, 0, 0, 40),
            background_white=QColor(224, 224, 224),
            background_black=QColor(96, 96, 96),
            panel=QColor(43, 43, 43),
            text=QColor(20, 20, 20),
            piece_white=QColor(255, 255, 255),
            piece_black=QColor(0, 0, 0),
        )


THEMES: dict[str, BoardTheme] = {
    "Graphite": BoardTheme.graphite(),
    "Classic": BoardTheme.classic(),
}
