"""User settings and how they are applied to the main window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from schack.ui.i18n import set_language
from schack.ui.theme import THEMES, BoardTheme


@dataclass
class AppSettings:
    """All user-configurable settings."""

    language: str = "English"
    board_theme: str = "Graphite"
    show_legal_moves: bool = True


def apply_settings(host: Any) -> None:
    s = host._settings

    # Language must come first so all retranslate calls use the new locale
    set_language(s.language)
    host.retranslate_ui()

    board = host._board_widget
    board.set_theme(THEMES.get(s.board_theme, BoardTheme.graphite()))
    board.set_show_legal_moves(s.show_legal_moves)
