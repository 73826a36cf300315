"""Internationalisation strings for the Schack UI.

Usage::

    from schack.ui.i18n import t, set_language

    set_language("Swedish")
    print(t().status_check)      # "Schack!!!"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_quit: str
    menu_settings: str
    menu_language: str
    menu_theme: str
    menu_show_legal: str

    status_ready: str
    status_new_game: str
    status_last_move: str  # "Last move: {from_sq}-{to_sq}"
    status_promotion: str

    # ── Board captions ───────────────────────────────────────────────────
    side_white: str
    side_black: str
    caption_turn: str  # "{side}'s turn!"
    caption_check: str
    caption_mate_white: str  # White has been mated
    caption_mate_black: str  # Black has been mated
    caption_replay: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Schack",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_language="&Language",
    menu_theme="Board &Theme",
    menu_show_legal="Show &Legal Moves",
    status_ready="Ready",
    status_new_game="New game started.",
    status_last_move="Last move: {from_sq}-{to_sq}",
    status_promotion="Choose a piece to promote to.",
    side_white="Rustacean",
    side_black="Haskeller",
    caption_turn="{side}'s turn!",
    caption_check="It's Check!!!",
    caption_mate_white="Rust lost? PANIC!",
    caption_mate_black="Farewell Haskell!",
    caption_replay="Click in this area to replay!",
)

_SV = Strings(
    window_title="Schack",
    menu_game="&Parti",
    menu_new_game="&Nytt parti",
    menu_quit="&Avsluta",
    menu_settings="&Inställningar",
    menu_language="&Språk",
    menu_theme="Bräd&tema",
    menu_show_legal="Visa &lagliga drag",
    status_ready="Redo",
    status_new_game="Nytt parti startat.",
    status_last_move="Senaste drag: {from_sq}-{to_sq}",
    status_promotion="Välj pjäs att förvandla bonden till.",
    side_white="Rustacean",
    side_black="Haskeller",
    caption_turn="{side}s tur!",
    caption_check="Schack!!!",
    caption_mate_white="Förlorade Rust? PANIK!",
    caption_mate_black="Farväl Haskell!",
    caption_replay="Klicka här för att spela igen!",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Swedish": _SV,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
