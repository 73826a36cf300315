"""MainWindow — top-level window hosting the board widget."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QMainWindow, QMenu, QStatusBar

from schack.engine.chess_board import ChessBoardEngine
from schack.engine.interfaces import RuleEngine
from schack.game.session import InteractionSession, PendingMove
from schack.ui.board_widget import BoardWidget
from schack.ui.i18n import LANGUAGES, t
from schack.ui.settings import AppSettings, apply_settings
from schack.ui.theme import THEMES


class MainWindow(QMainWindow):
    """Main application window for Schack."""

    def __init__(
        self,
        engine: RuleEngine | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        self._session = InteractionSession(engine or ChessBoardEngine())

        self._board_widget = BoardWidget(self._session, self)
        self.setCentralWidget(self._board_widget)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)

        self._build_menus()

        events = self._session.events
        events.on_move.append(self._on_move)
        events.on_promotion_requested.append(self._on_promotion_requested)
        events.on_reset.append(self._on_reset)

        apply_settings(self)
        self._status_bar.showMessage(t().status_ready)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> InteractionSession:
        return self._session

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def settings(self) -> AppSettings:
        return self._settings

    # ── Menus ────────────────────────────────────────────────────────────

    def _build_menus(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = QMenu(self)
        self._act_new_game = QAction(self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_new_game)
        self._menu_game.addSeparator()
        self._menu_game.addAction(self._act_quit)
        menu_bar.addMenu(self._menu_game)

        self._menu_settings = QMenu(self)
        self._menu_language = QMenu(self)
        self._language_actions = self._add_choices(
            self._menu_language, LANGUAGES, self._settings.language, self._on_language
        )
        self._menu_theme = QMenu(self)
        self._theme_actions = self._add_choices(
            self._menu_theme, list(THEMES), self._settings.board_theme, self._on_theme
        )
        self._act_show_legal = QAction(self)
        self._act_show_legal.setCheckable(True)
        self._act_show_legal.setChecked(self._settings.show_legal_moves)
        self._act_show_legal.toggled.connect(self._on_show_legal)
        self._menu_settings.addMenu(self._menu_language)
        self._menu_settings.addMenu(self._menu_theme)
        self._menu_settings.addAction(self._act_show_legal)
        menu_bar.addMenu(self._menu_settings)

    def _add_choices(
        self,
        menu: QMenu,
        names: list[str],
        current: str,
        handler: Callable[[str], None],
    ) -> dict[str, QAction]:
        group = QActionGroup(self)
        group.setExclusive(True)
        actions: dict[str, QAction] = {}
        for name in names:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == current)
            act.triggered.connect(lambda checked, n=name: handler(n))
            group.addAction(act)
            menu.addAction(act)
            actions[name] = act
        return actions

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._menu_language.setTitle(s.menu_language)
        self._menu_theme.setTitle(s.menu_theme)
        self._act_show_legal.setText(s.menu_show_legal)
        self._board_widget.update()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._session.new_game()
        self._board_widget.update()

    def _on_language(self, language: str) -> None:
        self._settings.language = language
        apply_settings(self)

    def _on_theme(self, name: str) -> None:
        self._settings.board_theme = name
        apply_settings(self)

    def _on_show_legal(self, visible: bool) -> None:
        self._settings.show_legal_moves = visible
        apply_settings(self)

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_move(self, from_sq: str, to_sq: str) -> None:
        self._status_bar.showMessage(
            t().status_last_move.format(from_sq=from_sq, to_sq=to_sq)
        )

    def _on_promotion_requested(self, pending: PendingMove) -> None:
        self._status_bar.showMessage(t().status_promotion)

    def _on_reset(self) -> None:
        self._status_bar.showMessage(t().status_new_game)
