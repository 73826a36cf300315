"""Shared pytest fixtures: offscreen Qt, locale reset and board clicks."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator

import pytest

from schack.core.coords import AlgebraicSquare, algebraic_to_square
from schack.game.session import InteractionSession
from schack.ui.i18n import set_language

# Widgets are only painted into pixmaps here; no display is needed.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ClickFn = Callable[[InteractionSession, AlgebraicSquare], None]


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Captions and menu texts read the global locale."""
    set_language("English")
    yield
    set_language("English")


@pytest.fixture
def click() -> ClickFn:
    """Release the pointer over the centre of a named square."""

    def _click(session: InteractionSession, name: AlgebraicSquare) -> None:
        cell = session.layout.cell_size
        sq = algebraic_to_square(name)
        session.handle_pointer_release(
            sq.column * cell + cell / 2, sq.row * cell + cell / 2
        )

    return _click
