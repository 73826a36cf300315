"""Interaction layer — screen layout and the click-to-move state machine.

Quick start::

    from schack.engine import ChessBoardEngine
    from schack.game import InteractionSession

    session = InteractionSession(ChessBoardEngine())
    session.handle_pointer_release(405, 585)  # e2
    session.handle_pointer_release(405, 405)  # e4
"""

from schack.game.layout import BoardLayout
from schack.game.session import (
    InteractionSession,
    InteractionState,
    PendingMove,
    SessionEvents,
)

__all__ = [
    "BoardLayout",
    "InteractionSession",
    "InteractionState",
    "PendingMove",
    "SessionEvents",
]
