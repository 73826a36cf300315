"""CaptureLedger — pieces removed from play, per side."""

from __future__ import annotations

from schack.core.enums import Side
from schack.core.piece import PieceIdentity


class CaptureLedger:
    """Ordered log of captured pieces keyed by the side that lost them."""

    __slots__ = ("_captured",)

    def __init__(self) -> None:
        self._captured: dict[Side, list[PieceIdentity]] = {
            Side.WHITE: [],
            Side.BLACK: [],
        }

    def record_capture(self, piece: PieceIdentity) -> None:
        """Append *piece* to the sequence of its own side."""
        self._captured[piece.side].append(piece)

    def clear(self) -> None:
        for pieces in self._captured.values():
            pieces.clear()

    def sequence_for(self, side: Side) -> tuple[PieceIdentity, ...]:
        """Pieces *side* has lost, in capture order."""
        return tuple(self._captured[side])

    def __len__(self) -> int:
        return sum(len(pieces) for pieces in self._captured.values())

    def __repr__(self) -> str:
        white = len(self._captured[Side.WHITE])
        black = len(self._captured[Side.BLACK])
        return f"CaptureLedger(white={white}, black={black})"
