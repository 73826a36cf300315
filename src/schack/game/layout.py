"""BoardLayout — screen geometry and pointer classification."""

from __future__ import annotations

import math
from dataclasses import dataclass

from schack.core.coords import Square, is_on_board
from schack.core.enums import PROMOTION_CHOICES, PieceKind


@dataclass(frozen=True)
class BoardLayout:
    """Pixel geometry of the board and the panel below it.

    The panel holds the status caption and capture tray, or the promotion
    choice row while a promotion is pending.
    """

    cell_size: int = 90
    panel_height: int = 150
    promotion_top: float = 740.0
    promotion_bottom: float = 850.0
    # Left edge of the first band followed by the right edge of every band.
    band_edges: tuple[float, ...] = (20.0, 200.0, 380.0, 560.0, 740.0)

    @property
    def board_size(self) -> int:
        return 8 * self.cell_size

    @property
    def window_size(self) -> tuple[int, int]:
        return self.board_size, self.board_size + self.panel_height

    def is_board_click(self, y: float) -> bool:
        return y < self.board_size

    def square_at(self, x: float, y: float) -> Square | None:
        """Pixel position → GUI cell, or ``None`` outside the grid."""
        column = math.floor(x / self.cell_size)
        row = math.floor(y / self.cell_size)
        if not is_on_board(column, row):
            return None
        return Square(column, row)

    def in_promotion_row(self, y: float) -> bool:
        return self.promotion_top <= y <= self.promotion_bottom

    def promotion_choice_at(self, x: float, y: float) -> PieceKind | None:
        """Promotion band under the pointer; the first band includes its left edge."""
        if not self.in_promotion_row(y):
            return None
        edges = self.band_edges
        if edges[0] <= x <= edges[1]:
            return PROMOTION_CHOICES[0]
        for index in range(1, len(PROMOTION_CHOICES)):
            if edges[index] < x <= edges[index + 1]:
                return PROMOTION_CHOICES[index]
        return None

    def promotion_icon_origin(self, index: int) -> tuple[float, float]:
        """Top-left corner of the icon drawn inside band *index*."""
        return self.band_edges[index] + 30.0, self.promotion_top + 10.0
