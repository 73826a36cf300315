"""Tests for the coordinate helpers."""

import pytest

from schack.core.coords import (
    ALL_SQUARES,
    EnginePosition,
    Square,
    algebraic_to_square,
    engine_position_to_square,
    is_on_board,
    square_to_algebraic,
    square_to_engine_position,
)


class TestAlgebraic:
    @pytest.mark.parametrize(
        ("square", "name"),
        [
            (Square(0, 0), "a8"),
            (Square(7, 0), "h8"),
            (Square(0, 7), "a1"),
            (Square(7, 7), "h1"),
            (Square(4, 6), "e2"),
            (Square(4, 4), "e4"),
        ],
    )
    def test_known_squares(self, square: Square, name: str) -> None:
        assert square_to_algebraic(square) == name
        assert algebraic_to_square(name) == square

    def test_round_trip_all_squares(self) -> None:
        for sq in ALL_SQUARES:
            assert algebraic_to_square(square_to_algebraic(sq)) == sq

    def test_names_are_unique(self) -> None:
        names = {square_to_algebraic(sq) for sq in ALL_SQUARES}
        assert len(names) == 64


class TestEnginePosition:
    def test_top_left_is_a8(self) -> None:
        assert square_to_engine_position(Square(0, 0)) == EnginePosition(1, 8)

    def test_bottom_right_is_h1(self) -> None:
        assert square_to_engine_position(Square(7, 7)) == EnginePosition(8, 1)

    def test_bijective(self) -> None:
        positions = {square_to_engine_position(sq) for sq in ALL_SQUARES}
        assert len(positions) == 64
        for sq in ALL_SQUARES:
            assert engine_position_to_square(square_to_engine_position(sq)) == sq

    def test_fields(self) -> None:
        pos = square_to_engine_position(Square(4, 6))
        assert pos.file == 5
        assert pos.rank == 2


class TestBoardBounds:
    def test_all_squares_row_major(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert ALL_SQUARES[0] == Square(0, 0)
        assert ALL_SQUARES[1] == Square(1, 0)
        assert ALL_SQUARES[-1] == Square(7, 7)

    @pytest.mark.parametrize(
        ("column", "row", "expected"),
        [(0, 0, True), (7, 7, True), (8, 0, False), (0, -1, False)],
    )
    def test_is_on_board(self, column: int, row: int, expected: bool) -> None:
        assert is_on_board(column, row) is expected
