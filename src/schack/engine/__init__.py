"""Rule-engine boundary: the abstract interface and the python-chess adapter."""

from schack.engine.chess_board import ChessBoardEngine
from schack.engine.interfaces import EngineResult, RuleEngine

__all__ = [
    "ChessBoardEngine",
    "EngineResult",
    "RuleEngine",
]
