"""Core Game of Life logic."""

from .board import Board, Rectangle
from .cell import CellEncoding, CellState
from .engine import Engine
from .exceptions import (
    ContradictoryRulesError,
    GameOfLifeError,
    InconsistentRowLengthError,
    InvalidCharacterError,
    InvalidEncodingError,
)
from .patterns import Pattern, PatternLibrary
from .rules import GameRules

__all__ = [
    "Board",
    "Rectangle",
    "CellEncoding",
    "CellState",
    "Engine",
    "GameRules",
    "Pattern",
    "PatternLibrary",
    "GameOfLifeError",
    "InvalidCharacterError",
    "InconsistentRowLengthError",
    "ContradictoryRulesError",
    "InvalidEncodingError",
]
