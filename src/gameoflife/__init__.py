"""Conway's Game of Life on a board that grows and shrinks with its living cells."""

__version__ = "0.1.0"

from .core.board import Board, Rectangle
from .core.cell import CellEncoding, CellState
from .core.engine import Engine
from .core.rules import GameRules
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Board", "Rectangle", "CellEncoding", "CellState", "Engine", "GameRules", "Pattern", "PatternLibrary"]
