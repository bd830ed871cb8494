"""Generation stepping for Conway's Game of Life."""

from typing import Dict, Optional

import numpy as np

from .board import Board
from .cell import CellState
from .rules import GameRules


class Engine:
    """Runs generations of the Game of Life on a self-resizing board.

    Every generation is computed into a board sized to the living cells'
    bounding rectangle plus one cell of margin on each side, which is as
    far as life can spread in a single step. Two boards are kept and the
    engine flips between them instead of allocating a new one each step.
    """

    def __init__(self, board: Board, rules: Optional[GameRules] = None) -> None:
        """Initialize the engine.

        Args:
            board: Initial state. The engine takes ownership of it.
            rules: Rules to apply (defaults to Conway's rules)
        """
        self._boards = [board, Board()]
        self._current_board_idx = 0
        self._rules = rules or GameRules()
        self._generation = 0

    @property
    def board(self) -> Board:
        """Board holding the current generation.

        Its size is only guaranteed to fit all living cells.
        """
        return self._boards[self._current_board_idx]

    @property
    def rules(self) -> GameRules:
        """Rules applied on every step."""
        return self._rules

    @property
    def generation(self) -> int:
        """Number of generations computed so far."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.board.population

    def next(self) -> None:
        """Advance the game by one generation.

        A board without living cells never changes, so it is left as is
        and only the generation counter moves.
        """
        current_board = self.board
        rect = current_board.get_occupied_cells_bounding_rectangle()
        if rect.length == 0 or rect.height == 0:
            self._generation += 1
            return

        next_board_idx = 1 - self._current_board_idx
        next_board = self._boards[next_board_idx]
        next_board.reset(rect.length + 2, rect.height + 2)

        # Rows are evaluated up to next_board.height inclusive. Padding the
        # old board by 2 keeps that extra row inside the arrays.
        margin = 2
        rows = next_board.height + 1
        top = rect.top - 1 + margin
        left = rect.left - 1 + margin

        cells = current_board.to_array(margin)[top : top + rows, left : left + next_board.length]
        neighbors = current_board.count_all_neighbors(margin)[top : top + rows, left : left + next_board.length]

        alive = cells == CellState.ALIVE
        survive = alive & ~self._rules.cell_should_die(neighbors)
        spawn = ~alive & self._rules.cell_should_spawn(neighbors)

        for new_y, new_x in zip(*np.nonzero(survive | spawn)):
            # the extra row has no cell to write to
            if new_y < next_board.height:
                next_board.set_cell(int(new_x), int(new_y), CellState.ALIVE)

        self._current_board_idx = next_board_idx
        self._generation += 1

    def get_statistics(self) -> Dict:
        """Get statistics about the current generation.

        Returns:
            Dictionary with generation, population, board size and bounding box
        """
        rect = self.board.get_occupied_cells_bounding_rectangle()
        return {
            "generation": self._generation,
            "population": self.population,
            "board_size": self.board.shape,
            "bounding_rectangle": (rect.left, rect.top, rect.right, rect.bottom),
            "bounding_rectangle_size": (rect.length, rect.height),
        }
