"""Board data structure for the Game of Life."""

import io
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .cell import CellEncoding, CellState
from .exceptions import InconsistentRowLengthError

CellDecoder = Callable[[str], CellState]
CellEncoder = Callable[[CellState], str]


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle, half-open on the right and bottom."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def length(self) -> int:
        """Number of columns covered (0 if degenerate)."""
        return self.right - self.left if self.right > self.left else 0

    @property
    def height(self) -> int:
        """Number of rows covered (0 if degenerate)."""
        return self.bottom - self.top if self.bottom > self.top else 0


class Board:
    """A dense rectangular grid of cells.

    Cells are stored row-major in a flat numpy buffer indexed by
    ``x + y * length``. Alongside the cells the board keeps the number of
    living cells in every row and every column. Those counters are updated
    on each ``set_cell`` so the bounding rectangle of living cells can be
    found without scanning the whole grid.

    Coordinates outside the board read as ``EMPTY_CELL``.
    """

    EMPTY_CELL = CellState.DEAD

    # Moore neighborhood, center excluded
    _NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

    def __init__(self, length: int = 0, height: int = 0) -> None:
        """Initialize a board with all cells dead.

        Args:
            length: Number of columns
            height: Number of rows
        """
        self.reset(length, height)

    def reset(self, length: int = 0, height: int = 0) -> None:
        """Resize the board to length x height and kill every cell.

        Raises:
            ValueError: If a size is negative or exactly one of them is zero
        """
        if length < 0 or height < 0:
            raise ValueError(f"Board size must be non-negative, got {length}x{height}")
        if (length == 0) != (height == 0):
            raise ValueError(f"Board size {length}x{height} is degenerate")

        self._cells = np.full(length * height, self.EMPTY_CELL, dtype=np.int8)
        self._occupied_count_by_row = np.zeros(height, dtype=np.int64)
        self._occupied_count_by_col = np.zeros(length, dtype=np.int64)

    @property
    def length(self) -> int:
        """Number of columns."""
        return len(self._occupied_count_by_col)

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._occupied_count_by_row)

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (length, height)."""
        return (self.length, self.height)

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(self._occupied_count_by_row.sum())

    @property
    def occupied_count_by_row(self) -> np.ndarray:
        """Copy of the living cell count of every row."""
        return self._occupied_count_by_row.copy()

    @property
    def occupied_count_by_col(self) -> np.ndarray:
        """Copy of the living cell count of every column."""
        return self._occupied_count_by_col.copy()

    def get_cell(self, x: int, y: int) -> CellState:
        """Get the cell at column x, row y.

        Out of range coordinates return ``EMPTY_CELL`` instead of raising.
        """
        if 0 <= x < self.length and 0 <= y < self.height:
            return CellState(int(self._cells[x + y * self.length]))
        return self.EMPTY_CELL

    def set_cell(self, x: int, y: int, state: CellState) -> None:
        """Set the cell at column x, row y.

        Coordinates are not checked; they must lie within the board.
        """
        index = x + y * self.length
        was_empty = self._cells[index] == self.EMPTY_CELL
        is_empty = state == self.EMPTY_CELL
        if was_empty and not is_empty:
            self._occupied_count_by_col[x] += 1
            self._occupied_count_by_row[y] += 1
        elif not was_empty and is_empty:
            self._occupied_count_by_col[x] -= 1
            self._occupied_count_by_row[y] -= 1
        self._cells[index] = state

    def get_neighbors_count(self, x: int, y: int, target_state: CellState) -> int:
        """Count the cells around (x, y) equal to target_state.

        Args:
            x: Column coordinate, may be outside the board
            y: Row coordinate, may be outside the board
            target_state: State to count

        Returns:
            Number of matching neighbors (0-8)
        """
        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                if self.get_cell(x + dx, y + dy) == target_state:
                    count += 1
        return count

    def get_alive_neighbors_count(self, x: int, y: int) -> int:
        """Count living cells around (x, y)."""
        return self.get_neighbors_count(x, y, CellState.ALIVE)

    def get_occupied_cells_bounding_rectangle(self) -> Rectangle:
        """Get the smallest rectangle containing every living cell.

        Returns:
            Rectangle with exclusive right/bottom, or Rectangle(0, 0, 0, 0)
            when no cell is alive
        """
        cols = np.flatnonzero(self._occupied_count_by_col)
        rows = np.flatnonzero(self._occupied_count_by_row)

        left, right = (int(cols[0]), int(cols[-1]) + 1) if cols.size else (0, 0)
        top, bottom = (int(rows[0]), int(rows[-1]) + 1) if rows.size else (0, 0)

        return Rectangle(left, top, right, bottom)

    def to_array(self, margin: int = 0) -> np.ndarray:
        """Get the cells as a 2D (height, length) array padded with dead cells.

        Args:
            margin: Number of dead cells added on every side
        """
        array = np.full(
            (self.height + 2 * margin, self.length + 2 * margin), self.EMPTY_CELL, dtype=np.int8
        )
        array[margin : margin + self.height, margin : margin + self.length] = self._cells.reshape(
            self.height, self.length
        )
        return array

    def count_all_neighbors(self, margin: int = 0) -> np.ndarray:
        """Count living neighbors for every cell using a PyTorch convolution.

        Args:
            margin: Number of cells outside the board to include on every side

        Returns:
            Array of shape (height + 2 * margin, length + 2 * margin) where
            entry [j, i] is the living neighbor count of cell (i - margin, j - margin)
        """
        padded = self.to_array(margin) == CellState.ALIVE
        if not padded.any():
            return np.zeros(padded.shape, dtype=np.int64)

        torch_input = torch.from_numpy(padded.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(torch_input, self._NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int64)

    def load(self, stream: TextIO, cell_decoder: CellDecoder, row_separator: str = "\n") -> None:
        """Replace the board content with cells read from a text stream.

        Every character other than row_separator is passed to cell_decoder.
        The last row may omit its separator. Input without any cell gives
        an empty board. If parsing fails the board is left empty.

        Args:
            stream: Readable text stream
            cell_decoder: Callable turning a character into a CellState
            row_separator: Character terminating each row

        Raises:
            InvalidCharacterError: If cell_decoder rejects a character
            InconsistentRowLengthError: If a row differs in length from the first one
        """
        self.reset()

        rows = []
        row = []
        row_length: Optional[int] = None
        for c in stream.read():
            if c == row_separator:
                if row_length is not None and len(row) != row_length:
                    raise InconsistentRowLengthError(len(rows), len(row), row_length)
                row_length = len(row)
                rows.append(row)
                row = []
            else:
                row.append(cell_decoder(c))

        if row:
            if row_length is not None and len(row) != row_length:
                raise InconsistentRowLengthError(len(rows), len(row), row_length)
            rows.append(row)

        # Rows without cells collapse to an empty board
        if not rows or not rows[0]:
            return

        cells = np.array(rows, dtype=np.int8)
        occupied = cells != self.EMPTY_CELL
        self._cells = cells.ravel()
        self._occupied_count_by_row = occupied.sum(axis=1, dtype=np.int64)
        self._occupied_count_by_col = occupied.sum(axis=0, dtype=np.int64)

    def save(
        self,
        stream: TextIO,
        bounding_rect: Rectangle,
        cell_encoder: CellEncoder,
        row_separator: str = "\n",
    ) -> None:
        """Write the cells inside bounding_rect to a text stream.

        One separator follows every row, the last one included. The
        rectangle is not checked against the board size.
        """
        for y in range(bounding_rect.top, bounding_rect.bottom):
            row = "".join(cell_encoder(self.get_cell(x, y)) for x in range(bounding_rect.left, bounding_rect.right))
            stream.write(row + row_separator)

    @classmethod
    def from_string(cls, text: str, encoding: Optional[CellEncoding] = None) -> "Board":
        """Create a board from its text representation."""
        encoding = encoding or CellEncoding()
        board = cls()
        board.load(io.StringIO(text, newline=""), encoding.decode, encoding.row_separator)
        return board

    def to_string(self, encoding: Optional[CellEncoding] = None, bounding_rect: Optional[Rectangle] = None) -> str:
        """Encode the board as text.

        Args:
            encoding: Cell encoding (defaults to '*', '_' and newline)
            bounding_rect: Area to encode (defaults to the living cells' bounding rectangle)
        """
        encoding = encoding or CellEncoding()
        if bounding_rect is None:
            bounding_rect = self.get_occupied_cells_bounding_rectangle()
        out = io.StringIO(newline="")
        self.save(out, bounding_rect, encoding.encode, encoding.row_separator)
        return out.getvalue()

    def __eq__(self, other: object) -> bool:
        """Check if two boards have the same size and cells."""
        if not isinstance(other, Board):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation of the whole board, '*' alive and '_' dead."""
        return self.to_string(bounding_rect=Rectangle(0, 0, self.length, self.height))
