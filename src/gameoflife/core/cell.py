"""Cell states and their text encoding."""

from dataclasses import dataclass
from enum import IntEnum

from .exceptions import InvalidCharacterError, InvalidEncodingError


class CellState(IntEnum):
    """State of a single board cell. DEAD is the empty value."""

    DEAD = 0
    ALIVE = 1


@dataclass(frozen=True)
class CellEncoding:
    """Maps cell states to single characters and back.

    Attributes:
        alive: Character representing a living cell
        dead: Character representing a dead cell
        row_separator: Character terminating each board row
    """

    alive: str = "*"
    dead: str = "_"
    row_separator: str = "\n"

    def __post_init__(self) -> None:
        for name in ("alive", "dead", "row_separator"):
            if len(getattr(self, name)) != 1:
                raise InvalidEncodingError(f"{name} must be a single character, got {getattr(self, name)!r}")
        if not self.is_valid():
            raise InvalidEncodingError(
                f"Characters must be pairwise distinct: alive={self.alive!r}, "
                f"dead={self.dead!r}, row_separator={self.row_separator!r}"
            )

    def is_valid(self) -> bool:
        """Check that the three characters are pairwise distinct."""
        return len({self.alive, self.dead, self.row_separator}) == 3

    def encode(self, cell: CellState) -> str:
        """Encode a cell state as a character."""
        if cell == CellState.ALIVE:
            return self.alive
        return self.dead

    def decode(self, encoded_cell: str) -> CellState:
        """Decode a character into a cell state.

        Raises:
            InvalidCharacterError: If the character is neither alive nor dead
        """
        if encoded_cell == self.alive:
            return CellState.ALIVE
        if encoded_cell == self.dead:
            return CellState.DEAD
        raise InvalidCharacterError(encoded_cell)
