"""Errors raised while building boards, encodings and rule sets."""


class GameOfLifeError(ValueError):
    """Base class for all errors raised by the gameoflife package."""


class InvalidCharacterError(GameOfLifeError):
    """A character in board text can not be decoded into a cell."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Unsupported character: {character!r}")


class InconsistentRowLengthError(GameOfLifeError):
    """A board row has a different length from the first row."""

    def __init__(self, row: int, length: int, expected: int) -> None:
        self.row = row
        self.length = length
        self.expected = expected
        super().__init__(
            f"Row {row} has length {length}, different from previous rows ({expected})"
        )


class ContradictoryRulesError(GameOfLifeError):
    """Rule bounds are inverted."""


class InvalidEncodingError(GameOfLifeError):
    """Alive, dead and row separator characters are not pairwise distinct."""
