"""Basic tests for the gameoflife package."""

from gameoflife import Board, CellEncoding, CellState, Engine, GameRules, PatternLibrary


def test_board_creation():
    """Test basic board creation and cell operations."""
    board = Board(10, 10)
    assert board.length == 10
    assert board.height == 10
    assert board.get_cell(0, 0) == CellState.DEAD

    board.set_cell(5, 5, CellState.ALIVE)
    assert board.get_cell(5, 5) == CellState.ALIVE
    assert board.population == 1


def test_engine_creation():
    """Test basic engine creation."""
    engine = Engine(Board(5, 5))
    assert engine.population == 0
    assert engine.generation == 0


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    encoding = CellEncoding()
    engine = Engine(Board.from_string("_*_\n_*_\n_*_\n", encoding), GameRules())

    engine.next()
    assert engine.population == 3
    assert engine.board.to_string(encoding) == "***\n"

    engine.next()
    assert engine.population == 3
    assert engine.board.to_string(encoding) == "*\n*\n*\n"
