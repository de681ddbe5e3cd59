"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 10x10 board with 10 mines."""
    return Board(seed=1234)


@pytest.fixture
def small_board() -> Board:
    """Create a small 3x3 board with 1 mine for testing."""
    return Board(BoardConfig(3, 3, 1), seed=7)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def rigged_board() -> Callable[..., Board]:
    """
    Factory for boards whose first reveal places mines at fixed positions.

    Usage: rigged_board(rows, cols, [(r, c), ...])
    """
    def make(
        rows: int, cols: int, mines: Iterable[Tuple[int, int]]
    ) -> Board:
        positions = list(mines)
        board = Board(BoardConfig(rows, cols, len(positions)))
        board._reject_sample_mine_positions = lambda exclude: positions
        board._sample_mine_positions = lambda exclude: positions
        return board

    return make


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Console Fixtures
# ============================================================================

@pytest.fixture
def scripted_io() -> Callable[..., Tuple[Callable[[], str], list]]:
    """
    Factory returning (input_fn, output) for scripting a console session.

    input_fn yields the given answers in order; output collects printed text.
    """
    def make(*answers: str) -> Tuple[Callable[[], str], list]:
        remaining = iter(answers)
        output: list = []
        return (lambda: next(remaining)), output

    return make
