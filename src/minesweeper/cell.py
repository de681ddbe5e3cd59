"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

HIDDEN_SYMBOL = "-"
MINE_SYMBOL = "*"
BLANK_SYMBOL = " "


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
            Unused when the cell is a mine.
        state: Current visual state (hidden or revealed).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed by this call, False if it was
            already revealed.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_blank(self) -> bool:
        """Check if cell is a safe cell with no adjacent mines."""
        return not self.is_mine and self.adjacent_mines == 0

    def symbol(self, show_all: bool = False) -> str:
        """
        Single-character rendering of the cell.

        Args:
            show_all: Render the cell's content even if it is hidden.

        Returns:
            '-' for hidden, '*' for a mine, ' ' for a blank cell,
            otherwise the adjacent mine digit.
        """
        if self.is_hidden and not show_all:
            return HIDDEN_SYMBOL
        if self.is_mine:
            return MINE_SYMBOL
        if self.adjacent_mines == 0:
            return BLANK_SYMBOL
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for ML agent.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines
