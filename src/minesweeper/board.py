"""
Board module for Minesweeper game.

Implements the game board with deferred mine placement, cell revealing,
and game state management.
"""
import logging
import random
import warnings
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Deque, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

NEGATIVE_COORDINATE_MESSAGE = (
    "Cannot have a negative coordinate! "
    "Row and Col must be greater or equal to 0!"
)


class ConfigurationWarning(UserWarning):
    """Issued when a requested board configuration had to be adjusted."""


class GameState(Enum):
    """Lifecycle of a single board."""

    FRESH = auto()
    MINES_PLACED = auto()
    WON = auto()
    LOST = auto()


class Outcome(Enum):
    """Result of a single reveal request."""

    CONTINUE = auto()
    WIN = auto()
    LOSS = auto()
    INVALID = auto()


@dataclass(frozen=True)
class RevealResult:
    """
    What a reveal request produced.

    Attributes:
        outcome: Continue, win, loss, or invalid coordinates.
        messages: Human-readable validation messages, in the order the
            checks failed. Empty unless the outcome is INVALID.
    """

    outcome: Outcome
    messages: Tuple[str, ...] = ()

    @property
    def is_terminal(self) -> bool:
        """True if the game ended with this reveal."""
        return self.outcome in (Outcome.WIN, Outcome.LOSS)

    @property
    def is_valid(self) -> bool:
        return self.outcome != Outcome.INVALID


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    A mine count that does not leave at least one safe cell is clamped
    to ``rows * cols - 1`` and a ConfigurationWarning is issued.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place (after clamping).
        requested_mines: Mine count as originally requested.
    """

    rows: int = 10
    cols: int = 10
    num_mines: int = 10
    requested_mines: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.requested_mines = self.num_mines
        self._validate()
        self._clamp_mines()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")

    def _clamp_mines(self) -> None:
        """Reduce the mine count so at least one cell stays safe."""
        if self.num_mines < self.total_cells:
            return
        self.num_mines = self.max_mines
        message = (
            "Too many mines. The number of mines must be less than the "
            f"total cells. Setting mines to maximum allowed: {self.num_mines}"
        )
        logger.debug(
            "Clamped mines from %d to %d", self.requested_mines, self.num_mines
        )
        warnings.warn(message, ConfigurationWarning, stacklevel=4)

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def max_mines(self) -> int:
        """Largest mine count that still leaves one safe cell."""
        return self.total_cells - 1

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines

    @property
    def was_clamped(self) -> bool:
        """Check if the requested mine count had to be reduced."""
        return self.requested_mines != self.num_mines


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are placed on the first reveal so the first cell is always
    safe. A board moves FRESH -> MINES_PLACED -> WON/LOST and is never
    reset; start a new game with a new Board.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    seed: Optional[int] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.FRESH
    _cells_revealed: int = 0
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._rng = random.Random(self.seed)
        self._init_grid()

    @classmethod
    def create(
        cls,
        rows: int,
        cols: int,
        num_mines: int,
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Create an empty board with no mines placed.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            num_mines: Requested mine count, clamped if too large.
            seed: Optional seed for reproducible mine layouts.

        Returns:
            A FRESH board with every cell hidden.
        """
        return cls(BoardConfig(rows, cols, num_mines), seed=seed)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def place_mines(self, safe_row: int, safe_col: int) -> None:
        """
        Place mines randomly, keeping one cell mine-free.

        Called once per board, normally by the first reveal.

        Args:
            safe_row: Row of the cell that must not hold a mine.
            safe_col: Column of the cell that must not hold a mine.

        Raises:
            RuntimeError: If mines were already placed.
            ValueError: If the safe cell is outside the board.
        """
        if self._game_state != GameState.FRESH:
            raise RuntimeError("Mines have already been placed on this board")
        if not self._is_valid_position(safe_row, safe_col):
            raise ValueError(
                f"Safe cell ({safe_row}, {safe_col}) is outside the board"
            )

        exclude = (safe_row, safe_col)
        if self._is_dense():
            positions = self._sample_mine_positions(exclude)
        else:
            positions = self._reject_sample_mine_positions(exclude)

        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()
        self._game_state = GameState.MINES_PLACED
        logger.debug(
            "Placed %d mines on %dx%d board, safe cell %s",
            len(positions), self.config.rows, self.config.cols, exclude,
        )

    def _is_dense(self) -> bool:
        """Mines fill more than half of the cells available to them."""
        available = self.config.total_cells - 1
        return self.config.num_mines * 2 > available

    def _reject_sample_mine_positions(self, exclude: Position) -> List[Position]:
        """Draw random cells until enough distinct non-excluded ones are found."""
        mines: Set[Position] = set()
        while len(mines) < self.config.num_mines:
            position = (
                self._rng.randrange(self.config.rows),
                self._rng.randrange(self.config.cols),
            )
            if position == exclude or position in mines:
                continue
            mines.add(position)
        return list(mines)

    def _sample_mine_positions(self, exclude: Position) -> List[Position]:
        """Pick mine cells without replacement from every non-excluded cell."""
        logger.debug("Dense board, sampling mines without replacement")
        positions = [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if (row, col) != exclude
        ]
        return self._rng.sample(positions, self.config.num_mines)

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _validate_position(self, row: int, col: int) -> List[str]:
        """Describe every way a coordinate falls outside the board."""
        messages = []
        if row < 0 or col < 0:
            messages.append(NEGATIVE_COORDINATE_MESSAGE)
        if row >= self.config.rows:
            messages.append(
                f"Row cannot be bigger than {self.config.rows - 1}!"
            )
        if col >= self.config.cols:
            messages.append(
                f"Col cannot be bigger than {self.config.cols - 1}!"
            )
        return messages

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        On the first reveal, places mines avoiding this cell. A blank
        cell floods outward through connected blank cells and stops at
        the ring of numbered cells around them. A mine loses the game.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealResult with CONTINUE, WIN, LOSS, or INVALID plus the
            validation messages.
        """
        messages = self._validate_position(row, col)
        if messages:
            return RevealResult(Outcome.INVALID, tuple(messages))

        if self.is_over:
            return RevealResult(self._terminal_outcome())

        cell = self._grid[row][col]
        if cell.is_revealed:
            return RevealResult(Outcome.CONTINUE)

        if self._game_state == GameState.FRESH:
            self.place_mines(row, col)

        if cell.is_mine:
            cell.reveal()
            self._game_state = GameState.LOST
            logger.debug("Mine hit at (%d, %d)", row, col)
            return RevealResult(Outcome.LOSS)

        self._flood_reveal(row, col)

        if self._check_win_condition():
            self._game_state = GameState.WON
            return RevealResult(Outcome.WIN)
        return RevealResult(Outcome.CONTINUE)

    def _flood_reveal(self, row: int, col: int) -> None:
        """Reveal a safe cell, expanding through blank cells with a work-list."""
        pending: Deque[Position] = deque([(row, col)])
        while pending:
            current_row, current_col = pending.popleft()
            cell = self._grid[current_row][current_col]
            if not cell.reveal():
                continue
            self._cells_revealed += 1
            if not cell.is_blank:
                continue
            # blank cells never border a mine
            for neighbor in self._get_neighbors(current_row, current_col):
                if self._grid[neighbor[0]][neighbor[1]].is_hidden:
                    pending.append(neighbor)

    def _check_win_condition(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return self._cells_revealed >= self.config.safe_cells

    def _terminal_outcome(self) -> Outcome:
        return Outcome.WIN if self.is_won else Outcome.LOSS

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def mines_placed(self) -> bool:
        """Check if the mine layout has been generated."""
        return self._game_state != GameState.FRESH

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state in (GameState.FRESH, GameState.MINES_PLACED)

    @property
    def is_over(self) -> bool:
        return not self.is_playing

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def cells_revealed(self) -> int:
        """Number of safe cells revealed so far."""
        return self._cells_revealed

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def mine_positions(self) -> List[Position]:
        """Positions of every mine, in row-major order."""
        return [
            (row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
            if self._grid[row][col].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for ML agent.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions of hidden cells.
        """
        actions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions
