"""
Text front-end for the board engine.

Prompts for board settings and moves, prints the grid, and offers a
new game when one ends. All terminal I/O goes through injectable
callables so sessions can be scripted.
"""
import logging
import warnings
from typing import Callable, Optional, Tuple

from .board import Board, BoardConfig, ConfigurationWarning, Outcome

logger = logging.getLogger(__name__)

WELCOME = (
    "Welcome to Minesweeper!\n\n"
    "To play:\n"
    "1: Enter your desired board size (row & column) and number of mines "
    "to be placed!\n"
    "2: Choose a spot to reveal by entering its corresponding row number "
    "then the column number. The top left of the board is row 0, column 0.\n"
)


# ============================================================================
# Rendering
# ============================================================================

def render_board(board: Board, show_all: bool = False) -> str:
    """
    Format the board with row labels down the left and column labels below.

    Each cell is followed by as many spaces as its column index has
    digits, so the cells line up with the column axis.

    Args:
        board: Board to draw.
        show_all: Show mines and counts of hidden cells too.

    Returns:
        Multi-line string, starting with a blank line and a header.
    """
    label_width = len(str(board.rows))
    lines = ["", "Board:"]
    for row in range(board.rows):
        parts = [f"{row} ".ljust(label_width + 1)]
        for col in range(board.cols):
            symbol = board.get_cell(row, col).symbol(show_all)
            parts.append(symbol + " " * len(str(col)))
        lines.append("".join(parts))

    axis = " " * label_width + "".join(f" {col}" for col in range(board.cols))
    lines.append(axis)
    lines.append("")
    return "\n".join(lines)


# ============================================================================
# Interactive Session
# ============================================================================

class GameSession:
    """
    Interactive loop that feeds player moves into a Board.

    The session only reads and prints; the board decides outcomes. It
    never exits the process, run() simply returns when the player
    declines another game.
    """

    def __init__(
        self,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print,
        seed: Optional[int] = None,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.seed = seed
        self.games_played = 0

    def run(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        mines: Optional[int] = None,
    ) -> int:
        """
        Play games until the player declines a restart.

        Settings passed in are used for the first game only; later games
        prompt for new settings.

        Returns:
            Number of games played.
        """
        config = self.configure(rows, cols, mines)
        while True:
            self.play_game(self._new_board(config))
            if not self.offer_restart():
                self.output_fn("Thanks for playing!")
                return self.games_played
            config = self.configure()

    def configure(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        mines: Optional[int] = None,
    ) -> BoardConfig:
        """Build a board configuration, prompting for missing values."""
        while True:
            if rows is None:
                rows = self._ask_int("Enter the number of rows:")
            if cols is None:
                cols = self._ask_int("Enter the number of columns:")
            if mines is None:
                mines = self._ask_int("Enter the number of mines:")

            try:
                with warnings.catch_warnings():
                    warnings.simplefilter("ignore", ConfigurationWarning)
                    config = BoardConfig(rows, cols, mines)
            except ValueError as e:
                self.output_fn(f"{e}. Please try again.")
                rows = cols = mines = None
                continue

            if config.was_clamped:
                self.output_fn(
                    "Too many mines. The number of mines must be less "
                    "than the total cells."
                )
                self.output_fn(
                    f"Setting mines to maximum allowed: {config.num_mines}"
                )
            return config

    def play_game(self, board: Board) -> Outcome:
        """
        Prompt for moves until the board reports a win or a loss.

        Returns:
            Outcome.WIN or Outcome.LOSS.
        """
        self.games_played += 1
        self.output_fn(render_board(board))

        while True:
            if board.mines_placed:
                prompt = "Enter the next cell to reveal (row col): "
            else:
                prompt = "Enter the first cell to reveal (row col): "
            row, col = self._ask_position(prompt)

            result = board.reveal(row, col)
            for message in result.messages:
                self.output_fn(message)

            if result.outcome == Outcome.LOSS:
                self.output_fn("Game Over! You hit a mine.")
                self.output_fn(render_board(board, show_all=True))
                return result.outcome
            if result.outcome == Outcome.WIN:
                self.output_fn(render_board(board, show_all=True))
                self.output_fn("Congratulations! You have won the game!\n")
                return result.outcome

            self.output_fn(render_board(board))

    def offer_restart(self) -> bool:
        """Ask whether to start another game."""
        self.output_fn("Do you want to play again? (yes/no):")
        return self.input_fn().strip().lower() == "yes"

    def _new_board(self, config: BoardConfig) -> Board:
        seed = None if self.seed is None else self.seed + self.games_played
        logger.debug("Starting game %d with %s", self.games_played + 1, config)
        return Board(config, seed=seed)

    def _ask_int(self, prompt: str) -> int:
        while True:
            self.output_fn(prompt)
            answer = self.input_fn().strip()
            try:
                return int(answer)
            except ValueError:
                self.output_fn(f"'{answer}' is not a whole number.")

    def _ask_position(self, prompt: str) -> Tuple[int, int]:
        while True:
            self.output_fn(prompt)
            parts = self.input_fn().split()
            try:
                row, col = (int(part) for part in parts)
            except ValueError:
                self.output_fn("Please enter two whole numbers: row col")
                continue
            return row, col
