"""
Minesweeper game module.

Provides the board engine (deferred mine placement, flood-fill reveal,
win/loss detection) plus a console session and a Gymnasium wrapper.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    ConfigurationWarning,
    GameState,
    Outcome,
    RevealResult,
)
from .console import GameSession, render_board
from .environment import MinesweeperEnv
from .agent import RandomAgent, play_games

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "ConfigurationWarning",
    "GameState",
    "Outcome",
    "RevealResult",
    "GameSession",
    "render_board",
    "MinesweeperEnv",
    "RandomAgent",
    "play_games",
]
