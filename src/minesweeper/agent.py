"""
Random baseline player for the Minesweeper environment.

Picks uniformly among hidden cells; used by the CLI autoplay command.
"""
from typing import Dict, Optional

import numpy as np

from .board import BoardConfig, Position
from .environment import MinesweeperEnv


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent:
    """
    Agent that selects hidden cells uniformly at random.

    This provides a baseline for comparing smarter players.
    """

    def __init__(
        self,
        rows: int = 10,
        cols: int = 10,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            rows: Number of rows in the board.
            cols: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        self.rows = rows
        self.cols = cols
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * cols + col).

        Raises:
            ValueError: If no cell can be revealed.
        """
        if valid_actions is None:
            # Hidden cells (value -1) are valid actions
            valid_actions = observation.flatten() == -1

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            raise ValueError("No hidden cells left to reveal")
        return int(self.rng.choice(valid_indices))

    def action_to_position(self, action: int) -> Position:
        """Convert flat action index to (row, col) position."""
        return action // self.cols, action % self.cols


def play_games(
    config: BoardConfig,
    num_games: int,
    seed: Optional[int] = None,
) -> Dict[str, float]:
    """
    Let a RandomAgent play several games and summarize the results.

    Args:
        config: Board configuration for every game.
        num_games: Number of games to play.
        seed: Seed for both the environment and the agent.

    Returns:
        Dict with games, wins, win_rate and avg_revealed.
    """
    env = MinesweeperEnv(config=config)
    agent = RandomAgent(config.rows, config.cols, seed=seed)

    wins = 0
    total_revealed = 0
    for game in range(num_games):
        game_seed = None if seed is None else seed + game
        obs, info = env.reset(seed=game_seed)
        done = False
        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
        if info["game_state"] == "WON":
            wins += 1
        total_revealed += info["revealed"]

    return {
        "games": num_games,
        "wins": wins,
        "win_rate": wins / num_games if num_games else 0.0,
        "avg_revealed": total_revealed / num_games if num_games else 0.0,
    }
