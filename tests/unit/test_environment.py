"""
Unit tests for the Gymnasium environment and the random agent.
"""
import numpy as np
import pytest

from minesweeper import BoardConfig, MinesweeperEnv, RandomAgent, play_games


# ============================================================================
# Environment Tests
# ============================================================================

class TestMinesweeperEnv:
    """Test reset/step contract and rewards."""

    def test_reset_returns_hidden_observation(self) -> None:
        """Reset yields an all-hidden grid and info."""
        env = MinesweeperEnv(BoardConfig(4, 5, 3))
        obs, info = env.reset(seed=0)
        assert obs.shape == (4, 5)
        assert np.all(obs == -1)
        assert info["game_state"] == "FRESH"
        assert info["total_safe"] == 17

    def test_spaces_match_board(self) -> None:
        """Action and observation spaces follow the config."""
        env = MinesweeperEnv(BoardConfig(4, 5, 3))
        assert env.action_space.n == 20
        assert env.observation_space.shape == (4, 5)

    def test_reset_builds_new_board(self) -> None:
        """Every episode gets a fresh board."""
        env = MinesweeperEnv(BoardConfig(4, 4, 2))
        env.reset(seed=1)
        first = env.board
        env.step(0)
        env.reset(seed=2)
        assert env.board is not first
        assert env.board.mines_placed is False

    def test_only_safe_cell_wins(self) -> None:
        """With one safe cell the first step wins."""
        env = MinesweeperEnv(BoardConfig(3, 3, 8))
        env.reset(seed=0)
        _, reward, terminated, truncated, info = env.step(4)
        assert reward == 10.0
        assert terminated is True
        assert truncated is False
        assert info["game_state"] == "WON"

    def test_revealed_cell_penalized(self, rigged_board) -> None:
        """Stepping on a revealed cell costs a small penalty."""
        env = MinesweeperEnv(BoardConfig(3, 3, 1))
        env.reset(seed=0)
        env.board = rigged_board(3, 3, [(1, 1)])

        _, reward, _, _, _ = env.step(0)
        assert reward == 1.0
        assert not env.board.is_over

        _, reward, terminated, _, _ = env.step(0)
        assert reward == pytest.approx(-0.1)
        assert terminated is False

    def test_action_mask_tracks_hidden_cells(self) -> None:
        """Mask is True exactly for hidden cells."""
        env = MinesweeperEnv(BoardConfig(3, 3, 0))
        env.reset(seed=0)
        assert env.get_action_mask().all()
        env.step(0)
        assert not env.get_action_mask().any()

    def test_ansi_render(self) -> None:
        """ANSI rendering draws one line per row."""
        env = MinesweeperEnv(BoardConfig(2, 3, 1), render_mode="ansi")
        env.reset(seed=0)
        assert env.render() == "- - -\n- - -"


# ============================================================================
# Random Agent Tests
# ============================================================================

class TestRandomAgent:
    """Test the random baseline."""

    def test_selects_hidden_cell_from_observation(self) -> None:
        """Without a mask, only hidden cells are chosen."""
        agent = RandomAgent(2, 2, seed=0)
        obs = np.array([[1, -1], [0, 2]], dtype=np.int8)
        for _ in range(10):
            assert agent.select_action(obs) == 1

    def test_no_hidden_cells_raises(self) -> None:
        """A fully revealed grid leaves nothing to choose."""
        agent = RandomAgent(2, 2, seed=0)
        obs = np.array([[1, 1], [0, 9]], dtype=np.int8)
        with pytest.raises(ValueError, match="No hidden cells"):
            agent.select_action(obs)

    def test_action_to_position(self) -> None:
        """Flat indices map row-major."""
        agent = RandomAgent(3, 4)
        assert agent.action_to_position(7) == (1, 3)

    def test_play_games_summary(self) -> None:
        """One safe cell means every game is won on the first click."""
        results = play_games(BoardConfig(2, 2, 3), num_games=5, seed=0)
        assert results["games"] == 5
        assert results["wins"] == 5
        assert results["win_rate"] == 1.0
        assert results["avg_revealed"] == 1.0
