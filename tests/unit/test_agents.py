"""
Unit tests for the 2048 agents and the evaluator.
"""
import numpy as np
import pytest

from puzzle_arcade.agents import ExpectimaxAgent, RandomAgent
from puzzle_arcade.evaluation import EpisodeStats, EvaluationStats, Evaluator
from puzzle_arcade.game2048 import Direction, grid_to_observation


# ============================================================================
# Agent Tests
# ============================================================================

class TestRandomAgent:
    """Test the random baseline."""

    def test_respects_action_mask(self) -> None:
        agent = RandomAgent(seed=0)
        mask = np.array([False, False, True, False])
        obs = np.zeros((4, 4), dtype=np.int32)
        for _ in range(20):
            assert agent.select_action(obs, mask) == 2

    def test_empty_mask_returns_zero(self) -> None:
        agent = RandomAgent(seed=0)
        obs = np.zeros((4, 4), dtype=np.int32)
        assert agent.select_action(obs, np.zeros(4, dtype=bool)) == 0

    def test_direction_mapping(self) -> None:
        agent = RandomAgent()
        assert agent.action_to_direction(3) == Direction.RIGHT
        assert agent.direction_to_action("down") == 1


class TestExpectimaxAgent:
    """Test the search-based agent."""

    def test_plays_only_legal_move(self, left_only_grid) -> None:
        agent = ExpectimaxAgent()
        action = agent.select_action(grid_to_observation(left_only_grid))
        assert agent.action_to_direction(action) == Direction.LEFT

    def test_stuck_board_returns_zero(self, deadlocked_grid) -> None:
        agent = ExpectimaxAgent(depth=1)
        assert agent.select_action(grid_to_observation(deadlocked_grid)) == 0


# ============================================================================
# Evaluator Tests
# ============================================================================

class TestEvaluationStats:
    """Test aggregate statistics."""

    def test_empty_stats(self) -> None:
        stats = EvaluationStats()
        assert stats.win_rate == 0.0
        assert stats.avg_score == 0.0
        assert stats.best_tile == 0

    def test_aggregates(self) -> None:
        stats = EvaluationStats([
            EpisodeStats(score=100, max_tile=64, steps=10, won=False),
            EpisodeStats(score=300, max_tile=2048, steps=30, won=True),
        ])
        assert stats.win_rate == 0.5
        assert stats.avg_score == 200
        assert stats.avg_steps == 20
        assert stats.best_tile == 2048
        assert stats.to_dict()["avg_max_tile"] == 1056


class TestEvaluator:
    """Test episode running."""

    def test_invalid_settings(self) -> None:
        with pytest.raises(ValueError):
            Evaluator(num_episodes=0)
        with pytest.raises(ValueError):
            Evaluator(max_steps=0)

    def test_evaluate_random_agent(self) -> None:
        evaluator = Evaluator(num_episodes=3, max_steps=50, seed=0)
        stats = evaluator.evaluate(RandomAgent(seed=0))
        assert len(stats.episodes) == 3
        assert all(1 <= episode.steps <= 50 for episode in stats.episodes)
        assert all(episode.max_tile >= 2 for episode in stats.episodes)

    def test_compare(self) -> None:
        evaluator = Evaluator(num_episodes=1, max_steps=5, seed=1)
        results = evaluator.compare({
            "Random": RandomAgent(seed=1),
            "Expectimax": ExpectimaxAgent(depth=1),
        })
        assert set(results) == {"Random", "Expectimax"}
        assert results["Expectimax"]["avg_steps"] <= 5
