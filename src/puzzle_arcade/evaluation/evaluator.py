"""
Evaluation module for 2048 agents.

Plays full episodes in Game2048Env and reports aggregate statistics.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..agents.base_agent import BaseAgent
from ..game2048.environment import Game2048Env


# ============================================================================
# Episode Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    score: int = 0
    max_tile: int = 0
    steps: int = 0
    won: bool = False


@dataclass
class EvaluationStats:
    """Aggregate statistics over many episodes."""

    episodes: List[EpisodeStats] = field(default_factory=list)

    @property
    def win_rate(self) -> float:
        if not self.episodes:
            return 0.0
        return sum(1 for episode in self.episodes if episode.won) / len(self.episodes)

    def _mean(self, attribute: str) -> float:
        if not self.episodes:
            return 0.0
        return sum(getattr(episode, attribute) for episode in self.episodes) / len(self.episodes)

    @property
    def avg_score(self) -> float:
        return self._mean("score")

    @property
    def avg_max_tile(self) -> float:
        return self._mean("max_tile")

    @property
    def avg_steps(self) -> float:
        return self._mean("steps")

    @property
    def best_tile(self) -> int:
        return max((episode.max_tile for episode in self.episodes), default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary for reporting."""
        return {
            "win_rate": self.win_rate,
            "avg_score": self.avg_score,
            "avg_max_tile": self.avg_max_tile,
            "avg_steps": self.avg_steps,
            "best_tile": self.best_tile,
        }


# ============================================================================
# Agent Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare multiple agents.

    Provides standardized evaluation across different agent types.
    """

    def __init__(
        self,
        num_episodes: int = 20,
        max_steps: int = 5000,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum moves per episode before truncation.
            seed: Seed for the first episode; later episodes continue the
                environment's generator.
        """
        if num_episodes < 1:
            raise ValueError("num_episodes must be positive")
        if max_steps < 1:
            raise ValueError("max_steps must be positive")
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def _run_episode(self, env: Game2048Env, agent: BaseAgent, seed: Optional[int]) -> EpisodeStats:
        """Play one episode and collect its statistics."""
        observation, info = env.reset(seed=seed)
        agent.reset()
        stats = EpisodeStats()

        for _ in range(self.max_steps):
            valid_actions = env.get_action_mask()
            action = agent.select_action(observation, valid_actions)
            observation, _, terminated, truncated, info = env.step(action)
            stats.steps += 1
            if terminated or truncated:
                break

        stats.score = info["score"]
        stats.max_tile = info["max_tile"]
        stats.won = info["won"]
        return stats

    def evaluate(self, agent: BaseAgent) -> EvaluationStats:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Aggregate statistics over all episodes.
        """
        env = Game2048Env()
        results = EvaluationStats()
        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            results.episodes.append(self._run_episode(env, agent, seed))
        return results

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, Any]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent).to_dict()
        return results
