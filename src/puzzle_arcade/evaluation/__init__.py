"""
Evaluation module for 2048 agents.

Provides episode statistics and agent comparison.
"""
from .evaluator import EpisodeStats, EvaluationStats, Evaluator

__all__ = [
    "EpisodeStats",
    "EvaluationStats",
    "Evaluator",
]
