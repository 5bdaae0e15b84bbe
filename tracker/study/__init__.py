"""
Study Module for dot point mastery.

Provides:
- Mastery store (subject and dot point mutations with persistence)
- Progress calculation per subject
- Weighted recommendations for today's focus
"""

from tracker.study.mastery_store import MasteryStore, MutationResult
from tracker.study.progress_calculator import calculate_progress, format_progress_bar
from tracker.study.recommender import (
    RandomSource,
    RecommendationEngine,
    Suggestion,
    suggest,
)

__all__ = [
    "MasteryStore",
    "MutationResult",
    "calculate_progress",
    "format_progress_bar",
    "RandomSource",
    "RecommendationEngine",
    "Suggestion",
    "suggest",
]
