"""
Recommendation Engine for today's focus.

Picks a few weak dot points across all subjects by weighted sampling
without replacement:

1. Pool every Unseen (weight 2) and Learning (weight 1) dot point
2. Draw one candidate with probability proportional to its weight
3. Remove it from the pool and repeat until k are drawn or the pool is empty

Results come back in draw order. The random source is injectable so tests
can script the draws.
"""
from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from tracker.core.models import DotPoint, Store

# rand(n) must return a uniform integer in [0, n)
RandomSource = Callable[[int], int]

DEFAULT_SUGGESTION_COUNT = 3


@dataclass(frozen=True)
class Suggestion:
    """One dot point chosen for today's focus."""

    subject_id: str
    subject_name: str
    dot_point: DotPoint


@dataclass(frozen=True)
class _Candidate:
    suggestion: Suggestion
    weight: int


def build_weak_pool(store: Store) -> list[_Candidate]:
    """Collect weak dot points in subject order, then dot point order."""
    pool = []
    for subject in store.subjects:
        for dot_point in subject.dot_points:
            if not dot_point.confidence.is_weak:
                continue
            pool.append(
                _Candidate(
                    suggestion=Suggestion(
                        subject_id=subject.id,
                        subject_name=subject.name,
                        dot_point=dot_point,
                    ),
                    weight=dot_point.confidence.weight,
                )
            )
    return pool


def _draw_index(pool: list[_Candidate], rand: RandomSource) -> int:
    """
    Pick a pool index with probability weight / total_weight.

    Equivalent to a uniform draw from the pool expanded so each candidate
    appears `weight` times.
    """
    total = sum(candidate.weight for candidate in pool)
    ticket = rand(total)
    if not 0 <= ticket < total:
        raise ValueError(f"random source returned {ticket}, expected 0 <= n < {total}")

    cumulative = 0
    for idx, candidate in enumerate(pool):
        cumulative += candidate.weight
        if ticket < cumulative:
            return idx
    return len(pool) - 1


def suggest(
    store: Store,
    k: int = DEFAULT_SUGGESTION_COUNT,
    rand: RandomSource | None = None,
) -> list[Suggestion]:
    """
    Suggest up to `k` distinct weak dot points.

    Args:
        store: State to sample from (not modified)
        k: Maximum number of suggestions
        rand: Uniform integer source, defaults to a fresh random.Random

    Returns:
        Suggestions in draw order; empty when nothing is weak
    """
    pool = build_weak_pool(store)
    if not pool or k <= 0:
        return []

    if rand is None:
        rand = random.Random().randrange

    selected = []
    for _ in range(min(k, len(pool))):
        idx = _draw_index(pool, rand)
        selected.append(pool.pop(idx).suggestion)

    logger.debug(f"Suggested {len(selected)} of {len(selected) + len(pool)} weak dot points")
    return selected


class RecommendationEngine:
    """Holds a random source and default count for repeated suggestions."""

    def __init__(self, rand: RandomSource | None = None, k: int = DEFAULT_SUGGESTION_COUNT):
        self.rand = rand if rand is not None else random.Random().randrange
        self.k = k

    @classmethod
    def seeded(cls, seed: int, k: int = DEFAULT_SUGGESTION_COUNT) -> RecommendationEngine:
        return cls(rand=random.Random(seed).randrange, k=k)

    def suggest(self, store: Store, k: int | None = None) -> list[Suggestion]:
        return suggest(store, self.k if k is None else k, self.rand)
