"""
Confidence levels for dot points.

The four self-assessed levels form a fixed total order:

    Unseen < Learning < Memorised < Exam-ready

Two subsets are derived from that order and shared by the progress
calculator and the recommendation engine:

- weak:     Unseen, Learning
- mastered: Memorised, Exam-ready
"""

from __future__ import annotations

from enum import Enum


class Confidence(str, Enum):
    """Self-assessed mastery level of a single dot point."""

    UNSEEN = "Unseen"
    LEARNING = "Learning"
    MEMORISED = "Memorised"
    EXAM_READY = "Exam-ready"

    @classmethod
    def parse(cls, value: Confidence | str) -> Confidence:
        """
        Resolve a level from an enum member or its literal string.

        Raises:
            ValueError: If the value is not one of the four levels
        """
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def rank(self) -> int:
        """Position in the progression, 0 (Unseen) to 3 (Exam-ready)."""
        return _RANK[self]

    @property
    def is_weak(self) -> bool:
        return self in WEAK_LEVELS

    @property
    def is_mastered(self) -> bool:
        return self in MASTERED_LEVELS

    @property
    def weight(self) -> int:
        """Selection weight for today's focus (0 means never suggested)."""
        return _WEIGHT[self]

    @property
    def highlight(self) -> str:
        """Treatment applied when weak dot points are highlighted."""
        return "weak" if self.is_weak else "de-emphasize"

    @property
    def color(self) -> str:
        """Rich color for CLI display."""
        return {
            Confidence.UNSEEN: "red",
            Confidence.LEARNING: "yellow",
            Confidence.MEMORISED: "cyan",
            Confidence.EXAM_READY: "green",
        }[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank >= other.rank


_RANK = {
    Confidence.UNSEEN: 0,
    Confidence.LEARNING: 1,
    Confidence.MEMORISED: 2,
    Confidence.EXAM_READY: 3,
}

_WEIGHT = {
    Confidence.UNSEEN: 2,
    Confidence.LEARNING: 1,
    Confidence.MEMORISED: 0,
    Confidence.EXAM_READY: 0,
}

WEAK_LEVELS = frozenset({Confidence.UNSEEN, Confidence.LEARNING})
MASTERED_LEVELS = frozenset({Confidence.MEMORISED, Confidence.EXAM_READY})

# Progression order, lowest first
LEVELS: tuple[Confidence, ...] = tuple(sorted(Confidence, key=lambda level: _RANK[level]))
