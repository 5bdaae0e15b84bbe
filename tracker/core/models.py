"""
Domain models for subjects and their dot points.

The Store is the root aggregate: it owns subjects, which own dot points.
Order of both sequences is significant and survives save/load.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field

from tracker.core.confidence import Confidence

DEFAULT_SUBJECT_NAME = "Subject"

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Millisecond timestamp plus a random suffix, both base-36."""
    timestamp = _to_base36(int(time.time() * 1000))
    suffix = "".join(random.choices(_BASE36, k=11))
    return timestamp + suffix


@dataclass
class DotPoint:
    """One syllabus item being tracked."""

    id: str
    text: str
    confidence: Confidence = Confidence.UNSEEN


@dataclass
class Subject:
    """A named, ordered collection of dot points."""

    id: str
    name: str
    dot_points: list[DotPoint] = field(default_factory=list)

    def find_dot_point(self, dot_point_id: str) -> DotPoint | None:
        for dot_point in self.dot_points:
            if dot_point.id == dot_point_id:
                return dot_point
        return None

    @property
    def mastered_count(self) -> int:
        return sum(1 for dot_point in self.dot_points if dot_point.confidence.is_mastered)


@dataclass
class Store:
    """All subjects for one learner plus the highlight display flag."""

    subjects: list[Subject] = field(default_factory=list)
    highlight_mode: bool = False

    def find_subject(self, subject_id: str) -> Subject | None:
        for subject in self.subjects:
            if subject.id == subject_id:
                return subject
        return None


def default_store(count: int, base_name: str = DEFAULT_SUBJECT_NAME) -> Store:
    """Create `count` empty placeholder subjects named "Subject 1".."Subject n"."""
    return Store(
        subjects=[Subject(id=generate_id(), name=f"{base_name} {i + 1}") for i in range(count)],
        highlight_mode=False,
    )
