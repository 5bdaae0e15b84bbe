"""
Unit tests for subject progress calculation.
"""

import pytest

from tracker.core.confidence import Confidence
from tracker.core.models import DotPoint, Subject
from tracker.study.progress_calculator import (
    calculate_progress,
    format_progress_bar,
    round_half_up_percent,
)


def _subject(*levels: Confidence) -> Subject:
    return Subject(
        id="s",
        name="Subject",
        dot_points=[DotPoint(id=f"dp-{i}", text=f"Dot point {i}", confidence=level) for i, level in enumerate(levels)],
    )


def test_empty_subject_is_zero():
    assert calculate_progress(_subject()) == 0


def test_two_of_three_mastered_rounds_to_67():
    subject = _subject(Confidence.MEMORISED, Confidence.UNSEEN, Confidence.EXAM_READY)
    assert calculate_progress(subject) == 67


def test_weak_levels_do_not_count():
    assert calculate_progress(_subject(Confidence.UNSEEN, Confidence.LEARNING)) == 0


def test_all_mastered_is_100():
    assert calculate_progress(_subject(Confidence.MEMORISED, Confidence.EXAM_READY)) == 100


@pytest.mark.parametrize(
    "part,total,expected",
    [
        (1, 8, 13),  # 12.5 rounds up
        (1, 3, 33),
        (5, 8, 63),  # 62.5 rounds up
        (1, 200, 1),  # 0.5 rounds up
        (3, 7, 43),
    ],
)
def test_round_half_up(part, total, expected):
    assert round_half_up_percent(part, total) == expected


def test_progress_stays_in_range():
    for mastered in range(0, 11):
        levels = [Confidence.MEMORISED] * mastered + [Confidence.LEARNING] * (10 - mastered)
        assert 0 <= calculate_progress(_subject(*levels)) <= 100


def test_progress_bar_width():
    assert format_progress_bar(80, width=10) == "████████░░"
    assert format_progress_bar(0, width=4) == "░░░░"
