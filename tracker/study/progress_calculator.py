"""
Progress Calculator for subjects.

Progress is the share of a subject's dot points rated Memorised or
Exam-ready, as a whole percentage rounded half up. It is always derived
on demand and never stored.
"""

from __future__ import annotations

from tracker.core.models import Subject


def round_half_up_percent(part: int, total: int) -> int:
    """
    Return round(100 * part / total) with ties rounded up.

    Integer arithmetic avoids float artifacts at exact .5 boundaries.
    """
    return (200 * part + total) // (2 * total)


def calculate_progress(subject: Subject) -> int:
    """
    Calculate mastery percentage for a subject.

    Returns:
        0 for a subject without dot points, otherwise 0-100
    """
    total = len(subject.dot_points)
    if total == 0:
        return 0
    return round_half_up_percent(subject.mastered_count, total)


def format_progress_bar(percent: int, width: int = 20) -> str:
    """
    Format a text-based progress bar.

    Returns:
        String like "████████░░" for 80% at width 10
    """
    filled = int(percent / 100 * width)
    empty = width - filled
    return "█" * filled + "░" * empty
