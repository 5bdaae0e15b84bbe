"""
Core Domain Module.

Provides the confidence lattice and the subject/dot point data model
shared by the study and persistence packages.
"""

from tracker.core.confidence import LEVELS, MASTERED_LEVELS, WEAK_LEVELS, Confidence
from tracker.core.models import (
    DEFAULT_SUBJECT_NAME,
    DotPoint,
    Store,
    Subject,
    default_store,
    generate_id,
)

__all__ = [
    # Confidence
    "Confidence",
    "LEVELS",
    "WEAK_LEVELS",
    "MASTERED_LEVELS",
    # Models
    "DotPoint",
    "Subject",
    "Store",
    "DEFAULT_SUBJECT_NAME",
    "default_store",
    "generate_id",
]
