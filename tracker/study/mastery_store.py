"""
Mastery Store: session-scoped owner of the subject/dot point state.

All mutations run synchronously and are followed by exactly one save through
the persistence gateway, so snapshots reach storage in mutation order.
Missing targets and empty input are treated as benign no-ops, and a failed
save never rolls back the in-memory change.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from tracker.core.confidence import Confidence
from tracker.core.models import (
    DEFAULT_SUBJECT_NAME,
    DotPoint,
    Store,
    Subject,
    default_store,
    generate_id,
)
from tracker.persistence.gateway import PersistenceGateway, SaveResult


@dataclass(frozen=True)
class MutationResult:
    """Outcome of one store operation."""

    changed: bool
    saved: bool = False
    dot_point: DotPoint | None = None
    error: str | None = None

    @classmethod
    def unchanged(cls) -> MutationResult:
        return cls(changed=False)


class MasteryStore:
    """
    Controller holding one Store and its persistence gateway.

    Usage:
        store = MasteryStore.open(JsonFileGateway(path))
        result = store.add_dot_point(subject_id, "Describe the structure of DNA")
        store.set_confidence(subject_id, result.dot_point.id, Confidence.LEARNING)
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        state: Store | None = None,
        default_name: str = DEFAULT_SUBJECT_NAME,
    ):
        self.gateway = gateway
        self.state = state if state is not None else Store()
        self.default_name = default_name
        self.last_save: SaveResult | None = None

    @classmethod
    def open(
        cls,
        gateway: PersistenceGateway,
        default_subject_count: int = 6,
        default_name: str = DEFAULT_SUBJECT_NAME,
    ) -> MasteryStore:
        """
        Restore the store from the gateway.

        When no usable snapshot exists, a default store with
        `default_subject_count` empty subjects is created and saved.
        """
        state = gateway.load()
        store = cls(gateway, state, default_name=default_name)
        if state is None:
            logger.info(f"No saved snapshot, initializing {default_subject_count} default subjects")
            store.initialize_default(default_subject_count)
        return store

    # =========================================================================
    # Lookups
    # =========================================================================

    @property
    def subjects(self) -> list[Subject]:
        return self.state.subjects

    @property
    def highlight_mode(self) -> bool:
        return self.state.highlight_mode

    def get_subject(self, subject_id: str) -> Subject | None:
        return self.state.find_subject(subject_id)

    def find_subject_by_name(self, name: str) -> Subject | None:
        """Case-insensitive lookup of the first subject with this name."""
        wanted = name.casefold()
        for subject in self.state.subjects:
            if subject.name.casefold() == wanted:
                return subject
        return None

    # =========================================================================
    # Mutations
    # =========================================================================

    def initialize_default(self, count: int) -> MutationResult:
        """Replace the state with `count` empty placeholder subjects."""
        self.state = default_store(count, self.default_name)
        return self._commit()

    def add_dot_point(self, subject_id: str, text: str) -> MutationResult:
        """Append a new Unseen dot point; blank text is ignored."""
        if not text or not text.strip():
            return MutationResult.unchanged()

        subject = self.get_subject(subject_id)
        if subject is None:
            logger.debug(f"add_dot_point: subject {subject_id} not found")
            return MutationResult.unchanged()

        dot_point = DotPoint(id=self._unique_dot_point_id(subject), text=text)
        subject.dot_points.append(dot_point)
        return self._commit(dot_point)

    def remove_dot_point(self, subject_id: str, dot_point_id: str) -> MutationResult:
        subject = self.get_subject(subject_id)
        if subject is None:
            logger.debug(f"remove_dot_point: subject {subject_id} not found")
            return MutationResult.unchanged()

        remaining = [dp for dp in subject.dot_points if dp.id != dot_point_id]
        if len(remaining) == len(subject.dot_points):
            logger.debug(f"remove_dot_point: dot point {dot_point_id} not found")
            return MutationResult.unchanged()

        subject.dot_points = remaining
        return self._commit()

    def set_confidence(
        self,
        subject_id: str,
        dot_point_id: str,
        level: Confidence | str,
    ) -> MutationResult:
        """
        Re-rate a dot point.

        Raises:
            ValueError: If `level` is not one of the four confidence levels
        """
        confidence = Confidence.parse(level)

        subject = self.get_subject(subject_id)
        if subject is None:
            logger.debug(f"set_confidence: subject {subject_id} not found")
            return MutationResult.unchanged()

        dot_point = subject.find_dot_point(dot_point_id)
        if dot_point is None:
            logger.debug(f"set_confidence: dot point {dot_point_id} not found")
            return MutationResult.unchanged()

        dot_point.confidence = confidence
        return self._commit(dot_point)

    def rename_subject(self, subject_id: str, name: str) -> MutationResult:
        """Set the subject name, falling back to the default label for ""."""
        subject = self.get_subject(subject_id)
        if subject is None:
            logger.debug(f"rename_subject: subject {subject_id} not found")
            return MutationResult.unchanged()

        subject.name = name or self.default_name
        return self._commit()

    def toggle_highlight_mode(self) -> MutationResult:
        self.state.highlight_mode = not self.state.highlight_mode
        return self._commit()

    # =========================================================================
    # Internals
    # =========================================================================

    def _unique_dot_point_id(self, subject: Subject) -> str:
        existing = {dp.id for dp in subject.dot_points}
        new_id = generate_id()
        while new_id in existing:
            new_id = generate_id()
        return new_id

    def _commit(self, dot_point: DotPoint | None = None) -> MutationResult:
        result = self.gateway.save(self.state)
        self.last_save = result
        if not result.ok:
            logger.warning(f"Snapshot not saved, keeping in-memory state: {result.error}")
        return MutationResult(changed=True, saved=result.ok, dot_point=dot_point, error=result.error)
