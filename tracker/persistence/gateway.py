"""
Persistence gateway contract.

The mastery store only needs two operations from its storage collaborator:
load the last snapshot (or nothing) and save the current one. Save failures
are reported, never raised.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Protocol

from loguru import logger
from pydantic import ValidationError

from tracker.core.models import Store
from tracker.persistence.snapshot import dump_store, load_store


@dataclass(frozen=True)
class SaveResult:
    """Outcome of one save attempt."""

    ok: bool
    error: str | None = None


class PersistenceGateway(Protocol):
    """Load/save contract for whole-store snapshots."""

    def load(self) -> Store | None:
        """Return the stored snapshot, or None when absent or unreadable."""
        ...

    def save(self, store: Store) -> SaveResult:
        """Persist a full snapshot of the store."""
        ...


class InMemoryGateway:
    """
    Gateway keeping the last snapshot in memory.

    Useful for tests and for embedding the tracker without a filesystem.
    Set `fail_saves` to simulate a storage outage.
    """

    def __init__(self, snapshot: dict[str, Any] | None = None, fail_saves: bool = False):
        self.snapshot = copy.deepcopy(snapshot)
        self.fail_saves = fail_saves
        self.save_count = 0

    def load(self) -> Store | None:
        if self.snapshot is None:
            return None
        try:
            return load_store(self.snapshot)
        except ValidationError as e:
            logger.warning(f"Discarding invalid in-memory snapshot: {e.error_count()} error(s)")
            return None

    def save(self, store: Store) -> SaveResult:
        if self.fail_saves:
            return SaveResult(ok=False, error="in-memory gateway is set to fail saves")
        self.snapshot = dump_store(store)
        self.save_count += 1
        return SaveResult(ok=True)
