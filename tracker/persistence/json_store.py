"""
JSON file persistence for the tracker.

The whole store is kept as a single JSON snapshot at the configured
`data_file`. Writes go to a sibling temp file that then replaces the target,
so a crash mid-write leaves the previous snapshot intact.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from tracker.core.models import Store
from tracker.persistence.gateway import SaveResult
from tracker.persistence.snapshot import dump_store, load_store


class JsonFileGateway:
    """Persistence gateway backed by one JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> Store | None:
        """Load the snapshot; missing, unreadable or corrupt files yield None."""
        if not self.path.exists():
            logger.debug(f"No snapshot at {self.path}")
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            store = load_store(data)
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Could not read snapshot {self.path}: {e}")
            return None

        logger.debug(f"Loaded {len(store.subjects)} subjects from {self.path}")
        return store

    def save(self, store: Store) -> SaveResult:
        """Write the snapshot; I/O errors are returned, not raised."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(dump_store(store), f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to save snapshot to {self.path}: {e}")
            return SaveResult(ok=False, error=str(e))

        return SaveResult(ok=True)
