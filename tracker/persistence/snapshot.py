"""
Snapshot schema exchanged with persistence gateways.

Wire shape (key names are fixed):

    {
      "subjects": [
        {"id": ..., "name": ..., "dotPoints": [{"id": ..., "text": ..., "confidence": ...}]}
      ],
      "highlightMode": false
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tracker.core.confidence import Confidence
from tracker.core.models import DotPoint, Store, Subject


class DotPointSnapshot(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    text: str
    confidence: Confidence = Confidence.UNSEEN


class SubjectSnapshot(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    name: str
    dot_points: list[DotPointSnapshot] = Field(default_factory=list, alias="dotPoints")


class StoreSnapshot(BaseModel):
    """Validated serialized copy of a whole Store."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    subjects: list[SubjectSnapshot] = Field(default_factory=list)
    highlight_mode: bool = Field(default=False, alias="highlightMode")

    @classmethod
    def from_store(cls, store: Store) -> StoreSnapshot:
        return cls(
            subjects=[
                SubjectSnapshot(
                    id=subject.id,
                    name=subject.name,
                    dot_points=[
                        DotPointSnapshot(id=dp.id, text=dp.text, confidence=dp.confidence)
                        for dp in subject.dot_points
                    ],
                )
                for subject in store.subjects
            ],
            highlight_mode=store.highlight_mode,
        )

    def to_store(self) -> Store:
        return Store(
            subjects=[
                Subject(
                    id=subject.id,
                    name=subject.name,
                    dot_points=[
                        DotPoint(id=dp.id, text=dp.text, confidence=dp.confidence)
                        for dp in subject.dot_points
                    ],
                )
                for subject in self.subjects
            ],
            highlight_mode=self.highlight_mode,
        )


def dump_store(store: Store) -> dict[str, Any]:
    """Serialize a Store to the JSON-ready snapshot dict."""
    return StoreSnapshot.from_store(store).model_dump(mode="json", by_alias=True)


def load_store(data: Any) -> Store:
    """
    Rebuild a Store from a snapshot dict.

    Raises:
        pydantic.ValidationError: If the data does not match the snapshot shape
    """
    return StoreSnapshot.model_validate(data).to_store()
