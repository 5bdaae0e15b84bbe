"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tracker.core.confidence import Confidence  # noqa: E402
from tracker.core.models import DotPoint, Store, Subject  # noqa: E402
from tracker.persistence.gateway import InMemoryGateway  # noqa: E402
from tracker.study.mastery_store import MasteryStore  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture
def scripted_rand():
    """Factory for random sources that replay fixed draws."""

    def factory(values: list[int]):
        draws: Iterator[int] = iter(values)

        def rand(n: int) -> int:
            return next(draws)

        return rand

    return factory


@pytest.fixture
def gateway():
    """In-memory persistence gateway."""
    return InMemoryGateway()


@pytest.fixture
def mastery_store(gateway):
    """Mastery store with two empty subjects."""
    store = MasteryStore(gateway)
    store.initialize_default(2)
    return store


@pytest.fixture
def sample_store():
    """Store with a mix of confidence levels across two subjects."""
    return Store(
        subjects=[
            Subject(
                id="bio",
                name="Biology",
                dot_points=[
                    DotPoint(id="bio-1", text="Describe DNA structure", confidence=Confidence.UNSEEN),
                    DotPoint(id="bio-2", text="Explain mitosis", confidence=Confidence.MEMORISED),
                    DotPoint(id="bio-3", text="Outline meiosis", confidence=Confidence.LEARNING),
                ],
            ),
            Subject(
                id="chem",
                name="Chemistry",
                dot_points=[
                    DotPoint(id="chem-1", text="Balance redox equations", confidence=Confidence.EXAM_READY),
                    DotPoint(id="chem-2", text="Le Chatelier's principle", confidence=Confidence.UNSEEN),
                ],
            ),
        ],
        highlight_mode=False,
    )
