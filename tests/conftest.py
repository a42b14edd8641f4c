"""Pytest configuration and fixtures for docstore tests."""
from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from docstore.models import Author, Document
from docstore.storage.memory_store import DocumentStore

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Clock that advances one minute per call."""

    def __init__(self, start: datetime = BASE_TIME):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(minutes=1)
        return current


@pytest.fixture
def clock() -> FakeClock:
    """Create a deterministic clock."""
    return FakeClock()


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Create a sequential id generator."""
    counter = count(1)
    return lambda: f"doc-{next(counter)}"


@pytest.fixture
def store(clock: FakeClock, id_factory: Callable[[], str]) -> DocumentStore:
    """Create a store with deterministic ids and timestamps."""
    return DocumentStore(id_factory=id_factory, clock=clock)


@pytest.fixture
def populated_store(store: DocumentStore) -> Iterator[DocumentStore]:
    """Store holding three documents created one minute apart."""
    store.save(Document(title="Report", content="Q1 numbers", author=Author(id="a1", name="Ann")))
    store.save(Document(title="Report draft", content="Q2 numbers", author=Author(id="a2", name="Bob")))
    store.save(Document(title="Intro", content="Hello", author=Author(id="a1", name="Ann")))
    yield store
    store.clear()
