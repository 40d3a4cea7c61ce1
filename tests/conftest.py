"""
Shared test fixtures.

Every core service is wired to a fresh in-memory document store.
"""

import itertools

import pytest

from dinohub.services import (
    IdentityService,
    LeaderboardService,
    ProgressService,
    RelationshipService,
)
from dinohub.store.memory import MemoryDocumentStore


class FakeClock:
    """Deterministic millisecond clock that advances on every call."""

    def __init__(self, start: int = 1_700_000_000_000):
        self._ticks = itertools.count(start)

    def __call__(self) -> int:
        return next(self._ticks)


@pytest.fixture
def store():
    return MemoryDocumentStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def identities(store, clock):
    return IdentityService(store, clock=clock)


@pytest.fixture
def relationships(store, identities):
    return RelationshipService(store, identities)


@pytest.fixture
def progress(store, identities, clock):
    return ProgressService(store, identities, clock=clock)


@pytest.fixture
def leaderboard(store):
    return LeaderboardService(store)
