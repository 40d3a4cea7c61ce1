"""
Tests for the in-memory document store.

Covers the Realtime Database behaviour the core relies on: null deletes,
parent pruning, all-or-nothing updates and child ordering.
"""

import pytest

from dinohub.errors import StoreUnavailable
from dinohub.store.memory import MemoryDocumentStore


class TestMemoryDocumentStore:

    @pytest.mark.asyncio
    async def test_get_missing_path_returns_none(self):
        store = MemoryDocumentStore()

        assert await store.get("users/nobody") is None
        assert await store.get("users/nobody/friends") is None

    @pytest.mark.asyncio
    async def test_multi_path_update_writes_every_path(self):
        store = MemoryDocumentStore()

        await store.update({
            "users/a/friendRequestsSent/b": True,
            "users/b/friendRequestsReceived/a": True,
        })

        assert await store.get("users/a/friendRequestsSent") == {"b": True}
        assert await store.get("users/b/friendRequestsReceived/a") is True

    @pytest.mark.asyncio
    async def test_none_deletes_and_prunes_empty_parents(self):
        store = MemoryDocumentStore({"users": {"a": {"friends": {"b": True}}}})

        await store.update({"users/a/friends/b": None})

        assert await store.get("users/a") is None
        assert store.snapshot() == {}

    @pytest.mark.asyncio
    async def test_deleting_absent_key_is_a_no_op(self):
        store = MemoryDocumentStore({"users": {"a": {"pseudo": "Rex"}}})

        await store.update({"users/a/friends/zzz": None})

        assert store.snapshot() == {"users": {"a": {"pseudo": "Rex"}}}

    @pytest.mark.asyncio
    async def test_overlapping_paths_are_rejected_without_partial_write(self):
        store = MemoryDocumentStore()

        with pytest.raises(ValueError):
            await store.update({
                "users/a": {"pseudo": "Rex"},
                "users/a/friends/b": True,
            })

        assert store.snapshot() == {}

    @pytest.mark.asyncio
    async def test_empty_update_is_rejected(self):
        with pytest.raises(ValueError):
            await MemoryDocumentStore().update({})

    @pytest.mark.asyncio
    async def test_reads_return_copies(self):
        store = MemoryDocumentStore({"users": {"a": {"friends": {"b": True}}}})

        friends = await store.get("users/a/friends")
        friends["c"] = True

        assert await store.get("users/a/friends") == {"b": True}

    @pytest.mark.asyncio
    async def test_query_orders_by_child_with_nulls_first(self):
        store = MemoryDocumentStore({"gameProfiles": {
            "p1": {"gameData": {"mainScore": 5}},
            "p2": {"gameData": {"mainScore": 20}},
            "p3": {"gameData": {"level": 3}},
            "p4": {"gameData": {"mainScore": 1}},
        }})

        rows = await store.query("gameProfiles", "gameData/mainScore")

        assert [key for key, _ in rows] == ["p3", "p4", "p1", "p2"]

    @pytest.mark.asyncio
    async def test_query_ties_are_ordered_by_key(self):
        store = MemoryDocumentStore({"gameProfiles": {
            "b": {"gameData": {"mainScore": 7}},
            "a": {"gameData": {"mainScore": 7}},
        }})

        rows = await store.query("gameProfiles", "gameData/mainScore")

        assert [key for key, _ in rows] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_query_limit_last_keeps_highest(self):
        store = MemoryDocumentStore({"gameProfiles": {
            "p1": {"gameData": {"mainScore": 5}},
            "p2": {"gameData": {"mainScore": 20}},
            "p3": {"gameData": {"mainScore": 1}},
        }})

        rows = await store.query("gameProfiles", "gameData/mainScore", limit_last=2)

        assert [key for key, _ in rows] == ["p1", "p2"]

    @pytest.mark.asyncio
    async def test_query_missing_path_returns_empty_list(self):
        assert await MemoryDocumentStore().query("gameProfiles", "gameData/mainScore") == []

    @pytest.mark.asyncio
    async def test_unavailable_store_fails_every_call(self):
        store = MemoryDocumentStore()
        store.available = False

        with pytest.raises(StoreUnavailable):
            await store.get("users")
        with pytest.raises(StoreUnavailable):
            await store.update({"users/a/pseudo": "Rex"})
        with pytest.raises(StoreUnavailable):
            await store.query("users", "pseudo")
        assert await store.ping() is False
