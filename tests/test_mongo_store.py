"""
Tests for the MongoDB adapter, with motor mocked out.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import PyMongoError

from dinohub.errors import StoreUnavailable
from dinohub.store.mongo import MongoDocumentStore


def make_cursor(documents):
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=documents)
    return cursor


@pytest.fixture
def collections():
    return {}


@pytest.fixture
def mock_db(collections):
    def get_collection(name):
        if name not in collections:
            collection = MagicMock()
            collection.find_one = AsyncMock(return_value=None)
            collection.update_one = AsyncMock()
            collection.replace_one = AsyncMock()
            collection.delete_one = AsyncMock()
            collections[name] = collection
        return collections[name]

    db = MagicMock()
    db.__getitem__.side_effect = get_collection
    return db


@pytest.fixture
def mock_client():
    client = MagicMock()
    session = MagicMock()
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=False)
    transaction = MagicMock()
    transaction.__aenter__ = AsyncMock(return_value=transaction)
    transaction.__aexit__ = AsyncMock(return_value=False)
    session.start_transaction.return_value = transaction
    client.start_session = AsyncMock(return_value=session)
    client.admin.command = AsyncMock(return_value={"ok": 1})
    return client


@pytest.fixture
def store(mock_client, mock_db):
    return MongoDocumentStore(mock_client, mock_db)


class TestMongoReads:

    @pytest.mark.asyncio
    async def test_get_document(self, store, collections, mock_db):
        mock_db["users"].find_one.return_value = {"_id": "u1", "pseudo": "Rex"}

        assert await store.get("users/u1") == {"pseudo": "Rex"}
        collections["users"].find_one.assert_awaited_once_with({"_id": "u1"})

    @pytest.mark.asyncio
    async def test_get_nested_field_uses_projection(self, store, mock_db):
        users = mock_db["users"]
        users.find_one.return_value = {"_id": "u1", "profile": {"bio": "hi"}}

        assert await store.get("users/u1/profile/bio") == "hi"
        users.find_one.assert_awaited_once_with({"_id": "u1"}, {"profile.bio": 1})

    @pytest.mark.asyncio
    async def test_get_missing_field(self, store, mock_db):
        mock_db["users"].find_one.return_value = {"_id": "u1"}

        assert await store.get("users/u1/profile/bio") is None

    @pytest.mark.asyncio
    async def test_query_with_limit_restores_ascending_order(self, store, mock_db):
        cursor = make_cursor([
            {"_id": "p2", "gameData": {"mainScore": 20}},
            {"_id": "p1", "gameData": {"mainScore": 5}},
        ])
        mock_db["gameProfiles"].find.return_value = cursor

        rows = await store.query("gameProfiles", "gameData/mainScore", limit_last=2)

        assert [key for key, _ in rows] == ["p1", "p2"]
        cursor.sort.assert_called_once_with([("gameData.mainScore", -1), ("_id", -1)])
        cursor.limit.assert_called_once_with(2)

    @pytest.mark.asyncio
    async def test_read_failure_becomes_store_unavailable(self, store, mock_db):
        mock_db["users"].find_one.side_effect = PyMongoError("connection refused")

        with pytest.raises(StoreUnavailable):
            await store.get("users/u1")


class TestMongoWrites:

    @pytest.mark.asyncio
    async def test_single_document_write_skips_transaction(self, store, mock_client, mock_db):
        await store.update({"gameProfiles/p1/gameData/score": 10})

        mock_db["gameProfiles"].update_one.assert_awaited_once_with(
            {"_id": "p1"},
            {"$set": {"gameData.score": 10}},
            upsert=True,
            session=None,
        )
        mock_client.start_session.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rename_on_one_document_combines_set_and_unset(self, store, mock_db):
        await store.update({
            "gameProfiles/p1/gameData/mainScore": 10,
            "gameProfiles/p1/gameData/score": None,
        })

        mock_db["gameProfiles"].update_one.assert_awaited_once_with(
            {"_id": "p1"},
            {"$set": {"gameData.mainScore": 10}, "$unset": {"gameData.score": ""}},
            upsert=True,
            session=None,
        )

    @pytest.mark.asyncio
    async def test_multi_document_write_uses_transaction(self, store, mock_client, mock_db):
        await store.update({
            "users/a/friendRequestsSent/b": True,
            "users/b/friendRequestsReceived/a": True,
        })

        mock_client.start_session.assert_awaited_once()
        assert mock_db["users"].update_one.await_count == 2

    @pytest.mark.asyncio
    async def test_whole_document_replace_and_delete(self, store, mock_db):
        await store.update({"gameProfiles/p1": {"pseudo": "Rex"}, "gameProfiles/p2": None})

        profiles = mock_db["gameProfiles"]
        profiles.replace_one.assert_awaited_once()
        profiles.delete_one.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_overlapping_paths_are_rejected(self, store, mock_db):
        with pytest.raises(ValueError):
            await store.update({"users/a": {"pseudo": "A"}, "users/a/pseudo": "B"})

        mock_db["users"].replace_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_write_failure_becomes_store_unavailable(self, store, mock_db):
        mock_db["users"].update_one.side_effect = PyMongoError("not primary")

        with pytest.raises(StoreUnavailable):
            await store.update({"users/a/pseudo": "A"})


class TestMongoHealth:

    @pytest.mark.asyncio
    async def test_ping(self, store, mock_client):
        assert await store.ping() is True

        mock_client.admin.command.side_effect = PyMongoError("timeout")
        assert await store.ping() is False
