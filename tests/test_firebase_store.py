"""
Tests for the Realtime Database adapter, with the firebase_admin SDK mocked.
"""

import json
from pathlib import Path

import pytest
from unittest.mock import MagicMock, patch

from firebase_admin.exceptions import UnavailableError

from dinohub.constants import DEFAULT_RANKING_FIELD, GAME_DATA, GAME_PROFILES, OWNER_UID, PSEUDO, USERS
from dinohub.errors import StoreUnavailable
from dinohub.store.firebase import FirebaseDocumentStore


@pytest.fixture
def reference():
    with patch("dinohub.store.firebase.db.reference") as mock_reference:
        yield mock_reference


class TestFirebaseDocumentStore:

    @pytest.mark.asyncio
    async def test_get_reads_absolute_path(self, reference):
        reference.return_value.get.return_value = "Rex"
        store = FirebaseDocumentStore()

        assert await store.get("users/u1/pseudo") == "Rex"
        reference.assert_called_once_with("/users/u1/pseudo", app=None)

    @pytest.mark.asyncio
    async def test_update_is_one_multi_path_call(self, reference):
        store = FirebaseDocumentStore()
        changes = {"users/a/friends/b": True, "users/b/friends/a": True}

        await store.update(changes)

        reference.assert_called_once_with("/", app=None)
        reference.return_value.update.assert_called_once_with(changes)

    @pytest.mark.asyncio
    async def test_empty_update_is_rejected(self, reference):
        with pytest.raises(ValueError):
            await FirebaseDocumentStore().update({})

    @pytest.mark.asyncio
    async def test_query_orders_and_limits(self, reference):
        ordered = reference.return_value.order_by_child.return_value
        ordered.limit_to_last.return_value.get.return_value = {"p1": {"pseudo": "Rex"}}

        rows = await FirebaseDocumentStore().query("gameProfiles", "gameData/mainScore", limit_last=10)

        assert rows == [("p1", {"pseudo": "Rex"})]
        reference.return_value.order_by_child.assert_called_once_with("gameData/mainScore")
        ordered.limit_to_last.assert_called_once_with(10)

    @pytest.mark.asyncio
    async def test_query_without_results(self, reference):
        reference.return_value.order_by_child.return_value.get.return_value = None

        assert await FirebaseDocumentStore().query("users", "pseudo") == []

    @pytest.mark.asyncio
    async def test_sdk_failure_becomes_store_unavailable(self, reference):
        reference.return_value.get.side_effect = UnavailableError("backend down")

        with pytest.raises(StoreUnavailable) as exc_info:
            await FirebaseDocumentStore().get("users/u1")

        assert exc_info.value.details == {"code": "UNAVAILABLE"}

    @pytest.mark.asyncio
    async def test_ping(self, reference):
        store = FirebaseDocumentStore()
        assert await store.ping() is True

        limited = reference.return_value.order_by_key.return_value.limit_to_first.return_value
        limited.get.side_effect = UnavailableError("backend down")
        assert await store.ping() is False

    @pytest.mark.asyncio
    async def test_close_deletes_owned_app(self):
        app = MagicMock()
        with patch("dinohub.store.firebase.firebase_admin.delete_app") as delete_app:
            await FirebaseDocumentStore(app=app, owns_app=True).close()
            await FirebaseDocumentStore(app=app).close()

        delete_app.assert_called_once_with(app)


class TestDatabaseRules:

    def test_queried_children_are_indexed(self):
        rules_path = Path(__file__).resolve().parent.parent / "database.rules.json"
        rules = json.loads(rules_path.read_text())["rules"]

        assert PSEUDO in rules[USERS][".indexOn"]
        assert f"{GAME_DATA}/{DEFAULT_RANKING_FIELD}" in rules[GAME_PROFILES][".indexOn"]
        assert OWNER_UID in rules[GAME_PROFILES][".indexOn"]
