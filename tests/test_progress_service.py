"""
Tests for the Progress Store.
"""

import pytest

from dinohub.errors import InvalidArgument, NotFound
from dinohub.services import ProgressService
from dinohub.store.memory import MemoryDocumentStore


async def make_record(identities, progress, name="Rex"):
    owner = await identities.create_identity(name)
    record_id = await progress.create_progress_record(owner.id, name)
    return owner, record_id


class TestCreateProgressRecord:

    @pytest.mark.asyncio
    async def test_record_is_linked_to_owner(self, store, identities, progress):
        owner, record_id = await make_record(identities, progress)

        snapshot = store.snapshot()
        assert snapshot["users"][owner.id]["gameProfileIds"] == {record_id: True}
        record = snapshot["gameProfiles"][record_id]
        assert record["ownerUid"] == owner.id
        assert record["pseudo"] == "Rex"
        assert record["gameData"] == {"mainScore": 0, "level": 0}

    @pytest.mark.asyncio
    async def test_unknown_owner_is_not_found(self, store, progress):
        with pytest.raises(NotFound):
            await progress.create_progress_record("missing", "Rex")

        assert store.snapshot() == {}

    @pytest.mark.asyncio
    async def test_empty_pseudo_is_rejected(self, identities, progress):
        owner = await identities.create_identity("Rex")

        with pytest.raises(InvalidArgument):
            await progress.create_progress_record(owner.id, " ")

    @pytest.mark.asyncio
    async def test_owner_can_hold_several_records(self, identities, progress):
        owner, first = await make_record(identities, progress)
        second = await progress.create_progress_record(owner.id, "Rex alt")

        records = await progress.list_records_for_owner(owner.id)

        assert {r.id for r in records} == {first, second}
        assert (await identities.get_identity_details(owner.id)).game_profile_ids == [first, second]

    @pytest.mark.asyncio
    async def test_unknown_owner_has_no_records(self, progress):
        assert await progress.list_records_for_owner("nobody") == []


class TestFields:

    @pytest.mark.asyncio
    async def test_set_then_get(self, identities, progress):
        _, record_id = await make_record(identities, progress)

        await progress.set_field(record_id, "score", 10)

        assert await progress.get_field(record_id, "score") == 10

    @pytest.mark.asyncio
    async def test_field_may_change_type(self, identities, progress):
        _, record_id = await make_record(identities, progress)

        await progress.set_field(record_id, "skin", 3)
        await progress.set_field(record_id, "skin", "green")
        await progress.set_field(record_id, "skin", False)

        assert await progress.get_field(record_id, "skin") is False

    @pytest.mark.asyncio
    async def test_missing_value_is_rejected(self, identities, progress):
        _, record_id = await make_record(identities, progress)

        with pytest.raises(InvalidArgument):
            await progress.set_field(record_id, "score", None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [[1, 2], {"a": 1}, float("nan")])
    async def test_non_scalar_value_is_rejected(self, identities, progress, value):
        _, record_id = await make_record(identities, progress)

        with pytest.raises(InvalidArgument):
            await progress.set_field(record_id, "score", value)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["", "high.score", "a/b", "$x"])
    async def test_bad_field_names_are_rejected(self, identities, progress, field):
        _, record_id = await make_record(identities, progress)

        with pytest.raises(InvalidArgument):
            await progress.set_field(record_id, field, 1)

    @pytest.mark.asyncio
    async def test_set_on_missing_record_is_not_found(self, store, progress):
        with pytest.raises(NotFound):
            await progress.set_field("missing", "score", 1)

        assert store.snapshot() == {}

    @pytest.mark.asyncio
    async def test_get_missing_field_is_not_found(self, identities, progress):
        _, record_id = await make_record(identities, progress)

        with pytest.raises(NotFound) as exc_info:
            await progress.get_field(record_id, "coins")

        assert exc_info.value.details["field"] == "coins"

    @pytest.mark.asyncio
    async def test_get_field_on_missing_record_is_not_found(self, progress):
        with pytest.raises(NotFound):
            await progress.get_field("missing", "score")

    @pytest.mark.asyncio
    async def test_whole_progress_is_empty_before_first_write(self):
        store = MemoryDocumentStore({"gameProfiles": {"p1": {"profileId": "p1", "pseudo": "Rex"}}})
        service = ProgressService(store, identities=None)

        assert await service.get_progress("p1") == {}

    @pytest.mark.asyncio
    async def test_whole_progress_on_missing_record(self, progress):
        with pytest.raises(NotFound):
            await progress.get_progress("missing")

    @pytest.mark.asyncio
    async def test_record_includes_metadata_and_progress(self, identities, progress):
        owner, record_id = await make_record(identities, progress)
        await progress.set_field(record_id, "mainScore", 42)

        record = await progress.get_progress_record(record_id)

        assert record.owner_id == owner.id
        assert record.pseudo == "Rex"
        assert record.progress == {"mainScore": 42, "level": 0}


class TestRenameField:

    @pytest.mark.asyncio
    async def test_rename_moves_value(self, identities, progress):
        _, record_id = await make_record(identities, progress)
        await progress.set_field(record_id, "score", 10)

        moved = await progress.rename_field(record_id, "score", "mainScore")

        assert moved == 10
        assert await progress.get_field(record_id, "mainScore") == 10
        with pytest.raises(NotFound):
            await progress.get_field(record_id, "score")

    @pytest.mark.asyncio
    async def test_rename_missing_source_leaves_record_unchanged(self, store, identities, progress):
        _, record_id = await make_record(identities, progress)
        before = store.snapshot()

        with pytest.raises(NotFound):
            await progress.rename_field(record_id, "score", "mainScore")

        assert store.snapshot() == before

    @pytest.mark.asyncio
    async def test_rename_overwrites_target(self, identities, progress):
        _, record_id = await make_record(identities, progress)
        await progress.set_field(record_id, "best", 99)

        await progress.rename_field(record_id, "best", "mainScore")

        assert await progress.get_progress(record_id) == {"mainScore": 99, "level": 0}

    @pytest.mark.asyncio
    async def test_rename_to_same_name_keeps_value(self, identities, progress):
        _, record_id = await make_record(identities, progress)

        await progress.rename_field(record_id, "level", "level")

        assert await progress.get_field(record_id, "level") == 0

    @pytest.mark.asyncio
    async def test_rename_on_missing_record(self, progress):
        with pytest.raises(NotFound):
            await progress.rename_field("missing", "score", "mainScore")
