"""
Tests for the Leaderboard Projector.
"""

import pytest

from dinohub.errors import InvalidArgument
from dinohub.services import LeaderboardService


async def make_scored_records(identities, progress, scores):
    record_ids = []
    for index, score in enumerate(scores):
        owner = await identities.create_identity(f"player{index}")
        record_id = await progress.create_progress_record(owner.id, f"player{index}")
        await progress.set_field(record_id, "mainScore", score)
        record_ids.append(record_id)
    return record_ids


class TestLeaderboard:

    @pytest.mark.asyncio
    async def test_orders_descending(self, identities, progress, leaderboard):
        await make_scored_records(identities, progress, [5, 20, 1, 20])

        entries = await leaderboard.get_leaderboard()

        assert [e.score for e in entries] == [20, 20, 5, 1]
        assert [e.position for e in entries] == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_limit_returns_true_top_n(self, identities, progress, leaderboard):
        await make_scored_records(identities, progress, [5, 20, 1, 20, 7])

        entries = await leaderboard.get_leaderboard(limit=3)

        assert [e.score for e in entries] == [20, 20, 7]

    @pytest.mark.asyncio
    async def test_empty_when_no_records(self, leaderboard):
        assert await leaderboard.get_leaderboard() == []

    @pytest.mark.asyncio
    async def test_records_without_numeric_score_are_excluded(self, identities, progress, leaderboard):
        ranked, renamed, text, flag = await make_scored_records(identities, progress, [3, 4, "high", True])
        await progress.rename_field(renamed, "mainScore", "oldScore")

        entries = await leaderboard.get_leaderboard()

        assert [e.record_id for e in entries] == [ranked]

    @pytest.mark.asyncio
    async def test_entry_carries_owner_profile_and_progress(self, identities, progress, leaderboard):
        owner = await identities.create_identity("Rex")
        await identities.update_profile(owner.id, bio="Fastest dino")
        record_id = await progress.create_progress_record(owner.id, "Rex")
        await progress.set_field(record_id, "mainScore", 1500)

        (entry,) = await leaderboard.get_leaderboard()

        assert entry.record_id == record_id
        assert entry.owner_id == owner.id
        assert entry.pseudo == "Rex"
        assert entry.profile.bio == "Fastest dino"
        assert entry.progress == {"mainScore": 1500, "level": 0}

    @pytest.mark.asyncio
    async def test_custom_ranking_field(self, store, identities, progress):
        records = await make_scored_records(identities, progress, [1, 2])
        await progress.set_field(records[0], "level", 9)
        await progress.set_field(records[1], "level", 4)

        entries = await LeaderboardService(store, ranking_field="level").get_leaderboard()

        assert [e.record_id for e in entries] == records

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -1, True, "10"])
    async def test_invalid_limit_is_rejected(self, leaderboard, limit):
        with pytest.raises(InvalidArgument):
            await leaderboard.get_leaderboard(limit=limit)

    @pytest.mark.asyncio
    async def test_limit_skips_non_numeric_scores(self, identities, progress, leaderboard):
        await make_scored_records(identities, progress, [100, "high"])

        entries = await leaderboard.get_leaderboard(limit=1)

        assert [e.score for e in entries] == [100]

    @pytest.mark.asyncio
    async def test_limit_reaches_past_many_string_scores(self, identities, progress, leaderboard):
        await make_scored_records(identities, progress, [3, "a", 9, "b", "c", 1])

        entries = await leaderboard.get_leaderboard(limit=2)

        assert [e.score for e in entries] == [9, 3]
        assert [e.position for e in entries] == [1, 2]
