#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Leaderboard service - Ranks game profiles by one numeric progress field at read time.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# LeaderboardService.get_leaderboard: Top game profiles by the ranking field, descending.
# LeaderboardService._owner_profile: Profile metadata of a record's owner.
# LeaderboardService._ranked_records: Widening range read that collects the top rankable records.
# is_rankable: True for numeric scores (booleans excluded).

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# LeaderboardService: Leaderboard Projector component.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# typing: Type hints.
# math: Finite check.
# dinohub.constants: Store layout and defaults.
# dinohub.errors: InvalidArgument.
# dinohub.models: Leaderboard, identity and progress models.
# dinohub.store.base: Store protocol and path helpers.

from typing import Any, List, Optional
import math

from dinohub.constants import DEFAULT_RANKING_FIELD, GAME_DATA, GAME_PROFILES, PROFILE, USERS
from dinohub.errors import InvalidArgument
from dinohub.models.identity import ProfileMetadata
from dinohub.models.leaderboard import LeaderboardEntry
from dinohub.models.progress import ProgressRecord
from dinohub.store.base import DocumentStore, join_path, validate_key


def is_rankable(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


class LeaderboardService:
    """Leaderboard Projector. Nothing is persisted; every call re-reads the records."""

    def __init__(self, store: DocumentStore, ranking_field: str = DEFAULT_RANKING_FIELD):
        self.store = store
        self.ranking_field = validate_key(ranking_field, "ranking_field")

    async def _owner_profile(self, owner_id: Optional[str]) -> ProfileMetadata:
        if not owner_id:
            return ProfileMetadata()
        return ProfileMetadata.from_store(await self.store.get(join_path(USERS, owner_id, PROFILE)))

    async def _ranked_records(self, limit: Optional[int]) -> List[ProgressRecord]:
        """
        Read records from the top of the ascending order until `limit` rankable ones are found.

        Strings (and on some backends booleans) sort above numbers, so the
        window grows by the number of unrankable rows it had to skip.
        """
        order_by = join_path(GAME_DATA, self.ranking_field)
        window = limit

        while True:
            rows = await self.store.query(GAME_PROFILES, order_by, limit_last=window)

            ranked = []
            for record_id, data in reversed(rows):
                if not isinstance(data, dict):
                    continue
                record = ProgressRecord.from_store(record_id, data)
                if is_rankable(record.progress.get(self.ranking_field)):
                    ranked.append(record)

            if window is None or len(ranked) >= limit or len(rows) < window:
                return ranked if limit is None else ranked[:limit]
            window = limit + len(rows) - len(ranked)

    async def get_leaderboard(self, limit: Optional[int] = None) -> List[LeaderboardEntry]:
        """
        Return game profiles ordered by the ranking field, highest first.

        The limit goes into the range read itself (last N of the ascending
        order, widened past unrankable rows) so the result is the true top N.
        Profiles without a numeric value for the ranking field are left out.
        """
        if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
            raise InvalidArgument("Limit must be a positive integer", {"limit": limit})

        records = await self._ranked_records(limit)
        return [
            LeaderboardEntry(
                position=position,
                record_id=record.id,
                owner_id=record.owner_id,
                pseudo=record.pseudo,
                score=record.progress[self.ranking_field],
                profile=await self._owner_profile(record.owner_id),
                progress=record.progress,
            )
            for position, record in enumerate(records, start=1)
        ]
