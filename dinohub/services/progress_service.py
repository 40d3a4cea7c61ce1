#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Progress service - Linked game profiles holding arbitrary progress fields.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# ProgressService.create_progress_record: New game profile linked to an owner identity.
# ProgressService.get_progress_record: Profile metadata plus progress.
# ProgressService.list_records_for_owner: Every game profile an identity owns.
# ProgressService.get_progress: Whole progress map (empty until first write).
# ProgressService.get_field: Value of one progress field.
# ProgressService.set_field: Creates or overwrites one progress field.
# ProgressService.rename_field: Moves a value to a new field name in one atomic update.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# ProgressService: Progress Store component.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# typing: Type hints.
# dinohub.constants: Store layout and initial counters.
# dinohub.errors: Typed failures.
# dinohub.models.progress: Progress models.
# dinohub.services.identity_service: Owner lookups.
# dinohub.store.base: Store protocol and path helpers.
# dinohub.utils.ids: Default id and clock sources.

from typing import Any, Dict, List

from dinohub.constants import (
    GAME_DATA,
    GAME_PROFILE_IDS,
    GAME_PROFILES,
    INITIAL_GAME_DATA,
    OWNER_UID,
    PSEUDO,
    USERS,
)
from dinohub.errors import InvalidArgument, NotFound
from dinohub.models.progress import (
    ProgressData,
    ProgressRecord,
    ProgressValue,
    is_progress_value,
    progress_from_store,
)
from dinohub.services.identity_service import IdentityService, require_display_name
from dinohub.store.base import DocumentStore, join_path, validate_key
from dinohub.utils.ids import Clock, IdFactory, new_id, server_timestamp


def _field_path(record_id: str, field_name: str) -> str:
    return join_path(GAME_PROFILES, record_id, GAME_DATA, field_name)


class ProgressService:
    """
    Progress Store.

    Records live at gameProfiles/<profileId>; the progress fields sit in the
    record's gameData map so they never collide with the record metadata.
    A field may change type between writes.
    """

    def __init__(
        self,
        store: DocumentStore,
        identities: IdentityService,
        id_factory: IdFactory = new_id,
        clock: Clock = server_timestamp,
    ):
        self.store = store
        self.identities = identities
        self.id_factory = id_factory
        self.clock = clock

    async def _load(self, record_id: str) -> Dict[str, Any]:
        validate_key(record_id, "profile_id")
        data = await self.store.get(join_path(GAME_PROFILES, record_id))
        if not isinstance(data, dict):
            raise NotFound("Game profile not found", {"profile_id": record_id})
        return data

    async def _require_record(self, record_id: str) -> None:
        validate_key(record_id, "profile_id")
        if await self.store.get(join_path(GAME_PROFILES, record_id, "profileId")) is None:
            raise NotFound("Game profile not found", {"profile_id": record_id})

    async def create_progress_record(self, owner_id: str, pseudo: str) -> str:
        """
        Create a game profile for owner_id.

        The record and the owner's index entry are written together.

        Returns:
            The new profile id
        """
        require_display_name(pseudo)
        await self.identities.get_identity(owner_id)

        record_id = self.id_factory()
        await self.store.update({
            join_path(GAME_PROFILES, record_id): {
                "profileId": record_id,
                PSEUDO: pseudo,
                OWNER_UID: owner_id,
                GAME_DATA: dict(INITIAL_GAME_DATA),
                "createdAt": self.clock(),
            },
            join_path(USERS, owner_id, GAME_PROFILE_IDS, record_id): True,
        })
        return record_id

    async def get_progress_record(self, record_id: str) -> ProgressRecord:
        return ProgressRecord.from_store(record_id, await self._load(record_id))

    async def list_records_for_owner(self, owner_id: str) -> List[ProgressRecord]:
        validate_key(owner_id, "user_id")
        index = await self.store.get(join_path(USERS, owner_id, GAME_PROFILE_IDS))
        if not isinstance(index, dict):
            return []

        records = []
        for record_id in index:
            data = await self.store.get(join_path(GAME_PROFILES, record_id))
            if isinstance(data, dict):
                records.append(ProgressRecord.from_store(record_id, data))
        return records

    async def get_progress(self, record_id: str) -> ProgressData:
        return progress_from_store((await self._load(record_id)).get(GAME_DATA))

    async def get_field(self, record_id: str, field_name: str) -> ProgressValue:
        validate_key(field_name, "field")
        await self._require_record(record_id)

        value = await self.store.get(_field_path(record_id, field_name))
        if value is None:
            raise NotFound(
                f"Field '{field_name}' not found",
                {"profile_id": record_id, "field": field_name},
            )
        return value

    async def set_field(self, record_id: str, field_name: str, value: ProgressValue) -> None:
        validate_key(field_name, "field")
        if value is None:
            raise InvalidArgument("Value is required", {"field": field_name})
        if not is_progress_value(value):
            raise InvalidArgument(
                "Value must be a number, a string or a boolean",
                {"field": field_name},
            )
        await self._require_record(record_id)

        await self.store.update({_field_path(record_id, field_name): value})

    async def rename_field(self, record_id: str, old_name: str, new_name: str) -> ProgressValue:
        """
        Move the value of old_name to new_name, overwriting any value new_name had.

        Returns:
            The moved value
        """
        validate_key(old_name, "old_field")
        validate_key(new_name, "new_field")
        await self._require_record(record_id)

        value = await self.store.get(_field_path(record_id, old_name))
        if value is None:
            raise NotFound(
                f"Field '{old_name}' not found",
                {"profile_id": record_id, "field": old_name},
            )
        if old_name == new_name:
            return value

        await self.store.update({
            _field_path(record_id, new_name): value,
            _field_path(record_id, old_name): None,
        })
        return value
