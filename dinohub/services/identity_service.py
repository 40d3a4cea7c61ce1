#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Identity service - Creates and resolves player identities stored under `users`.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# IdentityService.create_identity: Writes a new identity with a fresh id.
# IdentityService.find_identity_by_name: First identity whose display name matches exactly.
# IdentityService.find_or_create_identity: Password-less login, creating on first use.
# IdentityService.get_identity: Public projection of one identity.
# IdentityService.get_identity_details: Full identity with profile metadata.
# IdentityService.list_identities: Every identity's public projection.
# IdentityService.rename_identity: Changes a display name.
# IdentityService.update_profile: Changes bio, avatar or status strings.
# IdentityService.resolve_identities: Maps ids to projections, dropping unknown ids.
# require_display_name: Validates a display name.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# IdentityService: Identity Registry component.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# typing: Type hints.
# dinohub.constants: Store layout.
# dinohub.errors: Typed failures.
# dinohub.models.identity: Identity models.
# dinohub.store.base: Store protocol and path helpers.
# dinohub.utils.ids: Default id and clock sources.

from typing import Any, Dict, Iterable, List, Optional, Tuple

from dinohub.constants import PROFILE, PSEUDO, USERS
from dinohub.errors import InvalidArgument, NotFound
from dinohub.models.identity import (
    Identity,
    IdentityPublic,
    ProfileMetadata,
    display_name_from_store,
)
from dinohub.store.base import DocumentStore, join_path, validate_key
from dinohub.utils.ids import Clock, IdFactory, new_id, server_timestamp

PROFILE_FIELDS = {
    "bio": "bio",
    "avatar_url": "avatarUrl",
    "custom_status": "customStatus",
}


def require_display_name(display_name: Any) -> str:
    if not isinstance(display_name, str) or not display_name.strip():
        raise InvalidArgument(
            "Display name is required and cannot be empty",
            {"field": "display_name"},
        )
    return display_name


class IdentityService:
    """
    Identity Registry.

    Identity is by opaque id only: display names are not unique and are
    stored exactly as given.
    """

    def __init__(
        self,
        store: DocumentStore,
        id_factory: IdFactory = new_id,
        clock: Clock = server_timestamp,
    ):
        self.store = store
        self.id_factory = id_factory
        self.clock = clock

    async def _load(self, user_id: str) -> Dict[str, Any]:
        validate_key(user_id, "user_id")
        data = await self.store.get(join_path(USERS, user_id))
        if not isinstance(data, dict):
            raise NotFound("User not found", {"user_id": user_id})
        return data

    async def create_identity(self, display_name: str) -> IdentityPublic:
        require_display_name(display_name)

        user_id = self.id_factory()
        await self.store.update({
            join_path(USERS, user_id): {
                "userId": user_id,
                PSEUDO: display_name,
                PROFILE: ProfileMetadata().to_store(),
                "createdAt": self.clock(),
            }
        })
        return IdentityPublic(id=user_id, display_name=display_name)

    async def find_identity_by_name(self, display_name: str) -> Optional[IdentityPublic]:
        require_display_name(display_name)

        for user_id, data in await self.store.query(USERS, PSEUDO):
            if isinstance(data, dict) and data.get(PSEUDO) == display_name:
                return IdentityPublic(id=user_id, display_name=display_name)
        return None

    async def find_or_create_identity(self, display_name: str) -> Tuple[IdentityPublic, bool]:
        """
        Return the first identity named display_name, creating one if none exists.

        Returns:
            (identity, created) where created is True when a new record was written
        """
        existing = await self.find_identity_by_name(display_name)
        if existing:
            return existing, False
        return await self.create_identity(display_name), True

    async def get_identity(self, user_id: str) -> IdentityPublic:
        data = await self._load(user_id)
        return IdentityPublic(id=user_id, display_name=display_name_from_store(data.get(PSEUDO)))

    async def get_identity_details(self, user_id: str) -> Identity:
        return Identity.from_store(user_id, await self._load(user_id))

    async def list_identities(self) -> List[IdentityPublic]:
        users = await self.store.get(USERS)
        if not isinstance(users, dict):
            return []

        identities = []
        for user_id, data in users.items():
            name = data.get(PSEUDO) if isinstance(data, dict) else None
            identities.append(IdentityPublic(id=user_id, display_name=display_name_from_store(name)))
        return identities

    async def rename_identity(self, user_id: str, display_name: str) -> IdentityPublic:
        require_display_name(display_name)
        await self._load(user_id)

        await self.store.update({join_path(USERS, user_id, PSEUDO): display_name})
        return IdentityPublic(id=user_id, display_name=display_name)

    async def update_profile(
        self,
        user_id: str,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
        custom_status: Optional[str] = None,
    ) -> ProfileMetadata:
        """Update the given profile strings, leaving the others untouched"""
        requested = {"bio": bio, "avatar_url": avatar_url, "custom_status": custom_status}
        for name, value in requested.items():
            if value is not None and not isinstance(value, str):
                raise InvalidArgument(f"{name} must be a string", {"field": name})

        data = await self._load(user_id)
        current = ProfileMetadata.from_store(data.get(PROFILE))

        changes = {
            join_path(USERS, user_id, PROFILE, PROFILE_FIELDS[name]): value
            for name, value in requested.items()
            if value is not None
        }
        if not changes:
            return current

        await self.store.update(changes)
        return current.model_copy(update={k: v for k, v in requested.items() if v is not None})

    async def resolve_identities(self, user_ids: Iterable[str]) -> List[IdentityPublic]:
        """Resolve ids in order; ids without a stored display name are skipped."""
        resolved = []
        for user_id in user_ids:
            name = await self.store.get(join_path(USERS, user_id, PSEUDO))
            if name is None:
                continue
            resolved.append(IdentityPublic(id=user_id, display_name=display_name_from_store(name)))
        return resolved
