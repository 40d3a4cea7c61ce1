#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Relationship service - Friend request lifecycle and the symmetric friend sets.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# RelationshipService.send_request: Writes both mirror entries of a pending request.
# RelationshipService.accept_request: Creates the friendship and clears pending entries.
# RelationshipService.decline_request: Clears both mirror entries of a pending request.
# RelationshipService.list_received_requests: Identities that sent the user a request.
# RelationshipService.list_sent_requests: Identities the user sent a request to.
# RelationshipService.list_friends: Identities in the user's friend set.
# RelationshipService.get_relationship: State of a pair from one side.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# RelationshipService: Relationship Manager component.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# typing: Type hints.
# dinohub.constants: Relationship set names.
# dinohub.errors: InvalidArgument.
# dinohub.models: Identity projection and relationship state.
# dinohub.services.identity_service: Display name resolution.
# dinohub.store.base: Store protocol and path helpers.

from typing import List

from dinohub.constants import FRIENDS, REQUESTS_RECEIVED, REQUESTS_SENT, USERS
from dinohub.errors import InvalidArgument
from dinohub.models.friend import RelationshipState
from dinohub.models.identity import IdentityPublic
from dinohub.services.identity_service import IdentityService
from dinohub.store.base import DocumentStore, join_path, validate_key


def _entry(user_id: str, set_name: str, other_id: str) -> str:
    return join_path(USERS, user_id, set_name, other_id)


def _require_pair(user_id: str, other_id: str, user_field: str, other_field: str) -> None:
    validate_key(user_id, user_field)
    validate_key(other_id, other_field)
    if user_id == other_id:
        raise InvalidArgument(
            "A player cannot be friends with themselves",
            {user_field: user_id, other_field: other_id},
        )


class RelationshipService:
    """
    Relationship Manager.

    A pending request A -> B lives twice: users/A/friendRequestsSent/B and
    users/B/friendRequestsReceived/A. Both entries, and both sides of a
    friendship, are only ever written in one atomic update.

    Repeated or reverse-direction requests and accepting a request that was
    never sent are allowed; clearing an absent entry is a no-op.
    """

    def __init__(self, store: DocumentStore, identities: IdentityService):
        self.store = store
        self.identities = identities

    async def send_request(self, from_id: str, to_id: str) -> None:
        _require_pair(from_id, to_id, "from_user_id", "to_user_id")

        await self.store.update({
            _entry(from_id, REQUESTS_SENT, to_id): True,
            _entry(to_id, REQUESTS_RECEIVED, from_id): True,
        })

    async def accept_request(self, user_id: str, requester_id: str) -> None:
        _require_pair(user_id, requester_id, "user_id", "requester_id")

        await self.store.update({
            _entry(user_id, FRIENDS, requester_id): True,
            _entry(requester_id, FRIENDS, user_id): True,
            _entry(user_id, REQUESTS_RECEIVED, requester_id): None,
            _entry(requester_id, REQUESTS_SENT, user_id): None,
            # A crossing request in the other direction is settled too
            _entry(user_id, REQUESTS_SENT, requester_id): None,
            _entry(requester_id, REQUESTS_RECEIVED, user_id): None,
        })

    async def decline_request(self, user_id: str, requester_id: str) -> None:
        _require_pair(user_id, requester_id, "user_id", "requester_id")

        await self.store.update({
            _entry(user_id, REQUESTS_RECEIVED, requester_id): None,
            _entry(requester_id, REQUESTS_SENT, user_id): None,
        })

    async def _member_ids(self, user_id: str, set_name: str) -> List[str]:
        validate_key(user_id, "user_id")
        members = await self.store.get(join_path(USERS, user_id, set_name))
        if not isinstance(members, dict):
            return []
        return [member_id for member_id, flag in members.items() if flag]

    async def list_received_requests(self, user_id: str) -> List[IdentityPublic]:
        return await self.identities.resolve_identities(
            await self._member_ids(user_id, REQUESTS_RECEIVED)
        )

    async def list_sent_requests(self, user_id: str) -> List[IdentityPublic]:
        return await self.identities.resolve_identities(
            await self._member_ids(user_id, REQUESTS_SENT)
        )

    async def list_friends(self, user_id: str) -> List[IdentityPublic]:
        return await self.identities.resolve_identities(
            await self._member_ids(user_id, FRIENDS)
        )

    async def get_relationship(self, user_id: str, other_id: str) -> RelationshipState:
        _require_pair(user_id, other_id, "user_id", "other_id")

        if await self.store.get(_entry(user_id, FRIENDS, other_id)):
            return RelationshipState.FRIENDS
        if await self.store.get(_entry(user_id, REQUESTS_SENT, other_id)):
            return RelationshipState.REQUEST_SENT
        if await self.store.get(_entry(user_id, REQUESTS_RECEIVED, other_id)):
            return RelationshipState.REQUEST_RECEIVED
        return RelationshipState.NONE
