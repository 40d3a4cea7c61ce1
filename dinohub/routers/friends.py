#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Friends API router - Friend requests, friendships and relationship status.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# send_friend_request: Send a friend request to another user.
# accept_friend_request: Accept a pending friend request.
# decline_friend_request: Decline a pending friend request.
# get_friends: Retrieve the list of current friends.
# get_friend_requests: Retrieve received friend requests.
# get_sent_friend_requests: Retrieve sent friend requests.
# get_relationship_status: State of a pair from the first user's side.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# logger: Logger instance.
# router: FastAPI APIRouter instance.
# SendFriendRequestBody: Request model for sending friend requests.
# AcceptDeclineBody: Request model for accepting/declining requests.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# fastapi: API components.
# pydantic: Data validation.
# logging: Logging.
# dinohub.dependencies: Service providers.
# dinohub.models.api: Response envelope.
# dinohub.services.relationship_service: Relationship Manager.

from fastapi import APIRouter, Depends
from pydantic import BaseModel
import logging

from dinohub.dependencies import get_relationship_service
from dinohub.models.api import ApiResponse
from dinohub.services.relationship_service import RelationshipService


logger = logging.getLogger(__name__)
router = APIRouter()


class SendFriendRequestBody(BaseModel):
    from_user_id: str
    to_user_id: str


class AcceptDeclineBody(BaseModel):
    user_id: str
    requester_id: str


@router.post("/request", response_model=ApiResponse)
async def send_friend_request(
    body: SendFriendRequestBody,
    relationships: RelationshipService = Depends(get_relationship_service),
):
    await relationships.send_request(body.from_user_id, body.to_user_id)
    logger.info(f"Friend request sent: {body.from_user_id} -> {body.to_user_id}")
    return ApiResponse(success=True, message="Friend request sent")


@router.post("/accept", response_model=ApiResponse)
async def accept_friend_request(
    body: AcceptDeclineBody,
    relationships: RelationshipService = Depends(get_relationship_service),
):
    await relationships.accept_request(body.user_id, body.requester_id)
    logger.info(f"Friendship created: {body.requester_id} <-> {body.user_id}")
    return ApiResponse(success=True, message="Friend request accepted")


@router.post("/decline", response_model=ApiResponse)
async def decline_friend_request(
    body: AcceptDeclineBody,
    relationships: RelationshipService = Depends(get_relationship_service),
):
    await relationships.decline_request(body.user_id, body.requester_id)
    logger.info(f"Friend request declined: {body.requester_id} -> {body.user_id}")
    return ApiResponse(success=True, message="Friend request declined")


@router.get("/{user_id}", response_model=ApiResponse)
async def get_friends(
    user_id: str,
    relationships: RelationshipService = Depends(get_relationship_service),
):
    friends = await relationships.list_friends(user_id)
    return ApiResponse(success=True, message="Friends retrieved", data=friends)


@router.get("/{user_id}/requests", response_model=ApiResponse)
async def get_friend_requests(
    user_id: str,
    relationships: RelationshipService = Depends(get_relationship_service),
):
    requests = await relationships.list_received_requests(user_id)
    return ApiResponse(success=True, message="Friend requests retrieved", data=requests)


@router.get("/{user_id}/requests/sent", response_model=ApiResponse)
async def get_sent_friend_requests(
    user_id: str,
    relationships: RelationshipService = Depends(get_relationship_service),
):
    requests = await relationships.list_sent_requests(user_id)
    return ApiResponse(success=True, message="Sent friend requests retrieved", data=requests)


@router.get("/{user_id}/status/{other_id}", response_model=ApiResponse)
async def get_relationship_status(
    user_id: str,
    other_id: str,
    relationships: RelationshipService = Depends(get_relationship_service),
):
    state = await relationships.get_relationship(user_id, other_id)
    return ApiResponse(success=True, message="Relationship retrieved", data={"status": state.value})
