#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Users API router - Identity creation, password-less login, lookup and profile edits.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# find_or_create_user: Login by pseudo, creating the identity on first use. Returns {id, pseudo}.
# create_user: Always creates a new identity.
# list_users: Lists every identity.
# get_user: Full identity with profile metadata.
# update_user: Renames an identity and/or edits its profile strings.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# logger: Logger instance.
# router: Routes mounted under /api/users.
# login_router: Root-level /findOrCreateUser route.
# FindOrCreateBody: Request model for login.
# CreateUserBody: Request model for identity creation.
# UpdateUserBody: Request model for identity edits.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# fastapi: API components.
# pydantic: Data validation.
# typing: Type hints.
# logging: Logging.
# dinohub.dependencies: Service providers.
# dinohub.models.api: Response envelope.
# dinohub.services.identity_service: Identity Registry.

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from typing import Optional
import logging

from dinohub.dependencies import get_identity_service
from dinohub.models.api import ApiResponse
from dinohub.services.identity_service import IdentityService


logger = logging.getLogger(__name__)
router = APIRouter()
login_router = APIRouter()


class FindOrCreateBody(BaseModel):
    pseudo: str


class CreateUserBody(BaseModel):
    display_name: str


class UpdateUserBody(BaseModel):
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    custom_status: Optional[str] = None


@login_router.post("/findOrCreateUser", response_model=ApiResponse)
async def find_or_create_user(
    body: FindOrCreateBody,
    response: Response,
    identities: IdentityService = Depends(get_identity_service),
):
    identity, created = await identities.find_or_create_identity(body.pseudo)
    data = {"id": identity.id, "pseudo": identity.display_name}

    if created:
        logger.info(f"New user created: {identity.display_name} ({identity.id})")
        response.status_code = status.HTTP_201_CREATED
        return ApiResponse(success=True, message="New user created", data=data)

    logger.info(f"Existing user found: {identity.display_name} ({identity.id})")
    return ApiResponse(success=True, message="User found and logged in", data=data)


@router.post("", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: CreateUserBody,
    identities: IdentityService = Depends(get_identity_service),
):
    identity = await identities.create_identity(body.display_name)
    logger.info(f"New user created: {identity.display_name} ({identity.id})")
    return ApiResponse(success=True, message="User created", data=identity)


@router.get("", response_model=ApiResponse)
async def list_users(identities: IdentityService = Depends(get_identity_service)):
    users = await identities.list_identities()
    return ApiResponse(success=True, message="Users retrieved", data=users)


@router.get("/{user_id}", response_model=ApiResponse)
async def get_user(
    user_id: str,
    identities: IdentityService = Depends(get_identity_service),
):
    identity = await identities.get_identity_details(user_id)
    return ApiResponse(success=True, message="User retrieved", data=identity)


@router.patch("/{user_id}", response_model=ApiResponse)
async def update_user(
    user_id: str,
    body: UpdateUserBody,
    identities: IdentityService = Depends(get_identity_service),
):
    if body.display_name is not None:
        await identities.rename_identity(user_id, body.display_name)
        logger.info(f"User renamed: {user_id} -> {body.display_name}")

    await identities.update_profile(
        user_id,
        bio=body.bio,
        avatar_url=body.avatar_url,
        custom_status=body.custom_status,
    )

    identity = await identities.get_identity_details(user_id)
    return ApiResponse(success=True, message="User updated", data=identity)
