#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Game profiles API router - Linked progress records and their schema-less fields.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# create_game_profile: Create a game profile linked to a user.
# get_game_profile: Profile metadata plus progress.
# get_game_profiles_by_user: Every game profile a user owns.
# get_game_data: Whole progress map of a profile.
# get_game_data_field: One progress field.
# update_game_data: Create or overwrite one progress field.
# rename_game_data_field: Rename one progress field.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# logger: Logger instance.
# router: Routes mounted under /api/game.
# CreateProfileBody: Request model for profile creation.
# SetFieldBody: Request model for field writes.
# RenameFieldBody: Request model for field renames.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# fastapi: API components.
# pydantic: Data validation.
# typing: Type hints.
# logging: Logging.
# dinohub.dependencies: Service providers.
# dinohub.models: Response envelope and progress value type.
# dinohub.services.progress_service: Progress Store.

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
import logging

from dinohub.dependencies import get_progress_service
from dinohub.models.api import ApiResponse
from dinohub.models.progress import ProgressValue
from dinohub.services.progress_service import ProgressService


logger = logging.getLogger(__name__)
router = APIRouter()


class CreateProfileBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pseudo: str
    owner_uid: str = Field(alias="ownerUid")


class SetFieldBody(BaseModel):
    field: str
    value: Optional[ProgressValue] = None


class RenameFieldBody(BaseModel):
    old_field: str
    new_field: str


@router.post("/profiles", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def create_game_profile(
    body: CreateProfileBody,
    progress: ProgressService = Depends(get_progress_service),
):
    profile_id = await progress.create_progress_record(body.owner_uid, body.pseudo)
    logger.info(f"New game profile created: {body.pseudo} ({profile_id}) for user {body.owner_uid}")
    return ApiResponse(
        success=True,
        message="Game profile created",
        data={"profileId": profile_id, "pseudo": body.pseudo},
    )


@router.get("/profiles/{profile_id}", response_model=ApiResponse)
async def get_game_profile(
    profile_id: str,
    progress: ProgressService = Depends(get_progress_service),
):
    record = await progress.get_progress_record(profile_id)
    return ApiResponse(success=True, message="Game profile retrieved", data=record)


@router.get("/profiles-by-user/{user_id}", response_model=ApiResponse)
async def get_game_profiles_by_user(
    user_id: str,
    progress: ProgressService = Depends(get_progress_service),
):
    records = await progress.list_records_for_owner(user_id)
    message = "Game profiles retrieved" if records else "No game profile found for this user"
    return ApiResponse(success=True, message=message, data=records)


@router.get("/profiles/{profile_id}/gameData", response_model=ApiResponse)
async def get_game_data(
    profile_id: str,
    progress: ProgressService = Depends(get_progress_service),
):
    data = await progress.get_progress(profile_id)
    return ApiResponse(success=True, message="Game data retrieved", data=data)


@router.get("/profiles/{profile_id}/gameData/{field}", response_model=ApiResponse)
async def get_game_data_field(
    profile_id: str,
    field: str,
    progress: ProgressService = Depends(get_progress_service),
):
    value = await progress.get_field(profile_id, field)
    return ApiResponse(success=True, message=f"Game data '{field}' retrieved", data={field: value})


@router.post("/profiles/{profile_id}/gameData", response_model=ApiResponse)
async def update_game_data(
    profile_id: str,
    body: SetFieldBody,
    progress: ProgressService = Depends(get_progress_service),
):
    await progress.set_field(profile_id, body.field, body.value)
    return ApiResponse(success=True, message=f"Game data '{body.field}' of profile '{profile_id}' updated")


@router.post("/profiles/{profile_id}/gameData/rename", response_model=ApiResponse)
async def rename_game_data_field(
    profile_id: str,
    body: RenameFieldBody,
    progress: ProgressService = Depends(get_progress_service),
):
    value = await progress.rename_field(profile_id, body.old_field, body.new_field)
    logger.info(f"Game data field renamed on {profile_id}: {body.old_field} -> {body.new_field}")
    return ApiResponse(
        success=True,
        message=f"Game data '{body.old_field}' renamed to '{body.new_field}'",
        data={body.new_field: value},
    )
