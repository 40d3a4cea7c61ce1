#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Leaderboard API router - Top game profiles by the configured ranking field.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# get_leaderboard: Endpoint returning ranked game profiles.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# router: FastAPI APIRouter instance.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# fastapi: Framework components.
# typing: Type hints.
# dinohub.config: Settings for default and max limit.
# dinohub.dependencies: Service providers.
# dinohub.errors: InvalidArgument.
# dinohub.models.api: Response envelope.
# dinohub.services.leaderboard_service: Leaderboard Projector.

from fastapi import APIRouter, Depends, Query
from typing import Optional

from dinohub.config import Settings
from dinohub.dependencies import get_leaderboard_service, get_settings_from_app
from dinohub.errors import InvalidArgument
from dinohub.models.api import ApiResponse
from dinohub.services.leaderboard_service import LeaderboardService


router = APIRouter()


@router.get("", response_model=ApiResponse)
async def get_leaderboard(
    limit: Optional[int] = Query(default=None),
    leaderboard: LeaderboardService = Depends(get_leaderboard_service),
    settings: Settings = Depends(get_settings_from_app),
):
    if limit is None:
        limit = settings.leaderboard_default_limit
    if limit > settings.leaderboard_max_limit:
        raise InvalidArgument(
            f"Limit cannot exceed {settings.leaderboard_max_limit}",
            {"limit": limit},
        )

    entries = await leaderboard.get_leaderboard(limit)
    message = "Leaderboard retrieved" if entries else "No game profile with a score yet"
    return ApiResponse(success=True, message=message, data=entries)
