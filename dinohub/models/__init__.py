"""DinoHub Models Package"""

from dinohub.models.api import ApiResponse
from dinohub.models.friend import RelationshipState
from dinohub.models.identity import Identity, IdentityPublic, ProfileMetadata
from dinohub.models.leaderboard import LeaderboardEntry
from dinohub.models.progress import ProgressData, ProgressRecord, ProgressValue

__all__ = [
    "ApiResponse",
    "RelationshipState",
    "Identity",
    "IdentityPublic",
    "ProfileMetadata",
    "LeaderboardEntry",
    "ProgressData",
    "ProgressRecord",
    "ProgressValue",
]
