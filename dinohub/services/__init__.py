"""DinoHub Services Package"""

from dinohub.services.identity_service import IdentityService
from dinohub.services.leaderboard_service import LeaderboardService
from dinohub.services.progress_service import ProgressService
from dinohub.services.relationship_service import RelationshipService

__all__ = [
    "IdentityService",
    "LeaderboardService",
    "ProgressService",
    "RelationshipService",
]
