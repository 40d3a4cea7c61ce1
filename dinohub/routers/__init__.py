"""DinoHub Routers Package"""

from dinohub.routers import friends, leaderboard, profiles, users

__all__ = [
    "friends",
    "leaderboard",
    "profiles",
    "users",
]
