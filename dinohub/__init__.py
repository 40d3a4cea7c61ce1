"""DinoHub - players, friends, game progress and leaderboard backend."""

__version__ = "1.0.0"
