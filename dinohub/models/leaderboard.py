#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Leaderboard models - Read-time ranking rows.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# None

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# LeaderboardEntry: One ranked game profile.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# pydantic: Data validation.
# typing: Type hints.
# dinohub.models: Identity and progress models.

from pydantic import BaseModel, Field, StrictFloat, StrictInt
from typing import Optional, Union

from dinohub.models.identity import ProfileMetadata
from dinohub.models.progress import ProgressData


class LeaderboardEntry(BaseModel):
    """Leaderboard entry"""
    position: int
    record_id: str
    owner_id: Optional[str] = None
    pseudo: str
    score: Union[StrictInt, StrictFloat]
    profile: ProfileMetadata = Field(default_factory=ProfileMetadata)
    progress: ProgressData = Field(default_factory=dict)
