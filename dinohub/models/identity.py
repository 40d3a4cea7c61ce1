#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Identity models - Player identities, their public projection and profile metadata.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# ProfileMetadata.from_store: Builds metadata from a stored profile node.
# ProfileMetadata.to_store: Converts metadata to the stored camelCase shape.
# Identity.from_store: Builds a full identity from a stored user node.
# display_name_from_store: Returns a stored name or the placeholder.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# ProfileMetadata: Free-form bio/avatar/status strings.
# IdentityPublic: Public projection {id, display_name}.
# Identity: Full identity record.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# pydantic: Data validation.
# typing: Type hints.
# dinohub.constants: Placeholder name and stored field names.

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from dinohub.constants import GAME_PROFILE_IDS, PROFILE, PSEUDO, UNKNOWN_DISPLAY_NAME


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def display_name_from_store(value: Any) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return UNKNOWN_DISPLAY_NAME


class ProfileMetadata(BaseModel):
    """Profile strings shown next to a player"""
    bio: str = ""
    avatar_url: str = ""
    custom_status: str = ""

    @classmethod
    def from_store(cls, data: Any) -> "ProfileMetadata":
        if not isinstance(data, dict):
            return cls()
        return cls(
            bio=_text(data.get("bio")),
            avatar_url=_text(data.get("avatarUrl")),
            custom_status=_text(data.get("customStatus")),
        )

    def to_store(self) -> Dict[str, str]:
        return {
            "bio": self.bio,
            "avatarUrl": self.avatar_url,
            "customStatus": self.custom_status,
        }


class IdentityPublic(BaseModel):
    """Public identity projection"""
    id: str
    display_name: str


class Identity(IdentityPublic):
    """Complete identity record"""
    profile: ProfileMetadata = Field(default_factory=ProfileMetadata)
    created_at: Optional[int] = None
    game_profile_ids: List[str] = Field(default_factory=list)

    @classmethod
    def from_store(cls, user_id: str, data: Dict[str, Any]) -> "Identity":
        created_at = data.get("createdAt")
        profile_ids = data.get(GAME_PROFILE_IDS)
        return cls(
            id=user_id,
            display_name=display_name_from_store(data.get(PSEUDO)),
            profile=ProfileMetadata.from_store(data.get(PROFILE)),
            created_at=created_at if isinstance(created_at, int) else None,
            game_profile_ids=list(profile_ids) if isinstance(profile_ids, dict) else [],
        )
