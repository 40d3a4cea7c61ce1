#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Progress models - Schema-less progress values and linked game-profile records.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# is_progress_value: True for the scalar kinds a progress field may hold.
# progress_from_store: Keeps only scalar fields of a stored gameData node.
# ProgressRecord.from_store: Builds a record from a stored game profile node.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# ProgressValue: Union of number, string and boolean (strict, so bools stay bools).
# ProgressData: Mapping of field name to ProgressValue.
# ProgressRecord: Game profile metadata plus its progress fields.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# pydantic: Data validation.
# typing: Type hints.
# math: Finite check for floats.
# dinohub.constants: Stored field names.

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr
from typing import Any, Dict, Optional, Union
import math

from dinohub.constants import GAME_DATA, OWNER_UID, PSEUDO


ProgressValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
ProgressData = Dict[str, ProgressValue]


def is_progress_value(value: Any) -> bool:
    if isinstance(value, (bool, int, str)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def progress_from_store(data: Any) -> ProgressData:
    if not isinstance(data, dict):
        return {}
    return {key: value for key, value in data.items() if is_progress_value(value)}


class ProgressRecord(BaseModel):
    """Game profile owned by one identity"""
    id: str
    owner_id: Optional[str] = None
    pseudo: str = ""
    created_at: Optional[int] = None
    progress: ProgressData = Field(default_factory=dict)

    @classmethod
    def from_store(cls, record_id: str, data: Dict[str, Any]) -> "ProgressRecord":
        owner_id = data.get(OWNER_UID)
        pseudo = data.get(PSEUDO)
        created_at = data.get("createdAt")
        return cls(
            id=record_id,
            owner_id=owner_id if isinstance(owner_id, str) else None,
            pseudo=pseudo if isinstance(pseudo, str) else "",
            created_at=created_at if isinstance(created_at, int) else None,
            progress=progress_from_store(data.get(GAME_DATA)),
        )
