#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# API models - Response envelope shared by every route.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# None

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# ApiResponse: {success, message, data} envelope.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# pydantic: Data validation.
# typing: Type hints.

from pydantic import BaseModel
from typing import Any


class ApiResponse(BaseModel):
    success: bool
    message: str = ""
    data: Any = None
