#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Errors - Typed failures raised by the core and translated by the transport.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# DinoHubError.to_dict: Structured form of the error for response payloads.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# ErrorCode: Enum of machine-readable error codes.
# DinoHubError: Base class for every core failure.
# InvalidArgument: Missing, empty, self-referential or undefined input.
# NotFound: Referenced identity, record or field does not exist.
# StoreUnavailable: The document store call failed for infrastructural reasons.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# enum: Enumerations.
# typing: Type hints.

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


class DinoHubError(Exception):
    """Base exception for core failures.

    Attributes:
        code: ErrorCode enum
        message: short description of what went wrong
        details: optional structured data (e.g. {'profile_id': '...'})
    """

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code.value, "details": self.details}


class InvalidArgument(DinoHubError):
    code = ErrorCode.INVALID_ARGUMENT


class NotFound(DinoHubError):
    code = ErrorCode.NOT_FOUND


class StoreUnavailable(DinoHubError):
    code = ErrorCode.STORE_UNAVAILABLE
