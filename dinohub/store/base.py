#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Store base - The document store protocol the core depends on, plus path helpers.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# DocumentStore.get: Point read of a path.
# DocumentStore.query: Range read of a path's children ordered by a child field.
# DocumentStore.update: Atomic multi-path update (None deletes).
# DocumentStore.ping: Checks backend connectivity.
# DocumentStore.close: Releases backend resources.
# split_path: Splits a slash-separated path into segments.
# join_path: Joins segments into a slash-separated path.
# validate_key: Rejects keys the hierarchical store cannot hold.
# check_disjoint: Rejects update batches whose paths overlap.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# Changes: Mapping of path to new value (or None to delete).
# QueryResult: Ordered (key, value) pairs returned by a range read.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# typing: Type hints.
# dinohub.constants: Key restrictions.
# dinohub.errors: InvalidArgument.

from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from dinohub.constants import FORBIDDEN_KEY_CHARS
from dinohub.errors import InvalidArgument

Changes = Dict[str, Any]
QueryResult = List[Tuple[str, Any]]

MAX_KEY_BYTES = 768


class DocumentStore(Protocol):
    """Hierarchical key-path store shared by every core component.

    Paths are slash-separated ("users/<uid>/friends"). Implementations must
    apply every path of one `update` call all-or-nothing.
    """

    async def get(self, path: str) -> Any:
        """Return the value at path, or None when nothing is stored there."""
        ...

    async def query(
        self,
        path: str,
        order_by: str,
        limit_last: Optional[int] = None,
    ) -> QueryResult:
        """Return the children of path ordered ascending by the order_by child.

        With limit_last only the last N children of that ordering are returned.
        """
        ...

    async def update(self, changes: Changes) -> None:
        """Atomically write every path in changes. A None value deletes the path."""
        ...

    async def ping(self) -> bool:
        ...

    async def close(self) -> None:
        ...


def split_path(path: str) -> List[str]:
    return [segment for segment in path.split("/") if segment]


def join_path(*segments: str) -> str:
    return "/".join(segments)


def validate_key(key: Any, name: str = "key") -> str:
    """Return key unchanged if it can be used as one path segment."""
    if not isinstance(key, str) or not key.strip():
        raise InvalidArgument(f"{name} is required", {"field": name})
    if any(char in FORBIDDEN_KEY_CHARS for char in key):
        raise InvalidArgument(
            f"{name} must not contain any of {''.join(sorted(FORBIDDEN_KEY_CHARS))}",
            {"field": name, "value": key},
        )
    if any(ord(char) < 32 or ord(char) == 127 for char in key):
        raise InvalidArgument(f"{name} must not contain control characters", {"field": name})
    if len(key.encode("utf-8")) > MAX_KEY_BYTES:
        raise InvalidArgument(f"{name} is too long", {"field": name})
    return key


def check_disjoint(paths: Iterable[Sequence[str]]) -> None:
    """Raise ValueError if one path is an ancestor of (or equal to) another."""
    ordered = sorted(tuple(path) for path in paths)
    for previous, current in zip(ordered, ordered[1:]):
        if current[:len(previous)] == previous:
            raise ValueError(
                f"Overlapping paths in one update: {join_path(*previous)} and {join_path(*current)}"
            )
