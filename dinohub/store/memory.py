#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# In-memory store - Realtime-Database-like tree kept in process, for local runs and tests.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# MemoryDocumentStore.get: Point read (deep copy).
# MemoryDocumentStore.query: Ordered range read with optional limit-to-last.
# MemoryDocumentStore.update: Staged multi-path write swapped in all at once.
# MemoryDocumentStore.ping: Reports the simulated availability flag.
# MemoryDocumentStore.close: No-op.
# MemoryDocumentStore.snapshot: Deep copy of the whole tree.
# _order_key: Sort key matching Realtime Database child ordering.
# _normalize: Drops null children and empty maps from a value before writing.
# _write: Sets a value at a path, creating parents.
# _delete: Removes a path and prunes parents left empty.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# MemoryDocumentStore: DocumentStore implementation backed by nested dicts.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# copy: Deep copies so callers never share the tree.
# typing: Type hints.
# dinohub.errors: StoreUnavailable.
# dinohub.store.base: Path helpers.

import copy
from typing import Any, Dict, List, Optional, Tuple

from dinohub.errors import StoreUnavailable
from dinohub.store.base import Changes, QueryResult, check_disjoint, split_path


class MemoryDocumentStore:
    """Nested-dict document store.

    Mirrors the Realtime Database behaviour the core relies on: writing None
    (or an empty map) deletes, deleting the last child removes the parent, and
    one update call is applied all-or-nothing. Set `available = False` to make
    every call fail with StoreUnavailable.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._root: Dict[str, Any] = _normalize(data) or {}
        self.available = True

    def _check_available(self) -> None:
        if not self.available:
            raise StoreUnavailable("In-memory store is unavailable")

    def _node(self, segments: List[str]) -> Any:
        node: Any = self._root
        for segment in segments:
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return node

    async def get(self, path: str) -> Any:
        self._check_available()
        return copy.deepcopy(self._node(split_path(path)))

    async def query(
        self,
        path: str,
        order_by: str,
        limit_last: Optional[int] = None,
    ) -> QueryResult:
        self._check_available()
        if limit_last is not None and limit_last < 1:
            raise ValueError("limit_last must be a positive integer")

        node = self._node(split_path(path))
        if not isinstance(node, dict):
            return []

        child_segments = split_path(order_by)

        def sort_key(item: Tuple[str, Any]):
            key, value = item
            field = value
            for segment in child_segments:
                field = field.get(segment) if isinstance(field, dict) else None
            return _order_key(field), key

        items = sorted(node.items(), key=sort_key)
        if limit_last is not None:
            items = items[-limit_last:]
        return [(key, copy.deepcopy(value)) for key, value in items]

    async def update(self, changes: Changes) -> None:
        self._check_available()
        if not changes:
            raise ValueError("changes must be a non-empty mapping")

        parsed = {tuple(split_path(path)): value for path, value in changes.items()}
        if () in parsed:
            raise ValueError("Cannot update the store root")
        check_disjoint(parsed.keys())

        staged = copy.deepcopy(self._root)
        for segments, value in parsed.items():
            _write(staged, list(segments), _normalize(value))
        self._root = staged

    async def ping(self) -> bool:
        return self.available

    async def close(self) -> None:
        return None

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._root)


def _order_key(value: Any) -> tuple:
    # null < false < true < numbers < strings < objects
    if value is None:
        return (0, 0)
    if isinstance(value, bool):
        return (1, int(value))
    if isinstance(value, (int, float)):
        return (2, value)
    if isinstance(value, str):
        return (3, value)
    return (4, 0)


def _normalize(value: Any) -> Any:
    if isinstance(value, dict):
        cleaned = {}
        for key, child in value.items():
            child = _normalize(child)
            if child is not None:
                cleaned[key] = child
        return cleaned or None
    return copy.deepcopy(value)


def _write(root: Dict[str, Any], segments: List[str], value: Any) -> None:
    if value is None:
        _delete(root, segments)
        return
    node = root
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[segments[-1]] = value


def _delete(node: Dict[str, Any], segments: List[str]) -> None:
    head = segments[0]
    if head not in node:
        return
    if len(segments) == 1:
        del node[head]
        return
    child = node[head]
    if not isinstance(child, dict):
        return
    _delete(child, segments[1:])
    if not child:
        del node[head]
