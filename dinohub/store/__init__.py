"""Document store protocol and backends."""

from dinohub.store.base import DocumentStore, join_path, split_path, validate_key
from dinohub.store.memory import MemoryDocumentStore

__all__ = [
    "DocumentStore",
    "MemoryDocumentStore",
    "join_path",
    "split_path",
    "validate_key",
]
