#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Mongo store - Maps the hierarchical path model onto MongoDB collections with motor.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# MongoDocumentStore.connect: Builds a store from a URI and database name.
# MongoDocumentStore.get: Point read of a collection, document or nested field.
# MongoDocumentStore.query: Sorted range read over one collection.
# MongoDocumentStore.update: Groups paths per document; multi-document batches use a transaction.
# MongoDocumentStore.ping: Runs the admin ping command.
# MongoDocumentStore.close: Closes the client.
# MongoDocumentStore._plan: Turns a change map into per-document write operations.
# _dig: Walks a nested document along path segments.
# _strip_id: Removes _id from a document.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# logger: Logger instance.
# DocumentWrite: Pending write against one document.
# MongoDocumentStore: DocumentStore implementation for MongoDB.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# logging: Logging.
# dataclasses: DocumentWrite container.
# typing: Type hints.
# motor.motor_asyncio: Async MongoDB driver.
# pymongo: Sort directions and error types.
# dinohub.errors: StoreUnavailable.
# dinohub.store.base: Path helpers.

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from dinohub.errors import StoreUnavailable
from dinohub.store.base import Changes, QueryResult, check_disjoint, split_path

logger = logging.getLogger(__name__)


@dataclass
class DocumentWrite:
    collection: str
    document_id: str
    replace: Optional[Dict[str, Any]] = None
    delete: bool = False
    set_fields: Dict[str, Any] = field(default_factory=dict)
    unset_fields: Dict[str, str] = field(default_factory=dict)


class MongoDocumentStore:
    """
    Path layout: "<collection>/<_id>/<field>/<subfield>...".

    The first segment picks the collection, the second the document and the
    rest is used as a dotted field path inside that document.
    """

    def __init__(self, client: AsyncIOMotorClient, database: AsyncIOMotorDatabase):
        self._client = client
        self._db = database

    @classmethod
    def connect(cls, uri: str, database: str) -> "MongoDocumentStore":
        client = AsyncIOMotorClient(uri)
        logger.info(f"MongoDB client created for database: {database}")
        return cls(client, client[database])

    async def get(self, path: str) -> Any:
        segments = split_path(path)
        if not segments:
            raise ValueError("Cannot read the store root from MongoDB")
        collection = self._db[segments[0]]

        try:
            if len(segments) == 1:
                documents = await collection.find({}).to_list(length=None)
                return {str(doc["_id"]): _strip_id(doc) for doc in documents} or None

            if len(segments) == 2:
                doc = await collection.find_one({"_id": segments[1]})
                return _strip_id(doc) if doc else None

            dotted = ".".join(segments[2:])
            doc = await collection.find_one({"_id": segments[1]}, {dotted: 1})
        except PyMongoError as e:
            logger.error(f"MongoDB read of {path} failed: {e}")
            raise StoreUnavailable(f"MongoDB read of {path} failed") from e

        if not doc:
            return None
        return _dig(doc, segments[2:])

    async def query(
        self,
        path: str,
        order_by: str,
        limit_last: Optional[int] = None,
    ) -> QueryResult:
        segments = split_path(path)
        if len(segments) != 1:
            raise ValueError("MongoDB range reads are only supported on a collection")
        if limit_last is not None and limit_last < 1:
            raise ValueError("limit_last must be a positive integer")

        sort_field = ".".join(split_path(order_by))
        collection = self._db[segments[0]]

        try:
            if limit_last is None:
                cursor = collection.find({}).sort([(sort_field, ASCENDING), ("_id", ASCENDING)])
                documents = await cursor.to_list(length=None)
            else:
                # Take the last N of the ascending order, then restore ascending
                cursor = collection.find({}).sort(
                    [(sort_field, DESCENDING), ("_id", DESCENDING)]
                ).limit(limit_last)
                documents = list(reversed(await cursor.to_list(length=None)))
        except PyMongoError as e:
            logger.error(f"MongoDB query of {path} by {order_by} failed: {e}")
            raise StoreUnavailable(f"MongoDB query of {path} failed") from e

        return [(str(doc["_id"]), _strip_id(doc)) for doc in documents]

    def _plan(self, changes: Changes) -> List[DocumentWrite]:
        parsed = [(split_path(path), value) for path, value in changes.items()]
        check_disjoint(segments for segments, _ in parsed)

        writes: Dict[Tuple[str, str], DocumentWrite] = {}
        for segments, value in parsed:
            if len(segments) < 2:
                raise ValueError(f"MongoDB writes need at least a collection and a document: {'/'.join(segments)}")
            key = (segments[0], segments[1])
            write = writes.setdefault(key, DocumentWrite(collection=key[0], document_id=key[1]))

            if len(segments) == 2:
                if value is None or value == {}:
                    write.delete = True
                else:
                    write.replace = dict(value)
                continue

            dotted = ".".join(segments[2:])
            if value is None:
                write.unset_fields[dotted] = ""
            else:
                write.set_fields[dotted] = value
        return list(writes.values())

    async def _apply(self, write: DocumentWrite, session=None) -> None:
        collection = self._db[write.collection]
        selector = {"_id": write.document_id}

        if write.delete:
            await collection.delete_one(selector, session=session)
        elif write.replace is not None:
            await collection.replace_one(selector, write.replace, upsert=True, session=session)
        else:
            operations: Dict[str, Any] = {}
            if write.set_fields:
                operations["$set"] = write.set_fields
            if write.unset_fields:
                operations["$unset"] = write.unset_fields
            upsert = bool(write.set_fields)
            await collection.update_one(selector, operations, upsert=upsert, session=session)

    async def update(self, changes: Changes) -> None:
        if not changes:
            raise ValueError("changes must be a non-empty mapping")
        writes = self._plan(changes)

        try:
            if len(writes) == 1:
                await self._apply(writes[0])
                return

            async with await self._client.start_session() as session:
                async with session.start_transaction():
                    for write in writes:
                        await self._apply(write, session=session)
        except PyMongoError as e:
            logger.error(f"MongoDB update of {len(changes)} paths failed: {e}")
            raise StoreUnavailable("MongoDB update failed") from e

    async def ping(self) -> bool:
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB health check failed: {e}")
            return False

    async def close(self) -> None:
        self._client.close()
        logger.info("Disconnected from MongoDB")


def _dig(document: Any, segments: List[str]) -> Any:
    node = document
    for segment in segments:
        if not isinstance(node, dict) or segment not in node:
            return None
        node = node[segment]
    return node


def _strip_id(document: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in document.items() if key != "_id"}
