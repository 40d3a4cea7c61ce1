#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Firebase store - Realtime Database adapter over the Firebase Admin SDK.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# FirebaseDocumentStore.get: Point read through db.Reference.get.
# FirebaseDocumentStore.query: order_by_child / limit_to_last range read.
# FirebaseDocumentStore.update: Multi-path PATCH on the database root.
# FirebaseDocumentStore.ping: Cheap keyed read to confirm connectivity.
# FirebaseDocumentStore.close: Deletes the Firebase app if this store owns it.
# FirebaseDocumentStore._call: Runs a blocking SDK call off the event loop.
# _as_items: Converts an SDK query result into ordered (key, value) pairs.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# logger: Logger instance.
# FirebaseDocumentStore: DocumentStore implementation for Firebase Realtime Database.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# asyncio: to_thread for the blocking SDK.
# logging: Logging.
# typing: Type hints.
# firebase_admin: Realtime Database client and error types.
# dinohub.constants: Collection used by ping.
# dinohub.errors: StoreUnavailable.
# dinohub.store.base: Shared types.

import asyncio
import logging
from typing import Any, Callable, Optional

import firebase_admin
from firebase_admin import db
from firebase_admin.exceptions import FirebaseError

from dinohub.constants import USERS
from dinohub.errors import StoreUnavailable
from dinohub.store.base import Changes, QueryResult

logger = logging.getLogger(__name__)


class FirebaseDocumentStore:
    """
    Realtime Database store. Every SDK call runs in a worker thread.

    Range reads use order_by_child, which the database only serves for
    indexed children. database.rules.json at the repository root declares the
    indexes for users/pseudo and gameProfiles/gameData/mainScore; a custom
    LEADERBOARD_FIELD needs its own ".indexOn" entry there.
    """

    def __init__(self, app: Optional[firebase_admin.App] = None, owns_app: bool = False):
        self._app = app
        self._owns_app = owns_app

    def _ref(self, path: str) -> db.Reference:
        return db.reference(f"/{path.strip('/')}", app=self._app)

    async def _call(self, func: Callable[[], Any], label: str) -> Any:
        try:
            return await asyncio.to_thread(func)
        except FirebaseError as e:
            logger.error(f"Realtime Database {label} failed: {e}")
            raise StoreUnavailable(
                f"Realtime Database {label} failed",
                {"code": e.code},
            ) from e

    async def get(self, path: str) -> Any:
        return await self._call(self._ref(path).get, f"read of {path}")

    async def query(
        self,
        path: str,
        order_by: str,
        limit_last: Optional[int] = None,
    ) -> QueryResult:
        def run():
            query = self._ref(path).order_by_child(order_by)
            if limit_last is not None:
                query = query.limit_to_last(limit_last)
            return query.get()

        result = await self._call(run, f"query of {path} by {order_by}")
        return _as_items(result)

    async def update(self, changes: Changes) -> None:
        if not changes:
            raise ValueError("changes must be a non-empty mapping")
        root = self._ref("")
        await self._call(lambda: root.update(dict(changes)), f"update of {len(changes)} paths")

    async def ping(self) -> bool:
        try:
            await self._call(
                lambda: self._ref(USERS).order_by_key().limit_to_first(1).get(),
                "ping",
            )
            return True
        except StoreUnavailable:
            return False

    async def close(self) -> None:
        if self._owns_app and self._app is not None:
            firebase_admin.delete_app(self._app)
            logger.info("Firebase app deleted")
        self._app = None


def _as_items(result: Any) -> QueryResult:
    if not result:
        return []
    if isinstance(result, list):
        # Numeric-looking keys come back as a sparse list
        return [(str(index), value) for index, value in enumerate(result) if value is not None]
    return list(result.items())
