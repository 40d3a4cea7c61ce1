#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Database - Builds the configured document store and manages its connection.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# init_firebase: Initialize the Firebase Admin SDK app for the Realtime Database.
# connect_store: Creates and verifies the document store for the configured backend.
# disconnect_store: Closes a document store.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# logger: Logger instance.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# logging: Logging.
# firebase_admin: Firebase SDK app and credentials.
# dinohub.config: Settings and backend enum.
# dinohub.store: Store implementations.

import logging

import firebase_admin
from firebase_admin import credentials

from dinohub.config import Settings, StoreBackend
from dinohub.store.base import DocumentStore
from dinohub.store.firebase import FirebaseDocumentStore
from dinohub.store.memory import MemoryDocumentStore
from dinohub.store.mongo import MongoDocumentStore

logger = logging.getLogger(__name__)


def init_firebase(settings: Settings) -> firebase_admin.App:
    if firebase_admin._apps:
        return firebase_admin.get_app()

    try:
        cred = credentials.Certificate(settings.firebase_credentials)
    except ValueError as e:
        logger.error(f"Failed to parse Firebase service account credentials: {e}")
        raise

    app = firebase_admin.initialize_app(cred, {"databaseURL": settings.firebase_database_url})
    logger.info("Firebase Admin SDK initialized successfully")
    return app


async def connect_store(settings: Settings) -> DocumentStore:
    """Create the document store selected by settings.store_backend"""
    backend = settings.store_backend

    if backend == StoreBackend.FIREBASE:
        owns_app = not firebase_admin._apps
        store: DocumentStore = FirebaseDocumentStore(init_firebase(settings), owns_app=owns_app)
    elif backend == StoreBackend.MONGO:
        store = MongoDocumentStore.connect(settings.mongodb_uri, settings.mongodb_database)
    else:
        store = MemoryDocumentStore()
        logger.warning("Using in-memory document store, data will not survive a restart")

    if not await store.ping():
        logger.warning(f"Document store ({backend.value}) did not answer the startup ping")
    else:
        logger.info(f"Connected to document store: {backend.value}")
    return store


async def disconnect_store(store: DocumentStore) -> None:
    await store.close()
    logger.info("Document store closed")
