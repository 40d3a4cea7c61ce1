#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Dependencies - FastAPI providers wiring the request's store into the core services.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# get_settings_from_app: Settings attached to the running application.
# get_store: Document store opened by the application lifespan.
# get_identity_service: IdentityService bound to the store.
# get_relationship_service: RelationshipService bound to the store.
# get_progress_service: ProgressService bound to the store.
# get_leaderboard_service: LeaderboardService using the configured ranking field.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# None

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# fastapi: Depends and Request.
# dinohub.config: Settings.
# dinohub.services: Core services.
# dinohub.store.base: Store protocol.

from fastapi import Depends, Request

from dinohub.config import Settings
from dinohub.services import (
    IdentityService,
    LeaderboardService,
    ProgressService,
    RelationshipService,
)
from dinohub.store.base import DocumentStore


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_identity_service(store: DocumentStore = Depends(get_store)) -> IdentityService:
    return IdentityService(store)


def get_relationship_service(
    store: DocumentStore = Depends(get_store),
    identities: IdentityService = Depends(get_identity_service),
) -> RelationshipService:
    return RelationshipService(store, identities)


def get_progress_service(
    store: DocumentStore = Depends(get_store),
    identities: IdentityService = Depends(get_identity_service),
) -> ProgressService:
    return ProgressService(store, identities)


def get_leaderboard_service(
    store: DocumentStore = Depends(get_store),
    settings: Settings = Depends(get_settings_from_app),
) -> LeaderboardService:
    return LeaderboardService(store, ranking_field=settings.leaderboard_field)
