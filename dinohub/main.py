#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Main FastAPI application entry point. Configures the app, middleware, store connection, and routes.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# create_app: Builds the FastAPI application around a settings object and an optional store.
# lifespan: Opens the document store on startup and closes it on shutdown.
# RequestIDMiddleware.dispatch: Middleware to generate and attach a unique X-Request-ID to every request.
# dinohub_error_handler: Maps core failures to HTTP status codes and the response envelope.
# validation_error_handler: Reports malformed request bodies as 400 responses.
# root: Simple health check endpoint returning status ok.
# health: Health check for the document store.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# app: The main FastAPI application instance.
# logger: Logger instance for this module.
# ERROR_STATUS: HTTP status code for each core failure type.
# RequestIDMiddleware: Custom middleware class for request tracing.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# fastapi: Web framework.
# fastapi.middleware.cors: Middleware for handling CORS.
# contextlib.asynccontextmanager: Decorator for lifespan.
# logging: standard logging library.
# uuid: For generating unique request IDs.
# typing: Type hints.
# uvicorn: ASGI server for direct runs.
# starlette: Middleware base class and request type.
# dinohub.config: Settings.
# dinohub.database: Store connection helpers.
# dinohub.errors: Core failure types.
# dinohub.models.api: Response envelope.
# dinohub.routers: API route definitions.

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import uuid
from typing import Optional
import uvicorn
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from dinohub.config import Settings, get_settings
from dinohub.database import connect_store, disconnect_store
from dinohub.errors import DinoHubError, InvalidArgument, NotFound, StoreUnavailable
from dinohub.models.api import ApiResponse
from dinohub.routers import friends, leaderboard, profiles, users
from dinohub.store.base import DocumentStore

logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidArgument: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    StoreUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


async def dinohub_error_handler(request: Request, exc: DinoHubError):
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(ApiResponse(success=False, message=exc.message, data=exc.to_dict())),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(ApiResponse(
            success=False,
            message="Invalid request",
            data={"code": InvalidArgument.code.value, "details": {"errors": errors}},
        )),
    )


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Build the application.

    When a store is given it is used as-is and left open on shutdown;
    otherwise the store selected by settings is connected at startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("DinoHub backend starting...")
        app.state.store = store if store is not None else await connect_store(settings)

        yield

        if store is None:
            await disconnect_store(app.state.store)
        logger.info("DinoHub backend shutting down...")

    app = FastAPI(
        title="dinohub",
        description="Players, friends, game progress and leaderboard for the dino game",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(DinoHubError, dinohub_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(users.login_router, tags=["Users"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(friends.router, prefix="/api/friends", tags=["Friends"])
    app.include_router(profiles.router, prefix="/api/game", tags=["Game profiles"])
    app.include_router(leaderboard.router, prefix="/api/leaderboard", tags=["Leaderboard"])

    @app.get("/")
    async def root():
        return {"status": "ok", "service": "dinohub"}

    @app.get("/health")
    async def health(request: Request):
        store_healthy = await request.app.state.store.ping()
        return {
            "status": "healthy" if store_healthy else "degraded",
            "version": "1.0.0",
            "services": {
                "store": settings.store_backend.value,
                "store_status": "connected" if store_healthy else "disconnected",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("dinohub.main:app", host=settings.backend_host, port=settings.backend_port)
