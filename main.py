#!/usr/bin/env python3

"""
Main application entry point for the Travel Story API.

Architecture: FastAPI application over an async SQLAlchemy database.
Key Features: Lifecycle management, database health checks, error handling,
CORS configuration, static serving of uploaded images.
"""

import errno
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from travel_story.api.auth import router as auth_router
from travel_story.api.captions import router as captions_router
from travel_story.api.health import router as health_router
from travel_story.api.uploads import router as uploads_router
from travel_story.config import Settings
from travel_story.db import Database
from travel_story.errors import APIError, error_body
from travel_story.services.image_storage import UPLOAD_URL_PREFIX, LocalImageStorage
from travel_story.utils.auth import TokenService
from travel_story.utils.logger import setup_logger

logger = setup_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup...")
    database: Database = app.state.database
    try:
        logger.info("Initializing database...")
        await database.init_db()

        logger.info("Checking database connectivity...")
        await database.check_connection()
        logger.info("Database connectivity confirmed.")

        app.state.image_storage.ensure_directory()
    except Exception as e:
        logger.critical(f"Startup error: {e}")
        raise SystemExit(f"Startup failed: {e}") from e

    logger.info("Travel Story API startup successful.")
    yield

    logger.info("Travel Story API shutdown...")
    await database.close()
    logger.info("Shutdown complete.")


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.message),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors and all(err.get("type") == "missing" for err in errors):
            message = "All fields are required"
        else:
            message = "Invalid request data"
        # Only location and reason: the rejected input may be a password
        summary = [{key: err.get(key) for key in ("loc", "type", "msg")} for err in errors]
        logger.info(f"Rejected request to {request.url.path}: {summary}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message)
        )

    @app.exception_handler(OSError)
    async def oserror_exception_handler(request: Request, exc: OSError):
        logger.error(f"OSError caught: {exc}, errno: {exc.errno}")
        if exc.errno in (errno.ETIMEDOUT, errno.ECONNREFUSED):
            logger.error(
                f"Returning 503 due to DB connection issue: {settings.db_unavailable_hint}"
            )
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content=error_body(settings.db_unavailable_hint),
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error"),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error"),
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        from travel_story.config import settings

    app = FastAPI(title="Travel Story API", lifespan=lifespan)

    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.token_service = TokenService(
        secret_key=settings.access_token_secret,
        algorithm=settings.jwt_algorithm,
        expire_hours=settings.access_token_expire_hours,
    )
    app.state.image_storage = LocalImageStorage(
        upload_dir=settings.upload_dir,
        public_base_url=settings.public_base_url,
        max_size_bytes=settings.max_upload_size_bytes,
    )

    register_exception_handlers(app, settings)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(captions_router)
    app.include_router(uploads_router)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # check_dir=False: the directory is created during startup
    app.mount(
        UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    return app


app = create_app()


def main():
    from travel_story.config import settings

    logger.info(
        f"Starting Travel Story API server on {settings.server_host}:{settings.server_port}"
    )
    try:
        uvicorn.run(
            "main:app",
            host=settings.server_host,
            port=settings.server_port,
            workers=settings.server_workers,
        )
    except Exception as e:
        logger.error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
