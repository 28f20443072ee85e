"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory
   - create_app() returns a configured app
   - Tests pass their own BookCatalog (over SQLite) to create_app()

2. Lifespan
   - startup: connect to the database, fail fast if it is unreachable
   - shutdown: dispose of the engine the application opened

3. Exception Handlers
   - Every error body is {"message": "..."}
   - Request body validation failures answer 400, not FastAPI's 422
   - Unhandled errors answer 500 with a JSON body
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from library_api import __version__
from library_api.config import get_settings
from library_api.database import connect
from library_api.dependencies import Catalog
from library_api.routers import authors_router, books_router
from library_api.schemas import Message
from library_api.services import BookCatalog, StoreError

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = (
    "make sure to fill all required fields and to use the correct types"
)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.

    If create_app() was given a catalog it is used as is; otherwise the
    database is opened here. A DatabaseUnavailableError raised by connect()
    is not caught: the server refuses to start.
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")

    owned_engine = None
    if getattr(app.state, "catalog", None) is None:
        owned_engine = connect(settings)
        app.state.catalog = BookCatalog(owned_engine)
    else:
        app.state.catalog.ping()

    logger.info("Connected!")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")

    if owned_engine is not None:
        owned_engine.dispose()
        app.state.catalog = None


# =============================================================================
# Application Factory
# =============================================================================
def create_app(catalog: BookCatalog | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        catalog: Catalog to serve. When omitted, the lifespan connects to
            the configured MySQL database.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Library Catalog API

List, fetch, add and delete books by ISBN; list authors and the books
written by each of them.
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.catalog = catalog

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Render HTTP errors as {"message": detail}."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Reject malformed request bodies with 400.

        A missing field, an empty string or a non-integer pub_year all end
        here before the catalog is touched.
        """
        logger.info(f"Invalid request to {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": VALIDATION_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        Anything the routers did not map (a row the response model cannot
        serialize, a missing database driver, ...) still answers with a
        JSON body.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)
    app.include_router(authors_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check that the API is running and the database answers.",
        responses={503: {"model": Message, "description": "Database unavailable"}},
    )
    def health_check(catalog: Catalog) -> dict:
        """
        Health check endpoint.

        Used by load balancers and container liveness probes.
        """
        try:
            catalog.ping()
        except StoreError as exc:
            logger.error(f"Health check failed: {exc}")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Database unavailable",
            ) from exc

        return {
            "status": "healthy",
            "app": settings.app_name,
            "database": "connected",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn library_api.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m library_api.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "library_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
