"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app with its own record store
   - Each call starts from fresh seed data (useful for testing)

2. Lifespan Events
   - startup: Log where the GraphQL endpoint is listening
   - shutdown: Log the final record counts

3. Middleware Stack
   - CORS: Allow cross-origin requests from browser clients

4. Exception Handlers
   - Catch-all handler logs unexpected errors and hides details outside
     debug mode
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookshelf import __version__
from bookshelf.config import Settings, get_settings
from bookshelf.graphql import create_graphql_router
from bookshelf.store import create_store

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    app_settings: Settings = app.state.settings

    # ----- STARTUP -----
    logger.info(f"Starting {app_settings.app_name}...")
    logger.info(f"Debug mode: {app_settings.debug}")
    logger.info(
        f"{app_settings.app_name} running on "
        f"http://localhost:{app_settings.port}{app_settings.graphql_path}"
    )

    yield  # Application runs here

    # ----- SHUTDOWN -----
    store = app.state.store
    logger.info(
        f"Shutting down {app_settings.app_name} "
        f"({len(store.authors)} authors, {len(store.books)} books discarded)"
    )


# =============================================================================
# Application Factory
# =============================================================================
def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The record store is created here, once per application instance, and
    kept on app.state for the GraphQL context to pick up.

    Args:
        app_settings: Settings to use; defaults to the cached settings

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        description="""
## Bookshelf GraphQL

A GraphQL API over an in-memory collection of authors and books.

### Features
- **Queries**: `book(id)`, `books`, `author(id)`, `authors`
- **Mutations**: `addBook(name, authorId)`, `addAuthor(name)`
- **GraphiQL**: Open the GraphQL endpoint in a browser to explore the schema

Data lives in memory only and is reset when the process restarts.
        """,
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.store = create_store(seed=app_settings.seed_data)

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if app_settings.debug:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # GraphQL Endpoint
    # -------------------------------------------------------------------------
    graphql_router = create_graphql_router(
        graphiql_enabled=app_settings.graphiql_enabled
    )
    app.include_router(
        graphql_router, prefix=app_settings.graphql_path, tags=["GraphQL"]
    )

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    async def health_check(request: Request) -> dict:
        """
        Health check endpoint.

        Returns API status together with the current record counts.
        """
        store = request.app.state.store

        return {
            "status": "healthy",
            "app": app_settings.app_name,
            "version": __version__,
            "store": {
                "authors": len(store.authors),
                "books": len(store.books),
            },
            "graphql": {
                "enabled": True,
                "endpoint": app_settings.graphql_path,
                "graphiql_enabled": app_settings.graphiql_enabled,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "version": __version__,
            "graphql": app_settings.graphql_path,
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn bookshelf.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
def run() -> None:
    """
    Start the development server.

    Listens on HOST:PORT (default 0.0.0.0:4000).
    """
    import uvicorn

    uvicorn.run(
        "bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
