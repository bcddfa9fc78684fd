# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.errors import register_exception_handlers
from .api.v1 import (
    auth_router,
    cart_router,
    catalog_router,
    checkout_router,
    health_router,
    profile_router,
)
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import init_container, reset_container
from .infrastructure.db.mongo_connection import close_connection
from .infrastructure.db.store_selector import select_user_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Selects the user store (MongoDB or in-memory) once and builds the DI
    container around it. The choice holds until shutdown.
    """
    user_store = await select_user_store(get_settings())
    init_container(user_store)
    logger.info(f"Application started with '{user_store.name}' storage backend")

    yield

    reset_container()
    close_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error envelope handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    # Create FastAPI app
    application = FastAPI(
        title="Community Store API",
        version="1.0.0",
        description="Community Store backend: accounts, catalog, cart and checkout",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(health_router, prefix="/api")
    application.include_router(auth_router, prefix="/api")
    application.include_router(catalog_router, prefix="/api")
    application.include_router(cart_router, prefix="/api")
    application.include_router(checkout_router, prefix="/api")
    application.include_router(profile_router, prefix="/api")

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Start the API server with uvicorn on the configured host and port"""
    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
