# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_error_handlers
from .api.v1 import auth_router, user_router, product_router, cart_router, health_router
from .core.config import get_settings
from .core.logging_config import setup_logging
from .infrastructure.db.mongo_connection import ensure_indexes, close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Configures logging, ensures the unique MongoDB indexes and closes the
    Mongo client on shutdown.
    """
    settings = get_settings()
    setup_logging(settings.log_level)

    if settings.mongo_ensure_indexes:
        try:
            await ensure_indexes()
        except Exception as e:
            # Don't fail app startup if MongoDB is not reachable yet
            logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    logger.info("Application startup complete")

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - Global error handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    application = FastAPI(
        title="Storefront Backend API",
        version="1.0.0",
        description="Users, products and shopping carts over MongoDB",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    # Register API routers
    application.include_router(health_router)
    application.include_router(auth_router, prefix="/v1/auth")
    application.include_router(user_router, prefix="/v1/users")
    application.include_router(product_router, prefix="/v1/products")
    application.include_router(cart_router, prefix="/v1/cart")

    return application


# Create application instance
app = create_application()
