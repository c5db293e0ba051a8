# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, user_router, ad_router, comment_router
from .core.config import get_settings
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    The MongoDB client is created lazily by the DI container on first use
    and closed here on shutdown.
    """
    settings = get_settings()
    logger.info(
        f"Classifieds backend starting (database={settings.mongo_database_name}, "
        f"image storage={settings.image_storage_dir})"
    )

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    application = FastAPI(
        title="Classifieds Board API",
        version="1.0.0",
        description="Users, ads with images and comments",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(user_router, prefix="/api/v1/users")
    application.include_router(ad_router, prefix="/api/v1/ads")
    application.include_router(comment_router, prefix="/api/v1/ads")

    return application


# Create application instance
app = create_application()
