# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.errors import register_exception_handlers
from .api.v1 import auth_router, user_router
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container up front so the user directory exists before the
    first request. The directory is in-memory; everything it holds is lost on
    shutdown.
    """
    container = get_container()
    logger.info(f"{app.title} {app.version} started")

    yield

    user_count = await container.get(UserRepository).count()
    logger.info(f"Application shutdown complete, discarding {user_count} in-memory user(s)")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Envelope exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file before settings are first read
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="User registration, login and lookup backed by an in-memory directory",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(auth_router, prefix=f"{settings.api_prefix}/auth")
    application.include_router(user_router, prefix=settings.api_prefix)

    return application


# Create application instance
app = create_application()
