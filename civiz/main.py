# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import vision_router, session_router, funding_router, street_view_router
from .application.services.vision_store import VisionStore
from .core.config import get_settings
from .di.container import get_container, reset_container
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the dependency container (and with it the vision store) on
    startup; closes the store and the shared HTTP client on shutdown.
    """
    container = get_container()
    store = container.get(VisionStore)
    logger.info(
        f"Vision store ready for user {store.current_user_id} "
        f"with {len(store.visions)} vision(s) and {store.points} point(s)"
    )

    yield

    # Shutdown: in-flight generations reconcile as no-ops once the store is closed
    try:
        store.close()
    except Exception as e:
        logger.error(f"Error closing vision store: {e}", exc_info=True)

    # Next startup in this process builds a fresh container and store
    reset_container()

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)

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
    settings = get_settings()

    # Create FastAPI app
    application = FastAPI(
        title="Civiz Vision API",
        version="1.0.0",
        description="Civic vision submission, image generation and ranking",
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

    # Register API routers
    application.include_router(vision_router, prefix="/api/v1/visions")
    application.include_router(session_router, prefix="/api/v1/session")
    application.include_router(funding_router, prefix="/api/v1/funding")
    application.include_router(street_view_router, prefix="/api/v1/streetview")

    return application


# Create application instance
app = create_application()
