from contextlib import asynccontextmanager

from fastapi import FastAPI

from shop_common.app import create_service_application

from product_service.core.config import get_settings
from product_service.core.logging import configure_logging, get_logger
from product_service.infrastructure.database import get_db, init_db


# Configure logging early
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler for startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()
    logger.info(f"Starting {settings.SERVICE_NAME}")
    init_db()

    yield

    logger.info(f"Shutting down {settings.SERVICE_NAME}")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    # Import routers here to avoid circular imports
    from product_service.api.routes import products

    return create_service_application(
        title="Product Service API",
        description="Product catalogue and inventory",
        settings=get_settings(),
        lifespan=lifespan,
        routers=[products.router],
        get_db=get_db,
        logger=logger
    )


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("product_service.main:app", host="0.0.0.0", port=8081, reload=get_settings().DEBUG)
