from contextlib import asynccontextmanager

from fastapi import FastAPI

from shop_common.app import create_service_application

from order_service.api.dependencies import get_product_client, get_user_client
from order_service.core.config import get_settings
from order_service.core.logging import configure_logging, get_logger
from order_service.infrastructure.database import get_db, init_db


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
    logger.info(
        f"Starting {settings.SERVICE_NAME} "
        f"(products: {settings.PRODUCT_SERVICE_URL}, users: {settings.USER_SERVICE_URL})"
    )
    init_db()

    yield

    logger.info(f"Shutting down {settings.SERVICE_NAME}")
    # Only close clients that were created
    if get_product_client.cache_info().currsize:
        get_product_client().close()
    if get_user_client.cache_info().currsize:
        get_user_client().close()


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    from order_service.api.routes import orders

    return create_service_application(
        title="Order Service API",
        description="Order placement across the product and user services",
        settings=get_settings(),
        lifespan=lifespan,
        routers=[orders.router],
        get_db=get_db,
        logger=logger
    )


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("order_service.main:app", host="0.0.0.0", port=8080, reload=get_settings().DEBUG)
