from contextlib import asynccontextmanager

from fastapi import FastAPI

from shop_common.app import create_service_application

from user_service.core.config import get_settings
from user_service.core.logging import configure_logging, get_logger
from user_service.infrastructure.database import get_db, init_db


configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(f"Starting {settings.SERVICE_NAME}")
    init_db()

    yield

    logger.info(f"Shutting down {settings.SERVICE_NAME}")


def create_application() -> FastAPI:
    """Build the user service application."""
    from user_service.api.routes import users

    return create_service_application(
        title="User Service API",
        description="User accounts and their order history",
        settings=get_settings(),
        lifespan=lifespan,
        routers=[users.router],
        get_db=get_db,
        logger=logger
    )


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("user_service.main:app", host="0.0.0.0", port=8082, reload=get_settings().DEBUG)
