"""
Application factory shared by the services.

Each service passes its settings, lifespan and routers; the factory adds
CORS, the correlation-id middleware, the exception handlers and the
health routes.
"""

import logging
import time
from typing import Callable, Iterable, Iterator

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from shop_common.error_handlers import register_exception_handlers
from shop_common.health import create_health_router
from shop_common.logging import set_correlation_id


def create_service_application(
    *,
    title: str,
    description: str,
    settings,
    lifespan: Callable,
    routers: Iterable[APIRouter],
    get_db: Callable[[], Iterator[Session]],
    logger: logging.Logger
) -> FastAPI:
    """
    Create and configure a service's FastAPI application.

    Args:
        title: OpenAPI title
        description: OpenAPI description
        settings: Service settings (SERVICE_NAME, VERSION, DEBUG, API_PREFIX, cors_origins)
        lifespan: Startup and shutdown handler
        routers: Service routers, mounted under API_PREFIX
        get_db: Session dependency used by the detailed health check
        logger: Service logger for middleware and error handlers

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
        debug=settings.DEBUG
    )

    configure_middleware(app, settings.cors_origins, logger)
    register_exception_handlers(app, logger)

    app.include_router(
        create_health_router(get_db, settings.SERVICE_NAME, settings.VERSION, logger),
        prefix=settings.API_PREFIX
    )
    for router in routers:
        app.include_router(router, prefix=settings.API_PREFIX)

    return app


def configure_middleware(app: FastAPI, cors_origins: list, logger: logging.Logger) -> None:
    """
    Configure middleware components for the FastAPI application.

    Args:
        app: FastAPI application instance
        cors_origins: Allowed CORS origins
        logger: Logger for request completion and failure
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_correlation_id(request: Request, call_next: Callable):
        correlation_id = set_correlation_id(request.headers.get("X-Correlation-ID"))
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {request.method} {request.url.path} "
                f"after {round(process_time * 1000, 2)}ms: {str(e)}"
            )
            raise

        response.headers["X-Correlation-ID"] = correlation_id
        process_time = time.time() - start_time
        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"{response.status_code} in {round(process_time * 1000, 2)}ms"
        )
        return response
