"""
Dependency providers for the order routes.

Repositories are built per request on a fresh database session. The HTTP
clients are shared for the life of the process so their connection pools
are reused.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from order_service.clients.product_client import ProductClient
from order_service.clients.user_client import UserClient
from order_service.core.config import get_settings
from order_service.core.logging import get_logger
from order_service.infrastructure.database import get_db
from order_service.infrastructure.repositories.order_repository import OrderRepository
from order_service.services.order_service import OrderService


def get_order_repository(db: Session = Depends(get_db)) -> OrderRepository:
    """
    Factory function for creating OrderRepository instances.

    Args:
        db: Database session

    Returns:
        OrderRepository instance
    """
    return OrderRepository(db)


@lru_cache()
def get_product_client() -> ProductClient:
    """Provide the shared product service client."""
    settings = get_settings()
    return ProductClient(
        settings.PRODUCT_SERVICE_URL,
        timeout=settings.HTTP_TIMEOUT,
        logger=get_logger("order_service.clients.product")
    )


@lru_cache()
def get_user_client() -> UserClient:
    """Provide the shared user service client."""
    settings = get_settings()
    return UserClient(
        settings.USER_SERVICE_URL,
        timeout=settings.HTTP_TIMEOUT,
        logger=get_logger("order_service.clients.user")
    )


def get_order_service(
    repository: OrderRepository = Depends(get_order_repository),
    product_client: ProductClient = Depends(get_product_client),
    user_client: UserClient = Depends(get_user_client)
) -> OrderService:
    """
    Provide the order service instance.

    Args:
        repository: Request scoped order repository
        product_client: Product service client
        user_client: User service client

    Returns:
        OrderService: Service instance
    """
    return OrderService(
        repository,
        product_client,
        user_client,
        logger=get_logger("order_service.services")
    )
