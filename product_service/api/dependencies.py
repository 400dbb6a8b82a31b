"""
Dependency providers for the product routes.

Each request gets its own database session; repositories and services are
built on top of it with explicit constructor arguments.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from product_service.core.logging import get_logger
from product_service.infrastructure.database import get_db
from product_service.infrastructure.repositories.product_repository import ProductRepository
from product_service.services.product_service import ProductService


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    """
    Factory function for creating ProductRepository instances.

    Args:
        db: Database session

    Returns:
        ProductRepository instance
    """
    return ProductRepository(db)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository)
) -> ProductService:
    """
    Provide the product service instance.

    Args:
        repository: Request scoped product repository

    Returns:
        ProductService: Service instance
    """
    return ProductService(repository, logger=get_logger("product_service.services"))
