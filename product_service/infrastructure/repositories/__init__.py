from product_service.infrastructure.repositories.product_repository import ProductRepository

__all__ = ["ProductRepository"]
