from order_service.infrastructure.repositories.order_repository import OrderRepository

__all__ = ["OrderRepository"]
