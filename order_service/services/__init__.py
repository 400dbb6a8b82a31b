from order_service.services.order_service import OrderService

__all__ = ["OrderService"]
