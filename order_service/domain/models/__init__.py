from order_service.domain.models.order import OrderItemModel, OrderModel, OrderStatus

__all__ = ["OrderItemModel", "OrderModel", "OrderStatus"]
