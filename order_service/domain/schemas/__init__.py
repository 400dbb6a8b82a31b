from order_service.domain.schemas.order import OrderCreate, OrderResponse
from order_service.domain.schemas.remote import ProductData, UserData

__all__ = ["OrderCreate", "OrderResponse", "ProductData", "UserData"]
