from order_service.api.routes import orders

__all__ = ["orders"]
