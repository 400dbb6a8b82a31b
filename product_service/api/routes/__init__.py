from product_service.api.routes import products

__all__ = ["products"]
