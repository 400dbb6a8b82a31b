from product_service.services.product_service import ProductService

__all__ = ["ProductService"]
