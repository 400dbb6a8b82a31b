from product_service.domain.models.product import ProductModel

__all__ = ["ProductModel"]
