import logging
from typing import List, Optional

from product_service.core.exceptions import NegativeQuantityError, ProductNotFoundError
from product_service.core.logging import get_logger
from product_service.domain.models.product import ProductModel
from product_service.domain.schemas.product import ProductCreate, ProductUpdate
from product_service.infrastructure.repositories.product_repository import ProductRepository


class ProductService:
    """Manages product domain logic."""

    def __init__(self, repository: ProductRepository, logger: Optional[logging.Logger] = None):
        """
        Initialize the product service with dependencies.

        Args:
            repository: Repository for product storage
            logger: Logger to use; defaults to the module logger
        """
        self.repository = repository
        self.logger = logger or get_logger(__name__)

    def add_product(self, product: ProductCreate) -> ProductModel:
        """
        Store a new product.

        Raises:
            NegativeQuantityError: If the initial stock is below zero
        """
        self.logger.info(f"Adding product: {product.name}")
        if product.quantity < 0:
            raise NegativeQuantityError(product.quantity)
        return self.repository.save(ProductModel(**product.model_dump()))

    def get_all_products(self) -> List[ProductModel]:
        self.logger.info("Fetching all products")
        return self.repository.get_all()

    def get_product_by_id(self, product_id: int) -> ProductModel:
        """
        Gets product by ID.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        self.logger.info(f"Fetching product by id: {product_id}")
        product = self.repository.get_by_id(product_id)
        if product is None:
            self.logger.warning(f"Product {product_id} not found")
            raise ProductNotFoundError(product_id)
        return product

    def update_product(self, product_id: int, updated: ProductUpdate) -> ProductModel:
        """
        Overwrite every mutable field of an existing product.

        Raises:
            ProductNotFoundError: If no product has this id
            NegativeQuantityError: If the new stock is below zero
        """
        self.logger.info(f"Updating product with id: {product_id}")
        existing = self.get_product_by_id(product_id)
        if updated.quantity < 0:
            raise NegativeQuantityError(updated.quantity)

        existing.name = updated.name
        existing.description = updated.description
        existing.category = updated.category
        existing.price = updated.price
        existing.quantity = updated.quantity
        return self.repository.save(existing)

    def delete_product(self, product_id: int) -> None:
        """
        Delete a product by ID.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        self.logger.info(f"Deleting product with id: {product_id}")
        if not self.repository.exists(product_id):
            raise ProductNotFoundError(product_id)

        self.repository.delete_by_id(product_id)
        self.logger.info(f"Product deleted successfully with id: {product_id}")

    def get_products_by_price_range(self, min_price: float, max_price: float) -> List[ProductModel]:
        self.logger.info(f"Fetching products in price range: {min_price}-{max_price}")
        return self.repository.find_by_price_between(min_price, max_price)

    def get_products_by_name(self, name: str) -> List[ProductModel]:
        self.logger.info(f"Fetching products by name: {name}")
        return self.repository.find_by_name_containing(name)

    def get_products_by_category(self, category: str) -> List[ProductModel]:
        self.logger.info(f"Fetching products by category: {category}")
        return self.repository.find_by_category(category)
