"""
Product repository for product table access.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from product_service.domain.models.product import ProductModel


class ProductRepository:
    """Repository for ProductModel operations."""

    def __init__(self, db: Session):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def save(self, product: ProductModel) -> ProductModel:
        """
        Insert or update a product and commit.

        Args:
            product: Model instance to persist

        Returns:
            The persisted instance with its id assigned
        """
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def get_by_id(self, product_id: int) -> Optional[ProductModel]:
        """
        Retrieve a product by its ID.

        Args:
            product_id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(ProductModel).filter(ProductModel.id == product_id).first()

    def exists(self, product_id: int) -> bool:
        """Check if a product exists by ID."""
        return self.db.query(ProductModel).filter(ProductModel.id == product_id).count() > 0

    def get_all(self) -> List[ProductModel]:
        """Retrieve all products ordered by id."""
        return self.db.query(ProductModel).order_by(ProductModel.id).all()

    def delete_by_id(self, product_id: int) -> bool:
        """
        Delete a product by its ID.

        Args:
            product_id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        deleted = self.db.query(ProductModel).filter(ProductModel.id == product_id).delete()
        self.db.commit()
        return deleted > 0

    def find_by_price_between(self, min_price: float, max_price: float) -> List[ProductModel]:
        """
        Get products whose price lies in the inclusive range.

        Args:
            min_price: Lower bound
            max_price: Upper bound

        Returns:
            List of matching products
        """
        return self.db.query(ProductModel).filter(
            ProductModel.price >= min_price,
            ProductModel.price <= max_price
        ).order_by(ProductModel.id).all()

    def find_by_name_containing(self, name: str) -> List[ProductModel]:
        """Get products whose name contains the given substring."""
        return self.db.query(ProductModel).filter(
            ProductModel.name.contains(name, autoescape=True)
        ).order_by(ProductModel.id).all()

    def find_by_category(self, category: str) -> List[ProductModel]:
        """Get products in exactly the given category."""
        return self.db.query(ProductModel).filter(
            ProductModel.category == category
        ).order_by(ProductModel.id).all()
