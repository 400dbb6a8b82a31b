from sqlalchemy import Column, Float, Integer, String, Text, Index

from product_service.infrastructure.database import Base


class ProductModel(Base):
    """A catalogue entry together with its available stock."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(255), nullable=True)
    price = Column(Float, nullable=False, default=0.0)
    quantity = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("idx_products_category", "category"),
        Index("idx_products_price", "price"),
    )

    def __repr__(self) -> str:
        return f"<ProductModel id={self.id} name={self.name!r} quantity={self.quantity}>"
