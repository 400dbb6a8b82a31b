from datetime import datetime, timezone
from enum import Enum
from typing import Dict

from sqlalchemy import Column, DateTime, Enum as SqlEnum, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship

from order_service.infrastructure.database import Base


class OrderStatus(str, Enum):
    PLACED = "PLACED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderItemModel(Base):
    """One line of an order; row id keeps the requested order."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)

    order = relationship("OrderModel", back_populates="items")


class OrderModel(Base):
    """
    A placed order.

    Order States:
    - PLACED: Stored after inventory was reserved
    - SHIPPED, DELIVERED, CANCELLED: Later states, set outside this service
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    total_price = Column(Float, nullable=False, default=0.0)
    status = Column(SqlEnum(OrderStatus), nullable=False, default=OrderStatus.PLACED)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
    )

    @property
    def order_items(self) -> Dict[int, int]:
        """Product id to requested quantity."""
        return {item.product_id: item.quantity for item in self.items}

    def __repr__(self) -> str:
        return f"<OrderModel id={self.id} user_id={self.user_id} status={self.status}>"
