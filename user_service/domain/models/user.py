from enum import Enum
from typing import List

from sqlalchemy import Column, Enum as SqlEnum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from user_service.infrastructure.database import Base


class Role(str, Enum):
    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


class UserOrderModel(Base):
    """One entry of a user's order list; row id keeps append order."""

    __tablename__ = "user_orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    order_id = Column(Integer, nullable=False)

    user = relationship("UserModel", back_populates="orders")


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    role = Column(SqlEnum(Role), nullable=False, default=Role.CUSTOMER)

    orders = relationship(
        "UserOrderModel",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserOrderModel.id",
    )

    @property
    def orders_list(self) -> List[int]:
        """Order ids in the order they were appended."""
        return [entry.order_id for entry in self.orders]

    def append_order(self, order_id: int) -> None:
        # Duplicates are kept
        self.orders.append(UserOrderModel(order_id=order_id))

    def __repr__(self) -> str:
        return f"<UserModel id={self.id} name={self.name!r} role={self.role}>"
