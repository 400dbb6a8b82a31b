"""
Order repository for order table access.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session, selectinload

from order_service.domain.models.order import OrderItemModel, OrderModel, OrderStatus


class OrderRepository:
    """Repository for OrderModel operations."""

    def __init__(self, db: Session):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def create(
        self,
        user_id: int,
        order_items: Dict[int, int],
        total_price: float,
        status: OrderStatus = OrderStatus.PLACED
    ) -> OrderModel:
        """
        Store a new order with its items and commit.

        Args:
            user_id: ID of the ordering user
            order_items: Product id to quantity, stored in iteration order
            total_price: Computed total
            status: Initial status

        Returns:
            The stored order with its id assigned
        """
        order = OrderModel(
            user_id=user_id,
            total_price=total_price,
            status=status,
            items=[
                OrderItemModel(product_id=product_id, quantity=quantity)
                for product_id, quantity in order_items.items()
            ]
        )
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def get_by_id(self, order_id: int) -> Optional[OrderModel]:
        """
        Retrieve an order with its items.

        Args:
            order_id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(OrderModel).options(
            selectinload(OrderModel.items)
        ).filter(OrderModel.id == order_id).first()

    def list_all(self) -> List[OrderModel]:
        """Retrieve all orders ordered by id."""
        return self.db.query(OrderModel).options(
            selectinload(OrderModel.items)
        ).order_by(OrderModel.id).all()

    def list_by_user(self, user_id: int) -> List[OrderModel]:
        """
        Get all orders placed by a user.

        Args:
            user_id: ID of the user

        Returns:
            List of the user's orders, oldest first
        """
        return self.db.query(OrderModel).options(
            selectinload(OrderModel.items)
        ).filter(OrderModel.user_id == user_id).order_by(OrderModel.id).all()
