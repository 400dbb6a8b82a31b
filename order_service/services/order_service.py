"""
Service responsible for placing and reading orders.

Placing an order is a sequence of independent calls: the user service
confirms the user, the product service is read and updated once per line
item, the order is stored, and finally the user service records the order
id. Nothing is rolled back when a later step fails, so stock decremented
for earlier items stays decremented.
"""

import logging
from typing import List, Optional

from order_service.clients.product_client import ProductClient
from order_service.clients.user_client import UserClient
from order_service.core.exceptions import (
    InsufficientQuantityError,
    OrderNotFoundError,
    ProductNotFoundError,
    UpstreamServiceError,
    UserNotFoundError,
)
from order_service.core.logging import get_logger
from order_service.domain.models.order import OrderModel, OrderStatus
from order_service.domain.schemas.order import OrderCreate
from order_service.infrastructure.repositories.order_repository import OrderRepository


class OrderService:
    """Runs the order placement workflow and serves order lookups."""

    def __init__(
        self,
        repository: OrderRepository,
        product_client: ProductClient,
        user_client: UserClient,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the order service with dependencies.

        Args:
            repository: Repository for order storage
            product_client: Client for the product service
            user_client: Client for the user service
            logger: Logger to use; defaults to the module logger
        """
        self.repository = repository
        self.product_client = product_client
        self.user_client = user_client
        self.logger = logger or get_logger(__name__)

    def place_order(self, order: OrderCreate) -> OrderModel:
        """
        Place an order.

        Args:
            order: The ordering user and the requested quantity per product

        Returns:
            The stored order with computed total price and PLACED status

        Raises:
            UserNotFoundError: If the user service cannot confirm the user
            ProductNotFoundError: If an ordered product does not exist
            InsufficientQuantityError: If a product has less stock than requested
            UpstreamServiceError: If a product update or the order list update fails
        """
        self.logger.info(f"Placing order for user: {order.user_id}")

        try:
            user = self.user_client.get_user_by_id(order.user_id)
        except UpstreamServiceError as e:
            self.logger.warning(f"User lookup failed for {order.user_id}: {e.detail}")
            raise UserNotFoundError(order.user_id) from e
        if user is None:
            raise UserNotFoundError(order.user_id)

        total_price = 0.0
        for product_id, quantity in order.order_items.items():
            product = self.product_client.get_product_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            if product.quantity < quantity:
                raise InsufficientQuantityError(product_id, requested=quantity, available=product.quantity)

            product.quantity -= quantity
            self.product_client.update_product(product_id, product)

            total_price += product.price * quantity

        saved = self.repository.create(
            user_id=order.user_id,
            order_items=order.order_items,
            total_price=total_price,
            status=OrderStatus.PLACED
        )
        self.logger.info(f"Order {saved.id} stored for user {order.user_id} with total {total_price}")

        self.user_client.add_order_to_user(order.user_id, saved.id)

        return saved

    def get_all_orders(self) -> List[OrderModel]:
        self.logger.info("Fetching all orders")
        return self.repository.list_all()

    def get_order_by_id(self, order_id: int) -> OrderModel:
        """
        Retrieve an order by ID.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        self.logger.info(f"Fetching order by id: {order_id}")
        order = self.repository.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def get_orders_by_user_id(self, user_id: int) -> List[OrderModel]:
        self.logger.info(f"Fetching orders for user: {user_id}")
        return self.repository.list_by_user(user_id)
