from typing import List

from fastapi import APIRouter, Depends, Path, status

from order_service.api.dependencies import get_order_service
from order_service.domain.schemas.order import OrderCreate, OrderResponse
from order_service.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place an order"
)
def place_order(order: OrderCreate, order_service: OrderService = Depends(get_order_service)):
    """
    Places an order.

    Confirms the user, takes the requested quantities out of stock and
    records the new order on the user. Stock already taken for earlier
    items is not returned if a later item fails.
    """
    return order_service.place_order(order)


@router.get("", response_model=List[OrderResponse], summary="List orders")
def get_all_orders(order_service: OrderService = Depends(get_order_service)):
    return order_service.get_all_orders()


@router.get("/user/{user_id}", response_model=List[OrderResponse])
def get_orders_by_user_id(
    user_id: int = Path(...),
    order_service: OrderService = Depends(get_order_service)
):
    """Gets all orders placed by a user."""
    return order_service.get_orders_by_user_id(user_id)


@router.get("/{order_id}", response_model=OrderResponse)
def get_order_by_id(
    order_id: int = Path(...),
    order_service: OrderService = Depends(get_order_service)
):
    return order_service.get_order_by_id(order_id)
