from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from user_service.api.dependencies import get_user_service
from user_service.domain.schemas.user import UserCreate, UserResponse, UserUpdate
from user_service.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a user"
)
def add_user(user: UserCreate, user_service: UserService = Depends(get_user_service)):
    return user_service.add_user(user)


@router.get("", response_model=List[UserResponse], summary="List users")
def get_all_users(user_service: UserService = Depends(get_user_service)):
    return user_service.get_all_users()


@router.get("/{user_id}", response_model=UserResponse)
def get_user_by_id(
    user_id: int = Path(...),
    user_service: UserService = Depends(get_user_service)
):
    """Gets user by ID, including the ids of their orders."""
    return user_service.get_user_by_id(user_id)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user: UserUpdate,
    user_id: int = Path(...),
    user_service: UserService = Depends(get_user_service)
):
    """Replaces name and role."""
    return user_service.update_user(user_id, user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int = Path(...),
    user_service: UserService = Depends(get_user_service)
):
    user_service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{user_id}/orders/{order_id}",
    response_model=UserResponse,
    include_in_schema=False
)
def add_order_to_user(
    user_id: int = Path(...),
    order_id: int = Path(...),
    user_service: UserService = Depends(get_user_service)
):
    """Internal endpoint called by the order service after storing an order."""
    return user_service.add_order_to_user(user_id, order_id)
