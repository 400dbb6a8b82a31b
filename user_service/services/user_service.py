"""
Service responsible for managing users in the User Service.

Handles the user lifecycle and the append-only order list that the
order service writes to after an order has been stored.
"""

import logging
from typing import List, Optional

from user_service.core.exceptions import EmptyNameError, UserNotFoundError
from user_service.core.logging import get_logger
from user_service.domain.models.user import UserModel
from user_service.domain.schemas.user import UserCreate, UserUpdate
from user_service.infrastructure.repositories.user_repository import UserRepository


class UserService:
    """
    Service responsible for managing users, including creation,
    retrieval and order list bookkeeping.
    """

    def __init__(self, repository: UserRepository, logger: Optional[logging.Logger] = None):
        """
        Initialize the user service with dependencies.

        Args:
            repository: Repository for user storage
            logger: Logger to use; defaults to the module logger
        """
        self.repository = repository
        self.logger = logger or get_logger(__name__)

    def add_user(self, user: UserCreate) -> UserModel:
        """
        Create a new user with an empty order list.

        Args:
            user: User creation data

        Returns:
            The stored user

        Raises:
            EmptyNameError: If the name is empty or blank
        """
        self.logger.info(f"Adding user: {user.name}")
        if not user.name or not user.name.strip():
            raise EmptyNameError()
        return self.repository.save(UserModel(name=user.name, role=user.role))

    def get_all_users(self) -> List[UserModel]:
        self.logger.info("Fetching all users")
        return self.repository.get_all()

    def get_user_by_id(self, user_id: int) -> UserModel:
        """
        Retrieve a user by ID.

        Raises:
            UserNotFoundError: If no user has this id
        """
        self.logger.info(f"Fetching user by id: {user_id}")
        user = self.repository.get_by_id(user_id)
        if user is None:
            self.logger.warning(f"User {user_id} not found")
            raise UserNotFoundError(user_id)
        return user

    def update_user(self, user_id: int, updated: UserUpdate) -> UserModel:
        """
        Overwrite name and role of an existing user.

        Args:
            user_id: ID of the user to update
            updated: New name and role

        Returns:
            The updated user, order list unchanged

        Raises:
            UserNotFoundError: If no user has this id
            EmptyNameError: If the new name is empty or blank
        """
        self.logger.info(f"Updating user with id: {user_id}")
        existing = self.get_user_by_id(user_id)
        if not updated.name or not updated.name.strip():
            raise EmptyNameError()

        existing.name = updated.name
        existing.role = updated.role
        return self.repository.save(existing)

    def delete_user(self, user_id: int) -> None:
        self.logger.info(f"Deleting user with id: {user_id}")
        if not self.repository.exists(user_id):
            raise UserNotFoundError(user_id)

        self.repository.delete_by_id(user_id)
        self.logger.info(f"User deleted successfully with id: {user_id}")

    def add_order_to_user(self, user_id: int, order_id: int) -> UserModel:
        """
        Append an order id to the user's order list.

        The same id may be appended more than once.

        Raises:
            UserNotFoundError: If no user has this id
        """
        self.logger.info(f"Adding order {order_id} to user {user_id}")
        user = self.get_user_by_id(user_id)
        user.append_order(order_id)
        return self.repository.save(user)
