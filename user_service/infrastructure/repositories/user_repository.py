"""
User repository for user table access.
"""

from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from user_service.domain.models.user import UserModel


class UserRepository:
    """Repository for UserModel operations."""

    def __init__(self, db: Session):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def save(self, user: UserModel) -> UserModel:
        """
        Insert or update a user, including appended order ids, and commit.

        Args:
            user: Model instance to persist

        Returns:
            The persisted instance with its id assigned
        """
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[UserModel]:
        """
        Retrieve a user with its order list.

        Args:
            user_id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(UserModel).options(
            selectinload(UserModel.orders)
        ).filter(UserModel.id == user_id).first()

    def exists(self, user_id: int) -> bool:
        """Check if a user exists by ID."""
        return self.db.query(UserModel).filter(UserModel.id == user_id).count() > 0

    def get_all(self) -> List[UserModel]:
        """Retrieve all users ordered by id."""
        return self.db.query(UserModel).options(
            selectinload(UserModel.orders)
        ).order_by(UserModel.id).all()

    def delete_by_id(self, user_id: int) -> bool:
        """
        Delete a user and its order list entries.

        Args:
            user_id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        user = self.db.query(UserModel).filter(UserModel.id == user_id).first()
        if user is None:
            return False
        self.db.delete(user)
        self.db.commit()
        return True
