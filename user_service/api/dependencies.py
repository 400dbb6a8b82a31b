"""
Dependency providers for the user routes.

Each request gets its own database session; repositories and services are
built on top of it with explicit constructor arguments.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from user_service.core.logging import get_logger
from user_service.infrastructure.database import get_db
from user_service.infrastructure.repositories.user_repository import UserRepository
from user_service.services.user_service import UserService


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """
    Factory function for creating UserRepository instances.

    Args:
        db: Database session

    Returns:
        UserRepository instance
    """
    return UserRepository(db)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository)
) -> UserService:
    """
    Provide the user service instance.

    Args:
        repository: Request scoped user repository

    Returns:
        UserService: Service instance
    """
    return UserService(repository, logger=get_logger("user_service.services"))
