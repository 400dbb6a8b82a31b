from user_service.infrastructure.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
