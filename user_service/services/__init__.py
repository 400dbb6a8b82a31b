from user_service.services.user_service import UserService

__all__ = ["UserService"]
