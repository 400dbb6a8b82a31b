from user_service.api.routes import users

__all__ = ["users"]
