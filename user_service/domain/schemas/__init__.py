from user_service.domain.schemas.user import UserBase, UserCreate, UserResponse, UserUpdate

__all__ = ["UserBase", "UserCreate", "UserUpdate", "UserResponse"]
