from user_service.domain.models.user import Role, UserModel, UserOrderModel

__all__ = ["Role", "UserModel", "UserOrderModel"]
