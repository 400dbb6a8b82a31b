from shop_common.exceptions import InvalidInputError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when no user exists with the given id."""

    def __init__(self, user_id: int):
        super().__init__(resource_type="User", resource_id=user_id)
        self.user_id = user_id


class EmptyNameError(InvalidInputError):
    """Raised when a user would be stored without a name."""

    def __init__(self):
        super().__init__(
            detail="User name cannot be empty",
            code="empty_name",
            field="name"
        )
