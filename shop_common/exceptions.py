from typing import Any, Dict, Optional, Union

from fastapi import status


class APIException(Exception):
    """
    Error that maps onto an HTTP response.

    The error handlers render every subclass with to_dict(), so clients
    always receive the same envelope.
    """

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        code: str = "internal_error",
        context: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.detail = detail
        self.code = code
        self.context = context or {}
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Build the {"error": {...}} response body."""
        return {
            "error": {
                "code": self.code,
                "message": self.detail,
                "status_code": self.status_code,
                "context": self.context
            }
        }


class InvalidInputError(APIException):
    """Exception raised when a request is well formed but not acceptable."""

    def __init__(
        self,
        detail: str = "Invalid input",
        code: str = "invalid_input",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        merged_context = {"field": field} if field else {}
        if context:
            merged_context.update(context)

        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            code=code,
            context=merged_context
        )


class NotFoundError(APIException):
    """Exception raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Union[str, int],
        detail: Optional[str] = None,
        code: str = "not_found_error",
        context: Optional[Dict[str, Any]] = None
    ):
        if detail is None:
            detail = f"{resource_type} not found with id: {resource_id}"

        merged_context = {
            "resource_type": resource_type,
            "resource_id": str(resource_id)
        }
        if context:
            merged_context.update(context)

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            code=code,
            context=merged_context
        )
