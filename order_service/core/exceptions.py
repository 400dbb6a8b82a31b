from typing import Any, Dict, Optional

from fastapi import status

from shop_common.exceptions import APIException, InvalidInputError, NotFoundError


class UpstreamServiceError(APIException):
    """Exception raised when a call to another service fails."""

    def __init__(
        self,
        service_name: str,
        detail: str = "Upstream service error",
        code: str = "upstream_error",
        status_code: int = status.HTTP_502_BAD_GATEWAY,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        merged_context = {"service": service_name}
        if context:
            merged_context.update(context)

        super().__init__(status_code=status_code, detail=detail, code=code, context=merged_context)
        self.service_name = service_name
        self.original_exception = original_exception

        # Add original exception info to context if available
        if original_exception is not None:
            self.context["original_error"] = str(original_exception)


class OrderNotFoundError(NotFoundError):
    """Raised when no order exists with the given id."""

    def __init__(self, order_id: int):
        super().__init__(resource_type="Order", resource_id=order_id)
        self.order_id = order_id


class UserNotFoundError(NotFoundError):
    """Raised when the ordering user cannot be confirmed by the user service."""

    def __init__(self, user_id: int):
        super().__init__(resource_type="User", resource_id=user_id)
        self.user_id = user_id


class ProductNotFoundError(NotFoundError):
    """Raised when an ordered product is unknown to the product service."""

    def __init__(self, product_id: int):
        super().__init__(resource_type="Product", resource_id=product_id)
        self.product_id = product_id


class InsufficientQuantityError(InvalidInputError):
    """Raised when a product has less stock than an order requests."""

    def __init__(self, product_id: int, requested: int, available: int):
        super().__init__(
            detail=f"Insufficient quantity for product: {product_id}",
            code="insufficient_quantity",
            context={
                "product_id": product_id,
                "requested": requested,
                "available": available
            }
        )
        self.product_id = product_id
