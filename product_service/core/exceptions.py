from shop_common.exceptions import InvalidInputError, NotFoundError


class ProductNotFoundError(NotFoundError):
    """Raised when no product exists with the given id."""

    def __init__(self, product_id: int):
        super().__init__(resource_type="Product", resource_id=product_id)
        self.product_id = product_id


class NegativeQuantityError(InvalidInputError):
    """Raised when a product would be stored with a negative quantity."""

    def __init__(self, quantity: int):
        super().__init__(
            detail="Quantity cannot be negative",
            code="negative_quantity",
            field="quantity",
            context={"quantity": quantity}
        )
