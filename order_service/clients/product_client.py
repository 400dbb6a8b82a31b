from typing import Optional

from order_service.clients.base_client import ServiceClient
from order_service.domain.schemas.remote import ProductData


class ProductClient(ServiceClient):
    """Client for the product service's product endpoints."""

    service_name = "product-service"

    def get_product_by_id(self, product_id: int) -> Optional[ProductData]:
        """
        Fetch a product.

        Args:
            product_id: ID of the product

        Returns:
            The product, or None if the product service does not know it

        Raises:
            UpstreamServiceError: If the product service cannot be reached or fails
        """
        data = self._request("GET", f"/products/{product_id}", allow_not_found=True)
        if data is None:
            return None
        return self._parse(ProductData, data)

    def update_product(self, product_id: int, product: ProductData) -> ProductData:
        """
        Replace a product's fields, including its quantity.

        Args:
            product_id: ID of the product
            product: Full product as it should be stored

        Returns:
            The product as stored by the product service

        Raises:
            UpstreamServiceError: If the update is rejected or the call fails
        """
        data = self._request("PUT", f"/products/{product_id}", json=product.model_dump())
        return self._parse(ProductData, data)
