from typing import Optional

from order_service.clients.base_client import ServiceClient
from order_service.domain.schemas.remote import UserData


class UserClient(ServiceClient):
    """Client for the user service."""

    service_name = "user-service"

    def get_user_by_id(self, user_id: int) -> Optional[UserData]:
        """
        Fetch a user.

        Returns:
            The user, or None if the user service does not know it

        Raises:
            UpstreamServiceError: If the user service cannot be reached or fails
        """
        data = self._request("GET", f"/users/{user_id}", allow_not_found=True)
        if data is None:
            return None
        return self._parse(UserData, data)

    def add_order_to_user(self, user_id: int, order_id: int) -> None:
        """
        Append an order id to the user's order list.

        Raises:
            UpstreamServiceError: If the user is gone or the call fails
        """
        self._request("POST", f"/users/{user_id}/orders/{order_id}")
