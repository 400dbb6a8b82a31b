"""
Outbound HTTP clients used by the order workflow.
"""

from order_service.clients.base_client import ServiceClient
from order_service.clients.product_client import ProductClient
from order_service.clients.user_client import UserClient

__all__ = ["ServiceClient", "ProductClient", "UserClient"]
