"""
User Service - Customer accounts for the shop platform.

This package owns the user table together with each user's ordered list
of order ids, which the order service appends to after placing an order.
"""

__version__ = "0.1.0"
