"""
Order Service - Order placement for the shop platform.

This package owns the order tables and runs the order placement workflow,
which confirms the user and reserves inventory by calling the user and
product services over HTTP.
"""

__version__ = "0.1.0"
