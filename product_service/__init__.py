"""
Product Service - Catalogue and inventory for the shop platform.

This package owns the product table and exposes CRUD and filtered lookups
over HTTP. The order service reads and updates inventory through it.
"""

__version__ = "0.1.0"
