"""
Domain layer for the Order Service.

This package contains the ORM models for orders, the order schemas, and
the views of products and users received from the other services.
"""
