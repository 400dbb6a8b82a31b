"""
Domain layer for the Product Service.

This package contains the ORM model for products and the request and
response schemas used on the HTTP surface.
"""
