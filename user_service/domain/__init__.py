"""
Domain layer for the User Service.

This package contains the ORM models for users and their order lists,
and the schemas used on the HTTP surface.
"""
