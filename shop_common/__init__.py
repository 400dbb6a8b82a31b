"""
Pieces shared by the product, user and order services.

Logging, the error envelope, exception handlers, health routes and the
application factory live here; each service keeps its own settings,
domain errors and routes.
"""
