import logging

from shop_common.logging import configure_logging as configure_service_logging
from shop_common.logging import correlation_id, get_logger, set_correlation_id

from product_service.core.config import get_settings

__all__ = ["configure_logging", "correlation_id", "get_logger", "set_correlation_id"]


def configure_logging() -> logging.Logger:
    """Send every product_service.* logger to stdout using the service settings."""
    settings = get_settings()
    return configure_service_logging(
        "product_service",
        settings.SERVICE_NAME,
        log_level=settings.LOG_LEVEL,
        structured=settings.ENABLE_STRUCTURED_LOGGING
    )
