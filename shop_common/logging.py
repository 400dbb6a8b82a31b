import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

# Context variable for request tracking
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


class CorrelationIdFilter(logging.Filter):
    """Inject the current correlation ID into every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id.get()
        return True


class StructuredLogFormatter(logging.Formatter):
    """Render each record as one JSON object tagged with the service name."""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "service": self.service_name,
        }

        corr_id = getattr(record, "correlation_id", "")
        if corr_id:
            log_data["correlation_id"] = corr_id

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_data, default=str)


def configure_logging(
    logger_name: str,
    service_name: str,
    log_level: str = "INFO",
    structured: bool = True
) -> logging.Logger:
    """
    Install a stdout handler on a service's package logger.

    Every module of a service logs below its package logger, so services
    loaded into one process keep separate handlers and service tags.
    Calling again replaces the handler.

    Args:
        logger_name: Top level package of the service, e.g. "order_service"
        service_name: Value of the "service" field in each record
        log_level: Level name; unknown names fall back to INFO
        structured: JSON output when true, plain text otherwise

    Returns:
        logging.Logger: The configured package logger
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())

    if structured:
        handler.setFormatter(StructuredLogFormatter(service_name))
    else:
        handler.setFormatter(logging.Formatter(
            f"[%(asctime)s] [%(levelname)s] [{service_name}] [%(name)s] [%(correlation_id)s] - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    logger = logging.getLogger(logger_name)
    logger.handlers = [handler]
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.propagate = False

    # Reduce noise from the server access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_correlation_id(corr_id: Optional[str] = None) -> str:
    """
    Bind a correlation ID to the current request context.

    Args:
        corr_id: Incoming X-Correlation-ID value; a UUID4 is generated when missing

    Returns:
        str: The bound correlation ID
    """
    corr_id = corr_id or str(uuid.uuid4())
    correlation_id.set(corr_id)
    return corr_id
