from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from order_service.core.config import get_settings
from order_service.core.logging import get_logger

logger = get_logger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """
    Create the SQLAlchemy engine for the order tables.

    Args:
        database_url: SQLAlchemy connection string

    Returns:
        Engine: Configured engine
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        # FastAPI serves sync routes from a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)


engine = create_db_engine(get_settings().DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False)
Base = declarative_base()


def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create missing tables."""
    # Models must be imported so they register on Base.metadata
    from order_service.domain.models import order  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured")
