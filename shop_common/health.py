import logging
from typing import Callable, Dict, Iterator, List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


class HealthStatus(BaseModel):
    """Basic health status response model."""
    status: str
    version: str
    service: str


class DependencyStatus(BaseModel):
    """Status of a single dependency."""
    name: str
    status: str
    details: Optional[Dict] = None


class DetailedHealthStatus(HealthStatus):
    """Detailed health status with dependency information."""
    dependencies: List[DependencyStatus]


def create_health_router(
    get_db: Callable[[], Iterator[Session]],
    service_name: str,
    version: str,
    logger: logging.Logger
) -> APIRouter:
    """
    Build the /health routes for one service.

    Args:
        get_db: The service's session dependency, so overrides apply
        service_name: Reported in every response
        version: Reported in every response
        logger: Service logger for failed database checks

    Returns:
        APIRouter: Router with /health and /health/detailed
    """
    router = APIRouter(prefix="/health", tags=["Health"])

    @router.get(
        "",
        response_model=HealthStatus,
        status_code=status.HTTP_200_OK,
        summary="Basic health check"
    )
    def get_health() -> HealthStatus:
        return HealthStatus(status="ok", version=version, service=service_name)

    @router.get(
        "/detailed",
        response_model=DetailedHealthStatus,
        status_code=status.HTTP_200_OK,
        summary="Detailed health check"
    )
    def get_detailed_health(db: Session = Depends(get_db)) -> DetailedHealthStatus:
        """Service health with the result of a trivial database query."""
        try:
            db.execute(text("SELECT 1"))
            database = DependencyStatus(name="database", status="ok")
        except SQLAlchemyError as e:
            logger.warning(f"Database health check failed: {str(e)}")
            database = DependencyStatus(name="database", status="error", details={"error": str(e)})

        overall = "ok" if database.status == "ok" else "degraded"
        return DetailedHealthStatus(
            status=overall,
            version=version,
            service=service_name,
            dependencies=[database]
        )

    return router
