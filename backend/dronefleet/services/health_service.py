"""
Health service.
Provides health check functionality.
"""

import time
from dronefleet.core.logging import get_logger
from dronefleet.services.base_service import BaseService
from dronefleet.db.repositories.health_repository import HealthRepository
from dronefleet.db.session import Database
from dronefleet.schemas.health import HealthResponse

logger = get_logger(__name__)


class HealthService(BaseService):
    """Service for health check operations."""
    
    def __init__(self, database: Database):
        self.database = database
        self.start_time = time.time()
    
    async def get_health(self) -> HealthResponse:
        """
        Get system health status.
        
        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format
        
        checks = {}
        
        try:
            async with self.database.session() as session:
                repo = HealthRepository(session=session)
                db_status = await repo.check_database()
                checks["database"] = "ok" if db_status else "error"
        except Exception as e:
            logger.warning("Database health check failed", extra={"error": str(e)})
            checks["database"] = f"error: {str(e)}"
        
        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"
        
        return HealthResponse(
            status=status,
            uptime=uptime_str,
            checks=checks,
        )
