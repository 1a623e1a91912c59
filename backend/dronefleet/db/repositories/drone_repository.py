"""
Drone repository for database operations.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.db.repositories.base_repository import BaseRepository
from dronefleet.models.drone import Drone


class DroneRepository(BaseRepository[Drone]):
    """Repository for drone operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Drone, session)
    
    async def update_status_and_battery(
        self,
        drone_id: int,
        status: Optional[str] = None,
        battery: Optional[float] = None,
    ) -> Optional[Drone]:
        """
        Update status and/or battery. Other columns are never touched.
        
        Returns the current row unchanged when neither value is given, and
        None when the drone does not exist.
        """
        changes = {}
        if status is not None:
            changes["status"] = status
        if battery is not None:
            changes["battery"] = battery
        
        if not changes:
            return await self.get(drone_id)
        return await self.apply_partial_update(drone_id, changes)
