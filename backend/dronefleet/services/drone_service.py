"""
Drone service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.core.logging import get_logger
from dronefleet.services.base_service import BaseService
from dronefleet.db.repositories.drone_repository import DroneRepository
from dronefleet.schemas.common import MessageResponse
from dronefleet.schemas.drone import DroneCreate, DroneUpdate, DroneResponse

logger = get_logger(__name__)


class DroneService(BaseService):
    """Service for drone operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.drone_repo = DroneRepository(session)
    
    async def list_drones(self) -> List[DroneResponse]:
        """List all drones by ascending ID."""
        drones = await self.drone_repo.list()
        return [DroneResponse.model_validate(drone) for drone in drones]
    
    async def create_drone(self, drone_data: DroneCreate) -> DroneResponse:
        """Create a new drone."""
        drone = await self.drone_repo.create(**drone_data.model_dump())
        await self.session.commit()
        await self.session.refresh(drone)
        logger.info("Drone created", extra={"droneid": drone.id, "model": drone.model})
        return DroneResponse.model_validate(drone)
    
    async def update_drone(
        self,
        drone_id: int,
        drone_data: DroneUpdate,
    ) -> Optional[DroneResponse]:
        """Update a drone's status and battery."""
        drone = await self.drone_repo.update_status_and_battery(
            drone_id,
            status=drone_data.status,
            battery=drone_data.battery,
        )
        if not drone:
            return None
        await self.session.commit()
        await self.session.refresh(drone)
        logger.info(
            "Drone updated",
            extra={"droneid": drone.id, "status": drone.status, "battery": drone.battery},
        )
        return DroneResponse.model_validate(drone)
    
    async def delete_drone(self, drone_id: int) -> MessageResponse:
        """Delete a drone. Succeeds whether or not the drone existed."""
        deleted = await self.drone_repo.delete(drone_id)
        await self.session.commit()
        logger.info("Drone delete", extra={"droneid": drone_id, "existed": deleted})
        return MessageResponse(message=f"Drone {drone_id} deleted successfully")
