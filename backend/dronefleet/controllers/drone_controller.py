"""
Drone controller.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.controllers.base_controller import BaseController
from dronefleet.services.drone_service import DroneService
from dronefleet.schemas.common import MessageResponse
from dronefleet.schemas.drone import DroneCreate, DroneUpdate, DroneResponse


class DroneController(BaseController):
    """Controller for drone operations."""
    
    def __init__(self, session: AsyncSession):
        self.drone_service = DroneService(session)
    
    async def list_drones(self) -> List[DroneResponse]:
        """List drones."""
        return await self.drone_service.list_drones()
    
    async def create_drone(self, drone_data: DroneCreate) -> DroneResponse:
        """Create a new drone."""
        return await self.drone_service.create_drone(drone_data)
    
    async def update_drone(self, drone_id: int, drone_data: DroneUpdate) -> Optional[DroneResponse]:
        """Update a drone's status and battery."""
        return await self.drone_service.update_drone(drone_id, drone_data)
    
    async def delete_drone(self, drone_id: int) -> MessageResponse:
        """Delete a drone."""
        return await self.drone_service.delete_drone(drone_id)
