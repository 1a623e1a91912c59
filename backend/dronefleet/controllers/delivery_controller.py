"""
Delivery controller.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.controllers.base_controller import BaseController
from dronefleet.services.delivery_service import DeliveryService
from dronefleet.schemas.common import MessageResponse
from dronefleet.schemas.delivery import DeliveryCreate, DeliveryStatusUpdate, DeliveryResponse


class DeliveryController(BaseController):
    """Controller for delivery operations."""
    
    def __init__(self, session: AsyncSession):
        self.delivery_service = DeliveryService(session)
    
    async def list_deliveries(self, status: Optional[str] = None) -> List[DeliveryResponse]:
        """List deliveries."""
        return await self.delivery_service.list_deliveries(status)
    
    async def create_delivery(self, delivery_data: DeliveryCreate) -> DeliveryResponse:
        """Create a new delivery."""
        return await self.delivery_service.create_delivery(delivery_data)
    
    async def update_delivery_status(
        self,
        delivery_id: int,
        status_data: DeliveryStatusUpdate,
    ) -> Optional[DeliveryResponse]:
        """Update a delivery's status."""
        return await self.delivery_service.update_delivery_status(delivery_id, status_data)
    
    async def delete_delivery(self, delivery_id: str) -> MessageResponse:
        """Delete a delivery."""
        return await self.delivery_service.delete_delivery(delivery_id)
