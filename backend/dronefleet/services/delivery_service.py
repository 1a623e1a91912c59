"""
Delivery service with business logic.
"""

from typing import List, Optional, Union
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.core.logging import get_logger
from dronefleet.services.base_service import BaseService
from dronefleet.db.repositories.delivery_repository import DeliveryRepository
from dronefleet.schemas.common import MessageResponse
from dronefleet.schemas.delivery import DeliveryCreate, DeliveryStatusUpdate, DeliveryResponse
from dronefleet.utils.display_ids import DeliveryDisplayId

logger = get_logger(__name__)


class DeliveryService(BaseService):
    """Service for delivery operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.delivery_repo = DeliveryRepository(session)
    
    async def list_deliveries(self, status: Optional[str] = None) -> List[DeliveryResponse]:
        """List deliveries newest first."""
        deliveries = await self.delivery_repo.list_newest_first(status)
        return [DeliveryResponse.model_validate(delivery) for delivery in deliveries]
    
    async def create_delivery(self, delivery_data: DeliveryCreate) -> DeliveryResponse:
        """
        Create a new delivery.
        
        Raises:
            ValueError: if droneid, operatorid or starttime is missing
        """
        if not delivery_data.droneid or not delivery_data.operatorid or not delivery_data.starttime:
            raise ValueError("droneid, operatorid, and starttime are required")
        
        delivery = await self.delivery_repo.create(**delivery_data.model_dump())
        await self.session.commit()
        await self.session.refresh(delivery)
        logger.info(
            "Delivery created",
            extra={
                "deliveryid": delivery.id,
                "droneid": delivery.droneid,
                "operatorid": delivery.operatorid,
            },
        )
        return DeliveryResponse.model_validate(delivery)
    
    async def update_delivery_status(
        self,
        delivery_id: int,
        status_data: DeliveryStatusUpdate,
    ) -> Optional[DeliveryResponse]:
        """Update a delivery's status."""
        delivery = await self.delivery_repo.update_status(delivery_id, status_data.status)
        if not delivery:
            return None
        await self.session.commit()
        await self.session.refresh(delivery)
        logger.info(
            "Delivery status updated",
            extra={"deliveryid": delivery_id, "status": delivery.deliverystatus},
        )
        return DeliveryResponse.model_validate(delivery)
    
    async def delete_delivery(self, delivery_id: Union[str, int]) -> MessageResponse:
        """
        Delete a delivery and its package links.
        Succeeds whether or not the delivery existed.
        
        Raises:
            ValueError: if the delivery ID is malformed
        """
        display_id = DeliveryDisplayId.parse(delivery_id)
        deleted = await self.delivery_repo.delete_with_links(display_id.value)
        await self.session.commit()
        logger.info("Delivery delete", extra={"deliveryid": display_id.value, "existed": deleted})
        return MessageResponse(message="Delivery deleted successfully")
