"""
Delivery repository for database operations.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete

from dronefleet.db.repositories.base_repository import BaseRepository
from dronefleet.models.delivery import Delivery
from dronefleet.models.association_tables import delivery_package


class DeliveryRepository(BaseRepository[Delivery]):
    """Repository for delivery operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Delivery, session)
    
    async def list_newest_first(self, status: Optional[str] = None) -> List[Delivery]:
        """List deliveries by descending ID, optionally filtered by status."""
        return await self.list(descending=True, deliverystatus=status)
    
    async def update_status(self, delivery_id: int, status: str) -> Optional[Delivery]:
        """Set the delivery status. Returns None if the delivery does not exist."""
        return await self.apply_partial_update(delivery_id, {"deliverystatus": status})
    
    async def delete_with_links(self, delivery_id: int) -> bool:
        """
        Delete a delivery's package links, then the delivery itself.
        
        Returns True if a delivery row was removed.
        """
        await self.session.execute(
            delete(delivery_package).where(delivery_package.c.deliveryid == delivery_id)
        )
        return await self.delete(delivery_id)
