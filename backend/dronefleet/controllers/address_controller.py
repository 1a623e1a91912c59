"""
Address controller.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.controllers.base_controller import BaseController
from dronefleet.services.address_service import AddressService
from dronefleet.schemas.address import AddressResponse


class AddressController(BaseController):
    """Controller for address lookups."""
    
    def __init__(self, session: AsyncSession):
        self.address_service = AddressService(session)
    
    async def list_addresses(self) -> List[AddressResponse]:
        """List addresses."""
        return await self.address_service.list_addresses()
