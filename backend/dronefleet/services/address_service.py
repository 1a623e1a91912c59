"""
Address service.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.services.base_service import BaseService
from dronefleet.db.repositories.address_repository import AddressRepository
from dronefleet.schemas.address import AddressResponse


class AddressService(BaseService):
    """Service for address lookups."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.address_repo = AddressRepository(session)
    
    async def list_addresses(self) -> List[AddressResponse]:
        """List all addresses by ascending ID."""
        addresses = await self.address_repo.list()
        return [AddressResponse.model_validate(address) for address in addresses]
