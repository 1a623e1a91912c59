"""
Address repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.db.repositories.base_repository import BaseRepository
from dronefleet.models.address import Address


class AddressRepository(BaseRepository[Address]):
    """Repository for address lookups. Addresses are never written over HTTP."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Address, session)
