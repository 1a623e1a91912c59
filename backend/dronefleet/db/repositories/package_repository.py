"""
Package repository for database operations.
"""

from typing import Dict, Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, func
from sqlalchemy.orm import joinedload

from dronefleet.db.repositories.base_repository import BaseRepository
from dronefleet.models.package import Package
from dronefleet.models.association_tables import delivery_package


class PackageRepository(BaseRepository[Package]):
    """Repository for package operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Package, session)
    
    def _with_addresses(self):
        return select(Package).options(
            joinedload(Package.sender),
            joinedload(Package.receiver),
        )
    
    async def list_with_addresses(self) -> List[Package]:
        """List packages ordered by ID with sender and receiver loaded."""
        result = await self.session.execute(
            self._with_addresses().order_by(Package.id.asc())
        )
        return list(result.unique().scalars().all())
    
    async def get_with_addresses(self, package_id: int) -> Optional[Package]:
        """Get a package with sender and receiver loaded."""
        result = await self.session.execute(
            self._with_addresses()
            .where(Package.id == package_id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()
    
    async def get_delivery_ids(self, package_ids: Iterable[int]) -> Dict[int, int]:
        """Map package IDs to the lowest delivery ID they are linked to."""
        package_ids = list(package_ids)
        if not package_ids:
            return {}
        result = await self.session.execute(
            select(delivery_package.c.packageid, func.min(delivery_package.c.deliveryid))
            .where(delivery_package.c.packageid.in_(package_ids))
            .group_by(delivery_package.c.packageid)
        )
        return {package_id: delivery_id for package_id, delivery_id in result.all()}
    
    async def coalescing_update(self, package_id: int, **changes) -> Optional[Package]:
        """
        Update supplied columns, keeping the current value of every other one.
        
        Returns the reloaded package, or None if it does not exist.
        """
        changes = {key: value for key, value in changes.items() if value is not None}
        if not changes:
            return await self.get_with_addresses(package_id)
        
        updated = await self.apply_partial_update(package_id, changes)
        if updated is None:
            return None
        return await self.get_with_addresses(package_id)
    
    async def delete_returning(self, package_id: int) -> Optional[Package]:
        """Delete a package and its delivery links, returning the removed row."""
        package = await self.get_with_addresses(package_id)
        if package is None:
            return None
        
        await self.session.execute(
            delete(delivery_package).where(delivery_package.c.packageid == package_id)
        )
        await self.session.execute(
            delete(Package)
            .where(Package.id == package_id)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return package
