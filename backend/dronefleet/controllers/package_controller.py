"""
Package controller.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.controllers.base_controller import BaseController
from dronefleet.services.package_service import PackageService
from dronefleet.schemas.package import PackageCreate, PackageUpdate, PackageResponse


class PackageController(BaseController):
    """Controller for package operations."""
    
    def __init__(self, session: AsyncSession):
        self.package_service = PackageService(session)
    
    async def list_packages(self) -> List[PackageResponse]:
        """List packages."""
        return await self.package_service.list_packages()
    
    async def create_package(self, package_data: PackageCreate) -> PackageResponse:
        """Create a new package."""
        return await self.package_service.create_package(package_data)
    
    async def update_package(
        self,
        package_id: str,
        package_data: PackageUpdate,
    ) -> Optional[PackageResponse]:
        """Update a package."""
        return await self.package_service.update_package(package_id, package_data)
    
    async def delete_package(self, package_id: str) -> Optional[PackageResponse]:
        """Delete a package."""
        return await self.package_service.delete_package(package_id)
