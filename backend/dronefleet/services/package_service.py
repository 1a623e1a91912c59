"""
Package service with business logic.

Packages leave the service in one display shape on every path:
``PKG-###`` ids, ``"LxWxH cm"`` dimensions, ``"N kg"`` weight and resolved
sender/receiver address strings.
"""

from typing import List, Optional, Union
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.core.logging import get_logger
from dronefleet.services.base_service import BaseService
from dronefleet.db.repositories.package_repository import PackageRepository
from dronefleet.models.address import Address
from dronefleet.models.package import Package
from dronefleet.schemas.package import PackageCreate, PackageUpdate, PackageResponse
from dronefleet.utils.display_ids import DeliveryDisplayId, PackageDisplayId
from dronefleet.utils.measurements import Dimensions, format_weight

logger = get_logger(__name__)

# No status column backs packages yet
PENDING_STATUS = "Pending"
DELETED_STATUS = "Deleted"


def format_address(address: Optional[Address]) -> Optional[str]:
    """Render an address as ``"<street>, <city> <zip>"``."""
    if address is None:
        return None
    return f"{address.street}, {address.city} {address.zip}"


def to_package_response(
    package: Package,
    delivery_id: Optional[int] = None,
    status: str = PENDING_STATUS,
) -> PackageResponse:
    """Shape a package row with loaded addresses into its display form."""
    dimensions = Dimensions(length=package.length, width=package.width, height=package.height)
    return PackageResponse(
        id=PackageDisplayId.format(package.id),
        priority=package.prioritylevel,
        dimensions=str(dimensions),
        weight=format_weight(package.weightkg),
        sender=format_address(package.sender),
        receiver=format_address(package.receiver),
        deliveryId=DeliveryDisplayId.format(delivery_id) if delivery_id else None,
        status=status,
    )


class PackageService(BaseService):
    """Service for package operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.package_repo = PackageRepository(session)
    
    async def _delivery_id(self, package_id: int) -> Optional[int]:
        delivery_ids = await self.package_repo.get_delivery_ids([package_id])
        return delivery_ids.get(package_id)
    
    async def list_packages(self) -> List[PackageResponse]:
        """List all packages with resolved addresses."""
        packages = await self.package_repo.list_with_addresses()
        delivery_ids = await self.package_repo.get_delivery_ids(p.id for p in packages)
        return [to_package_response(p, delivery_ids.get(p.id)) for p in packages]
    
    async def create_package(self, package_data: PackageCreate) -> PackageResponse:
        """Create a new package."""
        created = await self.package_repo.create(
            prioritylevel=package_data.priority,
            length=package_data.dimensions.length,
            width=package_data.dimensions.width,
            height=package_data.dimensions.height,
            weightkg=package_data.weight,
            senderaddressid=package_data.senderAddressId,
            receiveraddressid=package_data.receiverAddressId,
        )
        package = await self.package_repo.get_with_addresses(created.id)
        response = to_package_response(package)
        await self.session.commit()
        logger.info("Package created", extra={"package": response.id})
        return response
    
    async def update_package(
        self,
        package_id: Union[str, int],
        package_data: PackageUpdate,
    ) -> Optional[PackageResponse]:
        """
        Update a package addressed by display ID.
        
        Raises:
            ValueError: if the package ID is malformed
        """
        display_id = PackageDisplayId.parse(package_id)
        changes = package_data.to_changes()
        package = await self.package_repo.coalescing_update(display_id.value, **changes)
        if not package:
            return None
        response = to_package_response(package, await self._delivery_id(package.id))
        await self.session.commit()
        logger.info("Package updated", extra={"package": response.id, "fields": sorted(changes)})
        return response
    
    async def delete_package(self, package_id: Union[str, int]) -> Optional[PackageResponse]:
        """
        Delete a package addressed by display ID.
        
        Raises:
            ValueError: if the package ID is malformed
        """
        display_id = PackageDisplayId.parse(package_id)
        delivery_id = await self._delivery_id(display_id.value)
        package = await self.package_repo.delete_returning(display_id.value)
        if not package:
            return None
        response = to_package_response(package, delivery_id, status=DELETED_STATUS)
        await self.session.commit()
        logger.info("Package deleted", extra={"package": response.id})
        return response
