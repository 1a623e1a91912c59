"""
Address API endpoints (read-only).
"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.db.session import get_db
from dronefleet.controllers.address_controller import AddressController
from dronefleet.schemas.address import AddressResponse

router = APIRouter()


@router.get("", response_model=List[AddressResponse])
async def list_addresses(
    db: AsyncSession = Depends(get_db),
) -> List[AddressResponse]:
    """List all addresses."""
    controller = AddressController(db)
    return await controller.list_addresses()
