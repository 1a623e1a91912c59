"""
Delivery API endpoints.
"""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Path, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.db.session import get_db
from dronefleet.utils.display_ids import MAX_ID
from dronefleet.controllers.delivery_controller import DeliveryController
from dronefleet.schemas.common import MessageResponse
from dronefleet.schemas.delivery import DeliveryCreate, DeliveryStatusUpdate, DeliveryResponse

router = APIRouter()


@router.get("", response_model=List[DeliveryResponse])
async def list_deliveries(
    status_filter: Optional[str] = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
) -> List[DeliveryResponse]:
    """List deliveries, newest first."""
    controller = DeliveryController(db)
    return await controller.list_deliveries(status_filter)


@router.post("", response_model=DeliveryResponse, status_code=status.HTTP_201_CREATED)
async def create_delivery(
    delivery_data: DeliveryCreate,
    db: AsyncSession = Depends(get_db),
) -> DeliveryResponse:
    """Create a new delivery."""
    controller = DeliveryController(db)
    try:
        return await controller.create_delivery(delivery_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.put("/{delivery_id}", response_model=DeliveryResponse)
async def update_delivery_status(
    delivery_id: Annotated[int, Path(ge=1, le=MAX_ID)],
    status_data: DeliveryStatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> DeliveryResponse:
    """Update a delivery's status."""
    controller = DeliveryController(db)
    delivery = await controller.update_delivery_status(delivery_id, status_data)
    if not delivery:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Delivery not found",
        )
    return delivery


@router.delete("/{delivery_id}", response_model=MessageResponse)
async def delete_delivery(
    delivery_id: str,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """
    Delete a delivery by number or ``DEL-2024-`` display ID.
    Deleting an unknown delivery also succeeds.
    """
    controller = DeliveryController(db)
    try:
        return await controller.delete_delivery(delivery_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
