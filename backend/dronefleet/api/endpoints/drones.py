"""
Drone API endpoints.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, Path, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.db.session import get_db
from dronefleet.utils.display_ids import MAX_ID
from dronefleet.controllers.drone_controller import DroneController
from dronefleet.schemas.common import MessageResponse
from dronefleet.schemas.drone import DroneCreate, DroneUpdate, DroneResponse

router = APIRouter()


@router.get("", response_model=List[DroneResponse])
async def list_drones(
    db: AsyncSession = Depends(get_db),
) -> List[DroneResponse]:
    """List all drones."""
    controller = DroneController(db)
    return await controller.list_drones()


@router.post("", response_model=DroneResponse, status_code=status.HTTP_201_CREATED)
async def create_drone(
    drone_data: DroneCreate,
    db: AsyncSession = Depends(get_db),
) -> DroneResponse:
    """Create a new drone."""
    controller = DroneController(db)
    return await controller.create_drone(drone_data)


@router.put("/{drone_id}", response_model=DroneResponse)
async def update_drone(
    drone_id: Annotated[int, Path(ge=1, le=MAX_ID)],
    drone_data: DroneUpdate,
    db: AsyncSession = Depends(get_db),
) -> DroneResponse:
    """Update a drone's status and battery."""
    controller = DroneController(db)
    drone = await controller.update_drone(drone_id, drone_data)
    if not drone:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Drone not found.",
        )
    return drone


@router.delete("/{drone_id}", response_model=MessageResponse)
async def delete_drone(
    drone_id: int = Path(..., ge=1, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete a drone. Deleting an unknown drone also succeeds."""
    controller = DroneController(db)
    return await controller.delete_drone(drone_id)
