"""
Operator API endpoints.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, Path, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.db.session import get_db
from dronefleet.utils.display_ids import MAX_ID
from dronefleet.controllers.operator_controller import OperatorController
from dronefleet.schemas.operator import OperatorCreate, OperatorUpdate, OperatorResponse

router = APIRouter()


@router.get("", response_model=List[OperatorResponse])
async def list_operators(
    db: AsyncSession = Depends(get_db),
) -> List[OperatorResponse]:
    """List all operators."""
    controller = OperatorController(db)
    return await controller.list_operators()


@router.post("", response_model=OperatorResponse, status_code=status.HTTP_201_CREATED)
async def create_operator(
    operator_data: OperatorCreate,
    db: AsyncSession = Depends(get_db),
) -> OperatorResponse:
    """Create a new operator."""
    controller = OperatorController(db)
    return await controller.create_operator(operator_data)


@router.put("/{operator_id}", response_model=OperatorResponse)
async def update_operator(
    operator_id: Annotated[int, Path(ge=1, le=MAX_ID)],
    operator_data: OperatorUpdate,
    db: AsyncSession = Depends(get_db),
) -> OperatorResponse:
    """Update any subset of an operator's fields."""
    controller = OperatorController(db)
    operator = await controller.update_operator(operator_id, operator_data)
    if not operator:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Operator not found or no fields provided",
        )
    return operator


@router.delete("/{operator_id}", response_model=OperatorResponse)
async def delete_operator(
    operator_id: int = Path(..., ge=1, le=MAX_ID),
    db: AsyncSession = Depends(get_db),
) -> OperatorResponse:
    """Delete an operator and return the removed row."""
    controller = OperatorController(db)
    operator = await controller.delete_operator(operator_id)
    if not operator:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Operator not found",
        )
    return operator
