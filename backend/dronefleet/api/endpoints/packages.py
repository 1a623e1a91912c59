"""
Package API endpoints.
Packages are addressed by display ID (``PKG-001``) or bare number.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.db.session import get_db
from dronefleet.controllers.package_controller import PackageController
from dronefleet.schemas.package import PackageCreate, PackageUpdate, PackageResponse

router = APIRouter()


@router.get("", response_model=List[PackageResponse])
async def list_packages(
    db: AsyncSession = Depends(get_db),
) -> List[PackageResponse]:
    """List all packages."""
    controller = PackageController(db)
    return await controller.list_packages()


@router.post("", response_model=PackageResponse, status_code=status.HTTP_201_CREATED)
async def create_package(
    package_data: PackageCreate,
    db: AsyncSession = Depends(get_db),
) -> PackageResponse:
    """Create a new package."""
    controller = PackageController(db)
    return await controller.create_package(package_data)


@router.put("/{package_id}", response_model=PackageResponse)
async def update_package(
    package_id: str,
    package_data: PackageUpdate,
    db: AsyncSession = Depends(get_db),
) -> PackageResponse:
    """Update a package."""
    controller = PackageController(db)
    try:
        package = await controller.update_package(package_id, package_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not package:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Package not found",
        )
    return package


@router.delete("/{package_id}", response_model=PackageResponse)
async def delete_package(
    package_id: str,
    db: AsyncSession = Depends(get_db),
) -> PackageResponse:
    """Delete a package and return it marked as deleted."""
    controller = PackageController(db)
    try:
        package = await controller.delete_package(package_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not package:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Package not found",
        )
    return package
