"""
API router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from dronefleet.api.endpoints import (
    health,
    drones,
    operators,
    packages,
    deliveries,
    addresses,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(drones.router, prefix="/drones", tags=["drones"])
api_router.include_router(operators.router, prefix="/operators", tags=["operators"])
api_router.include_router(packages.router, prefix="/packages", tags=["packages"])
api_router.include_router(deliveries.router, prefix="/deliveries", tags=["deliveries"])
api_router.include_router(addresses.router, prefix="/addresses", tags=["addresses"])
