"""
Health check endpoint.
Returns system status and uptime information.
"""

from fastapi import APIRouter, Request

from dronefleet.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def get_health(request: Request) -> HealthResponse:
    """
    Health check endpoint.
    Returns system status, uptime, and health checks.
    """
    controller = request.app.state.container.health_controller()
    return await controller.get_health()
