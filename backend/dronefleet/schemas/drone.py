"""
Drone Pydantic schemas for request/response validation.
"""

from pydantic import AliasChoices, BaseModel, Field
from typing import Optional

from dronefleet.models.drone import DroneStatus


class DroneCreate(BaseModel):
    """Schema for creating a drone. Every field is required."""
    model: str = Field(..., min_length=1, max_length=100)
    maxloadkg: float
    batterycapacity: float
    status: DroneStatus
    battery: float
    
    class Config:
        use_enum_values = True


class DroneUpdate(BaseModel):
    """Schema for updating a drone. Only status and battery are writable."""
    status: Optional[DroneStatus] = None
    battery: Optional[float] = None
    
    class Config:
        use_enum_values = True


class DroneResponse(BaseModel):
    """Schema for drone response."""
    droneid: int = Field(..., validation_alias=AliasChoices("droneid", "id"))
    model: str
    maxloadkg: float
    batterycapacity: float
    status: str
    battery: float
    
    class Config:
        from_attributes = True
