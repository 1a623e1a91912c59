"""
Delivery Pydantic schemas for request/response validation.
"""

from datetime import datetime
from pydantic import AliasChoices, BaseModel, Field
from typing import Optional

from dronefleet.models.delivery import DeliveryStatus
from dronefleet.utils.display_ids import MAX_ID


class DeliveryCreate(BaseModel):
    """
    Schema for creating a delivery.
    
    droneid, operatorid and starttime are mandatory but checked by the
    delivery service rather than here.
    """
    droneid: Optional[int] = Field(None, ge=1, le=MAX_ID)
    operatorid: Optional[int] = Field(None, ge=1, le=MAX_ID)
    starttime: Optional[datetime] = None
    endtime: Optional[datetime] = None
    deliverystatus: DeliveryStatus = DeliveryStatus.SCHEDULED
    
    class Config:
        use_enum_values = True


class DeliveryStatusUpdate(BaseModel):
    """Schema for updating a delivery's status."""
    status: DeliveryStatus = Field(
        ..., validation_alias=AliasChoices("status", "deliverystatus")
    )
    
    class Config:
        use_enum_values = True


class DeliveryResponse(BaseModel):
    """Schema for delivery response, keyed by raw column names."""
    deliveryid: int = Field(..., validation_alias=AliasChoices("deliveryid", "id"))
    droneid: int
    operatorid: int
    starttime: datetime
    endtime: Optional[datetime] = None
    deliverystatus: Optional[str] = None
    
    class Config:
        from_attributes = True
