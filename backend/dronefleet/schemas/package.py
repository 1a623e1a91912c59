"""
Package Pydantic schemas for request/response validation.

Requests carry dimensions and weight either as display strings
(``"30x20x15 cm"``, ``"2.5 kg"``) or, on update, as raw column values.
Responses always use the display shape.
"""

from pydantic import AliasChoices, BaseModel, Field, field_validator
from typing import Optional

from dronefleet.models.package import PackagePriority
from dronefleet.utils.display_ids import MAX_ID
from dronefleet.utils.measurements import Dimensions, parse_weight


class PackageCreate(BaseModel):
    """Schema for creating a package."""
    priority: PackagePriority
    dimensions: Dimensions
    weight: float
    senderAddressId: int = Field(..., ge=1, le=MAX_ID)
    receiverAddressId: int = Field(..., ge=1, le=MAX_ID)
    
    class Config:
        use_enum_values = True
    
    @field_validator("dimensions", mode="before")
    @classmethod
    def parse_dimensions(cls, value):
        if isinstance(value, Dimensions):
            return value
        return Dimensions.parse(value)
    
    @field_validator("weight", mode="before")
    @classmethod
    def parse_weight_value(cls, value):
        return parse_weight(value)


class PackageUpdate(BaseModel):
    """
    Schema for updating a package (all fields optional).
    
    Column names are canonical; ``priority``, ``weight`` and the camelCase
    address ids are accepted as aliases, and ``dimensions`` fills
    length/width/height unless those are given explicitly.
    """
    prioritylevel: Optional[PackagePriority] = Field(
        None, validation_alias=AliasChoices("prioritylevel", "priority")
    )
    length: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    width: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    height: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    weightkg: Optional[float] = Field(
        None, validation_alias=AliasChoices("weightkg", "weight")
    )
    dimensions: Optional[Dimensions] = None
    senderaddressid: Optional[int] = Field(
        None, ge=1, le=MAX_ID, validation_alias=AliasChoices("senderaddressid", "senderAddressId")
    )
    receiveraddressid: Optional[int] = Field(
        None, ge=1, le=MAX_ID, validation_alias=AliasChoices("receiveraddressid", "receiverAddressId")
    )
    
    class Config:
        use_enum_values = True
    
    @field_validator("dimensions", mode="before")
    @classmethod
    def parse_dimensions(cls, value):
        if value is None or isinstance(value, Dimensions):
            return value
        return Dimensions.parse(value)
    
    @field_validator("weightkg", mode="before")
    @classmethod
    def parse_weight_value(cls, value):
        if value is None:
            return value
        return parse_weight(value)
    
    def to_changes(self) -> dict:
        """Column values to write; unsupplied columns are left out."""
        changes = {}
        if self.dimensions is not None:
            changes.update(
                length=self.dimensions.length,
                width=self.dimensions.width,
                height=self.dimensions.height,
            )
        changes.update(self.model_dump(exclude_none=True, exclude={"dimensions"}))
        return changes


class PackageResponse(BaseModel):
    """Schema for package response in display form."""
    id: str
    priority: str
    dimensions: str
    weight: str
    sender: Optional[str] = None
    receiver: Optional[str] = None
    deliveryId: Optional[str] = None
    status: str
