"""
Operator Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional


class OperatorBase(BaseModel):
    """Base operator schema with common fields."""
    firstname: str = Field(..., min_length=1, max_length=100)
    lastname: str = Field(..., min_length=1, max_length=100)
    certificationid: str = Field(..., min_length=1, max_length=50)
    contactnumber: str = Field(..., min_length=1, max_length=50)


class OperatorCreate(OperatorBase):
    """Schema for creating an operator."""
    pass


class OperatorUpdate(BaseModel):
    """Schema for updating an operator. Empty values count as not supplied."""
    firstname: Optional[str] = Field(None, max_length=100)
    lastname: Optional[str] = Field(None, max_length=100)
    certificationid: Optional[str] = Field(None, max_length=50)
    contactnumber: Optional[str] = Field(None, max_length=50)
    
    def supplied_fields(self) -> dict:
        """Fields carrying a non-empty value."""
        return {key: value for key, value in self.model_dump().items() if value}


class OperatorResponse(BaseModel):
    """Schema for operator response, including the derived full name."""
    id: int
    firstname: str
    lastname: str
    fullname: str
    certificationid: str
    contactnumber: str
    
    class Config:
        from_attributes = True
