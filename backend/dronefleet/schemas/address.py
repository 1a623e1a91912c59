"""
Address response schema.
"""

from pydantic import BaseModel


class AddressResponse(BaseModel):
    """Schema for address response."""
    id: int
    street: str
    city: str
    zip: str
    
    class Config:
        from_attributes = True
