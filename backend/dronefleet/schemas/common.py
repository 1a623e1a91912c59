"""
Shared response schemas.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain confirmation message."""
    message: str
