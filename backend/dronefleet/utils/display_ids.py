"""
Human-readable identifiers derived from integer primary keys.

``PKG-003`` is package 3 and ``DEL-2024-017`` is delivery 17. Parsing also
accepts the bare number. Anything else is rejected instead of being coerced,
so a malformed id never resolves to a different row.
"""

import re
from typing import ClassVar, Union

from pydantic import BaseModel, Field

_DIGITS = re.compile(r"[0-9]+")

# Primary keys are 32-bit signed integers
MAX_ID = 2147483647


class DisplayId(BaseModel):
    """Base value type for a prefixed, zero-padded integer id."""
    
    prefix: ClassVar[str] = ""
    label: ClassVar[str] = "record"
    width: ClassVar[int] = 3
    
    value: int = Field(..., ge=1, le=MAX_ID)
    
    class Config:
        frozen = True
    
    @classmethod
    def parse(cls, raw: Union[str, int]) -> "DisplayId":
        """
        Parse a display id or a bare integer id.
        
        Raises:
            ValueError: if ``raw`` is not ``<prefix><digits>`` or ``<digits>``
        """
        if isinstance(raw, bool):
            raise ValueError(f"Invalid {cls.label} id: {raw!r}")
        if isinstance(raw, int):
            digits = str(raw)
        else:
            text = str(raw).strip()
            if text.upper().startswith(cls.prefix):
                text = text[len(cls.prefix):]
            digits = text
        
        if not _DIGITS.fullmatch(digits) or not 1 <= int(digits) <= MAX_ID:
            raise ValueError(f"Invalid {cls.label} id: {raw!r}")
        return cls(value=int(digits))
    
    @classmethod
    def format(cls, value: int) -> str:
        """Format an integer id as a display id."""
        return str(cls(value=value))
    
    def __str__(self) -> str:
        return f"{self.prefix}{self.value:0{self.width}d}"
    
    def __int__(self) -> int:
        return self.value


class PackageDisplayId(DisplayId):
    """Package id, e.g. ``PKG-001``."""
    prefix: ClassVar[str] = "PKG-"
    label: ClassVar[str] = "package"


class DeliveryDisplayId(DisplayId):
    """Delivery id, e.g. ``DEL-2024-001``."""
    prefix: ClassVar[str] = "DEL-2024-"
    label: ClassVar[str] = "delivery"
