"""
Parsing and formatting of package dimensions and weight.

Dimensions travel as ``"LxWxH cm"`` and weight as ``"N kg"``. Parsing ignores
case and whitespace and makes the unit suffix optional.
"""

import math
import re
from typing import Union

from pydantic import BaseModel

_NUMBER = r"[0-9]+(?:\.[0-9]+)?"
_DIMENSIONS_PATTERN = re.compile(rf"({_NUMBER})x({_NUMBER})x({_NUMBER})(?:cm)?")
_WEIGHT_PATTERN = re.compile(rf"({_NUMBER})(?:kg)?")

DIMENSIONS_FORMAT_ERROR = "Dimensions must be in format LxWxH"
WEIGHT_FORMAT_ERROR = "Weight must be a number, optionally followed by kg"


def _normalize(raw: str) -> str:
    return re.sub(r"\s+", "", raw).lower()


def format_number(value: Union[int, float]) -> str:
    """Render a measurement without a trailing ``.0`` on whole numbers."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


class Dimensions(BaseModel):
    """Package dimensions in centimetres."""
    
    length: float
    width: float
    height: float
    
    class Config:
        frozen = True
    
    @classmethod
    def parse(cls, raw: str) -> "Dimensions":
        """
        Parse ``"LxWxH"`` with an optional ``cm`` suffix.
        
        Raises:
            ValueError: if the string does not match the format
        """
        if not isinstance(raw, str):
            raise ValueError(DIMENSIONS_FORMAT_ERROR)
        match = _DIMENSIONS_PATTERN.fullmatch(_normalize(raw))
        if not match:
            raise ValueError(DIMENSIONS_FORMAT_ERROR)
        length, width, height = (float(group) for group in match.groups())
        if not all(math.isfinite(v) for v in (length, width, height)):
            raise ValueError(DIMENSIONS_FORMAT_ERROR)
        return cls(length=length, width=width, height=height)
    
    def __str__(self) -> str:
        return (
            f"{format_number(self.length)}x"
            f"{format_number(self.width)}x"
            f"{format_number(self.height)} cm"
        )


def parse_weight(raw: Union[str, int, float]) -> float:
    """
    Parse a weight given as a number or as ``"N"`` / ``"N kg"``.
    
    Raises:
        ValueError: on negative numbers or strings not matching the format
    """
    if isinstance(raw, bool):
        raise ValueError(WEIGHT_FORMAT_ERROR)
    if isinstance(raw, (int, float)):
        try:
            weight = float(raw)
        except OverflowError:
            raise ValueError(WEIGHT_FORMAT_ERROR)
        if weight < 0 or not math.isfinite(weight):
            raise ValueError(WEIGHT_FORMAT_ERROR)
        return weight
    if not isinstance(raw, str):
        raise ValueError(WEIGHT_FORMAT_ERROR)
    match = _WEIGHT_PATTERN.fullmatch(_normalize(raw))
    if not match:
        raise ValueError(WEIGHT_FORMAT_ERROR)
    weight = float(match.group(1))
    if not math.isfinite(weight):
        raise ValueError(WEIGHT_FORMAT_ERROR)
    return weight


def format_weight(value: Union[int, float]) -> str:
    """Render a weight as ``"N kg"``."""
    return f"{format_number(value)} kg"
