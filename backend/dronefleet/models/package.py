"""
Package model for shipments.
"""

from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
import enum

from dronefleet.db.base import Base


class PackagePriority(str, enum.Enum):
    """Package priority enumeration."""
    STANDARD = "Standard"
    EXPRESS = "Express"


class Package(Base):
    """Package model. Dimensions are in centimetres, weight in kilograms."""
    
    __tablename__ = "package"
    
    id = Column("packageid", Integer, primary_key=True, index=True)
    prioritylevel = Column(String(20), nullable=False, default=PackagePriority.STANDARD.value)
    length = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    weightkg = Column(Float, nullable=False)
    senderaddressid = Column(Integer, ForeignKey("address.addressid"), nullable=False)
    receiveraddressid = Column(Integer, ForeignKey("address.addressid"), nullable=False)
    
    # Relationships
    sender = relationship("Address", foreign_keys=[senderaddressid], lazy="raise")
    receiver = relationship("Address", foreign_keys=[receiveraddressid], lazy="raise")
