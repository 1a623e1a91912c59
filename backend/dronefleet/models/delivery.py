"""
Delivery model linking a drone and an operator to a flight window.
"""

from sqlalchemy import Column, Integer, String, DateTime
import enum

from dronefleet.db.base import Base


class DeliveryStatus(str, enum.Enum):
    """Delivery status enumeration."""
    SCHEDULED = "Scheduled"
    IN_PROGRESS = "In-Progress"
    COMPLETED = "Completed"
    FAILED = "Failed"


class Delivery(Base):
    """
    Delivery model.
    
    droneid and operatorid carry no foreign key constraint: removing a drone
    or an operator leaves the delivery pointing at the old id.
    """
    
    __tablename__ = "delivery"
    
    id = Column("deliveryid", Integer, primary_key=True, index=True)
    droneid = Column(Integer, nullable=False, index=True)
    operatorid = Column(Integer, nullable=False, index=True)
    starttime = Column(DateTime(timezone=True), nullable=False)
    endtime = Column(DateTime(timezone=True), nullable=True)
    deliverystatus = Column(String(20), nullable=True, default=DeliveryStatus.SCHEDULED.value)
