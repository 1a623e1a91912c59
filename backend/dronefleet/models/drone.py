"""
Drone model for fleet records.
"""

from sqlalchemy import Column, Integer, String, Float
import enum

from dronefleet.db.base import Base


class DroneStatus(str, enum.Enum):
    """Drone status enumeration."""
    AVAILABLE = "Available"
    IN_TRANSIT = "In-Transit"
    CHARGING = "Charging"
    MAINTENANCE = "Maintenance"
    LOW_BATTERY = "Low Battery"


class Drone(Base):
    """Drone model. Battery is a percentage and is not range checked."""
    
    __tablename__ = "drone"
    
    id = Column("droneid", Integer, primary_key=True, index=True)
    model = Column(String(100), nullable=False)
    maxloadkg = Column(Float, nullable=False)
    batterycapacity = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default=DroneStatus.AVAILABLE.value)
    battery = Column(Float, nullable=False, default=100.0)
