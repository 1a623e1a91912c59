"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from dronefleet.models.address import Address
from dronefleet.models.drone import Drone, DroneStatus
from dronefleet.models.operator import Operator
from dronefleet.models.package import Package, PackagePriority
from dronefleet.models.delivery import Delivery, DeliveryStatus
from dronefleet.models.association_tables import delivery_package

__all__ = [
    "Address",
    "Drone",
    "DroneStatus",
    "Operator",
    "Package",
    "PackagePriority",
    "Delivery",
    "DeliveryStatus",
    "delivery_package",
]
