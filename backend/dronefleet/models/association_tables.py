"""
Association tables for many-to-many relationships.
"""

from sqlalchemy import Table, Column, Integer, ForeignKey

from dronefleet.db.base import Base

# Delivery ↔ Package (many-to-many)
delivery_package = Table(
    "delivery_package",
    Base.metadata,
    Column("deliveryid", Integer, ForeignKey("delivery.deliveryid"), primary_key=True),
    Column("packageid", Integer, ForeignKey("package.packageid", ondelete="CASCADE"), primary_key=True),
)
