"""
Address model referenced by packages as sender and receiver.
"""

from sqlalchemy import Column, Integer, String

from dronefleet.db.base import Base


class Address(Base):
    """Postal address."""
    
    __tablename__ = "address"
    
    id = Column("addressid", Integer, primary_key=True, index=True)
    street = Column(String(200), nullable=False)
    city = Column(String(100), nullable=False)
    zip = Column(String(20), nullable=False)
