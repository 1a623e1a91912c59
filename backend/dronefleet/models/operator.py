"""
Operator model for certified drone pilots.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import column_property

from dronefleet.db.base import Base


class Operator(Base):
    """Operator model. Certification ids are not required to be unique."""
    
    __tablename__ = "operator"
    
    id = Column("operatorid", Integer, primary_key=True, index=True)
    firstname = Column(String(100), nullable=False)
    lastname = Column(String(100), nullable=False)
    certificationid = Column(String(50), nullable=False)
    contactnumber = Column(String(50), nullable=False)
    
    # Computed by the database on every load
    fullname = column_property(firstname + " " + lastname)
