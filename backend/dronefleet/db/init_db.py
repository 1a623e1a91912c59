"""
Database initialization and bootstrapping.
Creates tables and seeds the demo address book.
"""

from sqlalchemy import func, select

from dronefleet.db.base import Base
from dronefleet.db.session import Database
from dronefleet.core.logging import get_logger
from dronefleet.models import Address

logger = get_logger(__name__)

# Addresses are read-only over HTTP, so a fresh database needs a few to
# reference from packages.
DEMO_ADDRESSES = [
    {"street": "221 Harbor Way", "city": "Oakland", "zip": "94607"},
    {"street": "1450 Mission St", "city": "San Francisco", "zip": "94103"},
    {"street": "88 University Ave", "city": "Palo Alto", "zip": "94301"},
    {"street": "5 Lakeshore Dr", "city": "San Jose", "zip": "95112"},
]


async def create_tables(database: Database) -> None:
    """Create all tables registered on the declarative base."""
    database.connect()
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    logger.info("Database tables initialized")


async def seed_initial_data(database: Database) -> None:
    """Insert demo addresses when the address table is empty."""
    async with database.session() as session:
        existing = await session.scalar(select(func.count()).select_from(Address))
        if existing:
            logger.info("Address seeding skipped", extra={"existing": existing})
            return
        
        session.add_all([Address(**address) for address in DEMO_ADDRESSES])
        await session.commit()
    
    logger.info("Seeded demo addresses", extra={"count": len(DEMO_ADDRESSES)})
