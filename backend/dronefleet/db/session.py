"""
Database session management with async SQLAlchemy 2.0.
The engine and its connection pool are owned by an explicitly constructed
``Database`` object with a start/stop lifecycle.
"""

from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)

from dronefleet.core.logging import get_logger

logger = get_logger(__name__)


class Database:
    """Storage client wrapping the async engine and its sessionmaker."""
    
    def __init__(
        self,
        url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        echo: bool = False,
        engine_options: Optional[Dict[str, Any]] = None,
    ):
        self.url = url
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.echo = echo
        self.engine_options = dict(engine_options or {})
        self.engine: Optional[AsyncEngine] = None
        self.session_maker: Optional[async_sessionmaker[AsyncSession]] = None
    
    def connect(self) -> None:
        """Create the engine and sessionmaker. Safe to call more than once."""
        if self.engine is not None:
            return
        
        options = {"echo": self.echo, **self.engine_options}
        # SQLite drivers do not take queue pool sizing
        if not self.url.startswith("sqlite") and "poolclass" not in options:
            options.setdefault("pool_size", self.pool_size)
            options.setdefault("max_overflow", self.max_overflow)
            options.setdefault("pool_pre_ping", True)
        
        self.engine = create_async_engine(self.url, **options)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        
        logger.info(
            "Database engine created",
            extra={
                "pool_size": options.get("pool_size"),
                "max_overflow": options.get("max_overflow"),
            },
        )
    
    async def dispose(self) -> None:
        """Close pooled connections."""
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None
            self.session_maker = None
            logger.info("Database connections closed")
    
    def session(self) -> AsyncSession:
        """Open a new session bound to the engine."""
        if self.session_maker is None:
            self.connect()
        return self.session_maker()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database session.
    Yields a session from the application's Database and commits on success.
    """
    database: Database = request.app.state.container.database()
    
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
