"""
Base repository class with common CRUD operations.
Repositories handle database access using async SQLAlchemy sessions.
"""

from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete

from dronefleet.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations."""
    
    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.
        
        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session
    
    async def create(self, **kwargs) -> ModelType:
        """
        Create a new record.
        
        Args:
            **kwargs: Model attributes
            
        Returns:
            Created model instance
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
    
    async def get(self, id: int) -> Optional[ModelType]:
        """
        Get a record by ID, reloading it if already in the session.
        
        Args:
            id: Record ID
            
        Returns:
            Model instance or None
        """
        result = await self.session.execute(
            select(self.model)
            .where(self.model.id == id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
    
    async def list(self, descending: bool = False, **filters) -> List[ModelType]:
        """
        List all records ordered by ID.
        
        Args:
            descending: Newest first when True
            **filters: Equality filter criteria; None values are ignored
            
        Returns:
            List of model instances
        """
        query = select(self.model)
        
        for key, value in filters.items():
            if value is not None and hasattr(self.model, key):
                query = query.where(getattr(self.model, key) == value)
        
        order = self.model.id.desc() if descending else self.model.id.asc()
        result = await self.session.execute(query.order_by(order))
        return list(result.scalars().all())
    
    async def apply_partial_update(
        self,
        id: int,
        changes: Mapping[str, Any],
    ) -> Optional[ModelType]:
        """
        Write only the supplied columns of a record.
        
        Args:
            id: Record ID
            changes: Attribute names mapped to their new values
            
        Returns:
            Updated model instance, or None when there is nothing to
            change or the record does not exist
        """
        if not changes:
            return None
        
        result = await self.session.execute(
            update(self.model)
            .where(self.model.id == id)
            .values(**changes)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        if result.rowcount == 0:
            return None
        return await self.get(id)
    
    async def delete(self, id: int) -> bool:
        """
        Delete a record.
        
        Args:
            id: Record ID
            
        Returns:
            True if deleted, False if not found
        """
        result = await self.session.execute(
            delete(self.model)
            .where(self.model.id == id)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return result.rowcount > 0
