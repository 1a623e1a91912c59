"""
Operator repository for database operations.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete

from dronefleet.db.repositories.base_repository import BaseRepository
from dronefleet.models.operator import Operator

UPDATABLE_FIELDS = ("firstname", "lastname", "certificationid", "contactnumber")


class OperatorRepository(BaseRepository[Operator]):
    """Repository for operator operations."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(Operator, session)
    
    async def update_partial(self, operator_id: int, **fields) -> Optional[Operator]:
        """
        Update the supplied operator fields.
        
        Fields that are None or empty are treated as not supplied. Returns
        None without touching the database when nothing is supplied.
        """
        changes = {
            key: value
            for key, value in fields.items()
            if key in UPDATABLE_FIELDS and value
        }
        return await self.apply_partial_update(operator_id, changes)
    
    async def delete_returning(self, operator_id: int) -> Optional[Operator]:
        """Delete an operator and return the removed row, or None."""
        operator = await self.get(operator_id)
        if operator is None:
            return None
        await self.session.execute(
            delete(Operator)
            .where(Operator.id == operator_id)
            .execution_options(synchronize_session=False)
        )
        await self.session.flush()
        return operator
