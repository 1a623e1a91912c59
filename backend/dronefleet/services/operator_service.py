"""
Operator service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.core.logging import get_logger
from dronefleet.services.base_service import BaseService
from dronefleet.db.repositories.operator_repository import OperatorRepository
from dronefleet.schemas.operator import OperatorCreate, OperatorUpdate, OperatorResponse

logger = get_logger(__name__)


class OperatorService(BaseService):
    """Service for operator operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.operator_repo = OperatorRepository(session)
    
    async def list_operators(self) -> List[OperatorResponse]:
        """List all operators by ascending ID."""
        operators = await self.operator_repo.list()
        return [OperatorResponse.model_validate(operator) for operator in operators]
    
    async def create_operator(self, operator_data: OperatorCreate) -> OperatorResponse:
        """Create a new operator."""
        operator = await self.operator_repo.create(**operator_data.model_dump())
        await self.session.commit()
        await self.session.refresh(operator)
        logger.info("Operator created", extra={"operatorid": operator.id})
        return OperatorResponse.model_validate(operator)
    
    async def update_operator(
        self,
        operator_id: int,
        operator_data: OperatorUpdate,
    ) -> Optional[OperatorResponse]:
        """
        Update supplied operator fields.
        
        Returns None when no field was supplied or the operator does not exist.
        """
        fields = operator_data.supplied_fields()
        if not fields:
            logger.info("Operator update skipped, no fields supplied", extra={"operatorid": operator_id})
            return None
        
        operator = await self.operator_repo.update_partial(operator_id, **fields)
        if not operator:
            return None
        await self.session.commit()
        await self.session.refresh(operator)
        logger.info("Operator updated", extra={"operatorid": operator_id, "fields": sorted(fields)})
        return OperatorResponse.model_validate(operator)
    
    async def delete_operator(self, operator_id: int) -> Optional[OperatorResponse]:
        """
        Delete an operator and return the removed row.
        
        Deliveries referencing the operator are left as they are.
        """
        operator = await self.operator_repo.delete_returning(operator_id)
        if not operator:
            return None
        response = OperatorResponse.model_validate(operator)
        await self.session.commit()
        logger.info("Operator deleted", extra={"operatorid": operator_id})
        return response
