"""
Operator controller.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from dronefleet.controllers.base_controller import BaseController
from dronefleet.services.operator_service import OperatorService
from dronefleet.schemas.operator import OperatorCreate, OperatorUpdate, OperatorResponse


class OperatorController(BaseController):
    """Controller for operator operations."""
    
    def __init__(self, session: AsyncSession):
        self.operator_service = OperatorService(session)
    
    async def list_operators(self) -> List[OperatorResponse]:
        """List operators."""
        return await self.operator_service.list_operators()
    
    async def create_operator(self, operator_data: OperatorCreate) -> OperatorResponse:
        """Create a new operator."""
        return await self.operator_service.create_operator(operator_data)
    
    async def update_operator(
        self,
        operator_id: int,
        operator_data: OperatorUpdate,
    ) -> Optional[OperatorResponse]:
        """Update an operator."""
        return await self.operator_service.update_operator(operator_id, operator_data)
    
    async def delete_operator(self, operator_id: int) -> Optional[OperatorResponse]:
        """Delete an operator."""
        return await self.operator_service.delete_operator(operator_id)
