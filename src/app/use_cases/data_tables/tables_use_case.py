"""
Tables Use Case

List, create, get, update and delete tables of the current workspace.
"""

import logging
from typing import List
from uuid import UUID

from src.domain.data_table_inputs import CreateTableInput, TableFields, UpdateTableInput
from src.libs.result import Result, Return

from .dtos import SuccessResponse, TableResponse
from .scoped_use_case import WorkspaceScopedUseCase

logger = logging.getLogger(__name__)


class TablesUseCase(WorkspaceScopedUseCase):
    async def list(self) -> Result[List[TableResponse]]:
        async with self.uow:
            tables = await self.uow.data_tables.list_tables(self.context.workspace_id)
            return Return.ok([TableResponse.model_validate(table) for table in tables])

    async def create(self, fields: TableFields) -> Result[TableResponse]:
        """
        Create a table in the current workspace.

        Business Rules:
        - The tenant's table limit counts tables of all its workspaces
        """
        async with self.uow:
            capacity = await self.quota.ensure_table_capacity()
            if capacity.is_err():
                return capacity

            table = await self.uow.data_tables.create_table(
                CreateTableInput(workspace_id=self.context.workspace_id, **fields.model_dump())
            )
            response = TableResponse.model_validate(table)
            await self.uow.commit()

            logger.info("Created table %s in workspace %s", table.id, self.context.workspace_id)
            return Return.ok(response)

    async def get(self, table_id: UUID) -> Result[TableResponse]:
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result
            return Return.ok(TableResponse.model_validate(result.value))

    async def update(self, table_id: UUID, updates: UpdateTableInput) -> Result[TableResponse]:
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result

            table = await self.uow.data_tables.update_table(table_id, updates)
            response = TableResponse.model_validate(table)
            await self.uow.commit()
            return Return.ok(response)

    async def delete(self, table_id: UUID) -> Result[SuccessResponse]:
        """Delete the table with its columns, rows, views and their dependents"""
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result

            rows_removed = await self.uow.data_tables.delete_table(table_id)
            await self.quota.record_rows(-rows_removed)
            await self.uow.commit()

            logger.info("Deleted table %s (%d rows)", table_id, rows_removed)
            return Return.ok(SuccessResponse())
