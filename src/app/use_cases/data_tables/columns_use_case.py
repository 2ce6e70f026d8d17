"""
Columns Use Case
"""

from typing import List, Sequence
from uuid import UUID

from src.domain.data_table_inputs import ColumnFields, CreateColumnInput, UpdateColumnInput
from src.libs.result import Result, Return

from .dtos import ColumnResponse, SuccessResponse
from .scoped_use_case import WorkspaceScopedUseCase


class ColumnsUseCase(WorkspaceScopedUseCase):
    async def list(self, table_id: UUID) -> Result[List[ColumnResponse]]:
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result
            columns = await self.uow.data_tables.get_columns(table_id)
            return Return.ok([ColumnResponse.model_validate(column) for column in columns])

    async def create(self, table_id: UUID, fields: ColumnFields) -> Result[ColumnResponse]:
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result

            column = await self.uow.data_tables.create_column(
                CreateColumnInput(table_id=table_id, **fields.model_dump())
            )
            response = ColumnResponse.model_validate(column)
            await self.uow.commit()
            return Return.ok(response)

    async def get(self, column_id: UUID) -> Result[ColumnResponse]:
        async with self.uow:
            result = await self.verify.column(column_id)
            if result.is_err():
                return result
            return Return.ok(ColumnResponse.model_validate(result.value))

    async def update(self, column_id: UUID, updates: UpdateColumnInput) -> Result[ColumnResponse]:
        async with self.uow:
            result = await self.verify.column(column_id)
            if result.is_err():
                return result

            column = await self.uow.data_tables.update_column(column_id, updates)
            response = ColumnResponse.model_validate(column)
            await self.uow.commit()
            return Return.ok(response)

    async def delete(self, column_id: UUID) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.column(column_id)
            if result.is_err():
                return result

            await self.uow.data_tables.delete_column(column_id)
            await self.uow.commit()
            return Return.ok(SuccessResponse())

    async def reorder(self, table_id: UUID, column_ids: Sequence[UUID]) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result

            await self.uow.data_tables.reorder_columns(table_id, column_ids)
            await self.uow.commit()
            return Return.ok(SuccessResponse())
