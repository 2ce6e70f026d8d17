"""
Relations Use Case

Edges between rows through relation columns. Both ends of an edge must be
in the caller's workspace.
"""

from typing import List
from uuid import UUID

from src.domain.data_table_inputs import CreateRelationInput, DeleteRelationInput
from src.domain.entities import ColumnType
from src.libs.result import Error, Result, Return

from .dtos import RelationResponse, RowResponse, SuccessResponse
from .scoped_use_case import WorkspaceScopedUseCase


class RelationsUseCase(WorkspaceScopedUseCase):
    async def create(self, data: CreateRelationInput) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.relation(
                data.source_row_id, data.source_column_id, data.target_row_id
            )
            if result.is_err():
                return result

            column = await self.uow.data_tables.get_column(data.source_column_id)
            if column.type != ColumnType.relation:
                return Return.err(Error("VALIDATION_ERROR", "Column is not a relation column"))

            await self.uow.data_tables.create_relation(data)
            await self.uow.commit()
            return Return.ok(SuccessResponse())

    async def delete(self, data: DeleteRelationInput) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.relation(data.source_row_id, data.column_id)
            if result.is_err():
                return result

            await self.uow.data_tables.delete_relation(
                data.source_row_id, data.column_id, data.target_row_id
            )
            await self.uow.commit()
            return Return.ok(SuccessResponse())

    async def related_rows(self, row_id: UUID, column_id: UUID) -> Result[List[RowResponse]]:
        async with self.uow:
            result = await self.verify.row_column(row_id, column_id)
            if result.is_err():
                return result

            rows = await self.uow.data_tables.get_related_rows(row_id, column_id)
            # Targets outside the workspace are never returned
            visible = [row for row in rows if (await self.verify.row(row.id)).is_ok()]
            return Return.ok([RowResponse.model_validate(row) for row in visible])

    async def for_row(self, row_id: UUID) -> Result[List[RelationResponse]]:
        async with self.uow:
            result = await self.verify.row(row_id)
            if result.is_err():
                return result

            relations = await self.uow.data_tables.get_relations_for_row(row_id)
            return Return.ok([RelationResponse.model_validate(edge) for edge in relations])
