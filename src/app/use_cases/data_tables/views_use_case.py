"""
Views Use Case
"""

from typing import List, Sequence
from uuid import UUID

from src.domain.data_table_inputs import CreateViewInput, UpdateViewInput, ViewFields
from src.libs.result import Result, Return

from .dtos import SuccessResponse, ViewResponse
from .scoped_use_case import WorkspaceScopedUseCase


class ViewsUseCase(WorkspaceScopedUseCase):
    async def list(self, table_id: UUID) -> Result[List[ViewResponse]]:
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result
            views = await self.uow.data_tables.get_views(table_id)
            return Return.ok([ViewResponse.model_validate(view) for view in views])

    async def create(self, table_id: UUID, fields: ViewFields) -> Result[ViewResponse]:
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result

            view = await self.uow.data_tables.create_view(
                CreateViewInput(table_id=table_id, **fields.model_dump())
            )
            response = ViewResponse.model_validate(view)
            await self.uow.commit()
            return Return.ok(response)

    async def get(self, view_id: UUID) -> Result[ViewResponse]:
        async with self.uow:
            result = await self.verify.view(view_id)
            if result.is_err():
                return result
            return Return.ok(ViewResponse.model_validate(result.value))

    async def update(self, view_id: UUID, updates: UpdateViewInput) -> Result[ViewResponse]:
        async with self.uow:
            result = await self.verify.view(view_id)
            if result.is_err():
                return result

            view = await self.uow.data_tables.update_view(view_id, updates)
            response = ViewResponse.model_validate(view)
            await self.uow.commit()
            return Return.ok(response)

    async def delete(self, view_id: UUID) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.view(view_id)
            if result.is_err():
                return result

            await self.uow.data_tables.delete_view(view_id)
            await self.uow.commit()
            return Return.ok(SuccessResponse())

    async def reorder(self, table_id: UUID, view_ids: Sequence[UUID]) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result

            await self.uow.data_tables.reorder_views(table_id, view_ids)
            await self.uow.commit()
            return Return.ok(SuccessResponse())
