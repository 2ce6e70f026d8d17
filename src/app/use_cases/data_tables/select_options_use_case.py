"""
Select Options Use Case

Options of select and multi_select columns.
"""

from typing import List, Sequence
from uuid import UUID

from src.domain.data_table_inputs import (
    CreateSelectOptionInput,
    SelectOptionFields,
    UpdateSelectOptionInput,
)
from src.domain.entities import ColumnType
from src.libs.result import Error, Result, Return

from .dtos import SelectOptionResponse, SuccessResponse
from .scoped_use_case import WorkspaceScopedUseCase

SELECT_COLUMN_TYPES = (ColumnType.select, ColumnType.multi_select)


class SelectOptionsUseCase(WorkspaceScopedUseCase):
    async def list(self, column_id: UUID) -> Result[List[SelectOptionResponse]]:
        async with self.uow:
            result = await self.verify.column(column_id)
            if result.is_err():
                return result
            options = await self.uow.data_tables.get_select_options(column_id)
            return Return.ok([SelectOptionResponse.model_validate(option) for option in options])

    async def create(
        self, column_id: UUID, fields: SelectOptionFields
    ) -> Result[SelectOptionResponse]:
        async with self.uow:
            result = await self.verify.column(column_id)
            if result.is_err():
                return result
            if result.value.type not in SELECT_COLUMN_TYPES:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        "Select options require a select or multi_select column",
                    )
                )

            option = await self.uow.data_tables.create_select_option(
                CreateSelectOptionInput(column_id=column_id, **fields.model_dump())
            )
            response = SelectOptionResponse.model_validate(option)
            await self.uow.commit()
            return Return.ok(response)

    async def update(
        self, option_id: UUID, updates: UpdateSelectOptionInput
    ) -> Result[SelectOptionResponse]:
        async with self.uow:
            result = await self.verify.select_option(option_id)
            if result.is_err():
                return result

            option = await self.uow.data_tables.update_select_option(option_id, updates)
            response = SelectOptionResponse.model_validate(option)
            await self.uow.commit()
            return Return.ok(response)

    async def delete(self, option_id: UUID) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.select_option(option_id)
            if result.is_err():
                return result

            await self.uow.data_tables.delete_select_option(option_id)
            await self.uow.commit()
            return Return.ok(SuccessResponse())

    async def reorder(
        self, column_id: UUID, option_ids: Sequence[UUID]
    ) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.column(column_id)
            if result.is_err():
                return result

            await self.uow.data_tables.reorder_select_options(column_id, option_ids)
            await self.uow.commit()
            return Return.ok(SuccessResponse())
