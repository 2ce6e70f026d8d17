"""
Rows Use Case

Single and bulk row operations. Bulk operations are all-or-nothing: every
id is verified before any row is changed.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

from src.domain.data_table_inputs import CreateRowInput, RowFields, RowQueryOptions
from src.libs.result import Error, Result, Return

from .dtos import RowPageResponse, RowResponse, SuccessResponse
from .scoped_use_case import WorkspaceScopedUseCase

logger = logging.getLogger(__name__)


class RowsUseCase(WorkspaceScopedUseCase):
    async def _check_parent(self, table_id: UUID, parent_row_id: Optional[UUID]) -> Result[None]:
        """Sub-items must hang off a row of the same table"""
        if parent_row_id is None:
            return Return.ok(None)
        parent = await self.verify.row(parent_row_id)
        if parent.is_err():
            return parent
        if parent.value.table_id != table_id:
            return Return.err(
                Error("VALIDATION_ERROR", "Parent row must belong to the same table")
            )
        return Return.ok(None)

    async def query(
        self, table_id: UUID, options: Optional[RowQueryOptions] = None
    ) -> Result[RowPageResponse]:
        async with self.uow:
            result = await self.verify.table(table_id)
            if result.is_err():
                return result

            try:
                page = await self.uow.data_tables.get_rows(table_id, options)
            except ValueError as e:
                return Return.err(Error("VALIDATION_ERROR", str(e)))
            return Return.ok(RowPageResponse.from_query_result(page))

    async def create(self, table_id: UUID, fields: RowFields) -> Result[RowResponse]:
        return await self._create_many(
            [CreateRowInput(table_id=table_id, **fields.model_dump())], single=True
        )

    async def bulk_create(self, inputs: Sequence[CreateRowInput]) -> Result[List[RowResponse]]:
        return await self._create_many(inputs, single=False)

    async def _create_many(self, inputs: Sequence[CreateRowInput], single: bool):
        """
        Business Rules:
        - Every target table and every parent row is verified first
        - Row quota is checked for the whole set before anything is written
        """
        async with self.uow:
            for table_id in dict.fromkeys(data.table_id for data in inputs):
                table = await self.verify.table(table_id)
                if table.is_err():
                    return table

            for data in inputs:
                parent = await self._check_parent(data.table_id, data.parent_row_id)
                if parent.is_err():
                    return parent

            capacity = await self.quota.ensure_row_capacity(len(inputs))
            if capacity.is_err():
                return capacity

            rows = await self.uow.data_tables.bulk_create_rows(inputs)
            response = [RowResponse.model_validate(row) for row in rows]
            await self.quota.record_rows(len(rows))
            await self.uow.commit()

            return Return.ok(response[0] if single else response)

    async def get(self, row_id: UUID) -> Result[RowResponse]:
        async with self.uow:
            result = await self.verify.row(row_id)
            if result.is_err():
                return result
            return Return.ok(RowResponse.model_validate(result.value))

    async def update(self, row_id: UUID, cells: Dict[str, Any]) -> Result[RowResponse]:
        """Merge cells into the row; keys not given keep their values"""
        async with self.uow:
            result = await self.verify.row(row_id)
            if result.is_err():
                return result

            row = await self.uow.data_tables.update_row(row_id, cells)
            response = RowResponse.model_validate(row)
            await self.uow.commit()
            return Return.ok(response)

    async def delete(self, row_id: UUID) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.row(row_id)
            if result.is_err():
                return result

            removed = await self.uow.data_tables.delete_row(row_id)
            await self.quota.record_rows(-removed)
            await self.uow.commit()
            return Return.ok(SuccessResponse())

    async def archive(self, row_id: UUID) -> Result[SuccessResponse]:
        return await self._set_archived(row_id, True)

    async def unarchive(self, row_id: UUID) -> Result[SuccessResponse]:
        return await self._set_archived(row_id, False)

    async def _set_archived(self, row_id: UUID, archived: bool) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.row(row_id)
            if result.is_err():
                return result

            if archived:
                await self.uow.data_tables.archive_row(row_id)
            else:
                await self.uow.data_tables.unarchive_row(row_id)
            await self.uow.commit()
            return Return.ok(SuccessResponse())

    async def bulk_delete(self, row_ids: Sequence[UUID]) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.rows(row_ids)
            if result.is_err():
                return result

            removed = await self.uow.data_tables.bulk_delete_rows(row_ids)
            await self.quota.record_rows(-removed)
            await self.uow.commit()

            logger.info("Bulk deleted %d rows", removed)
            return Return.ok(SuccessResponse())

    async def bulk_archive(self, row_ids: Sequence[UUID]) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.rows(row_ids)
            if result.is_err():
                return result

            await self.uow.data_tables.bulk_archive_rows(row_ids)
            await self.uow.commit()
            return Return.ok(SuccessResponse())
