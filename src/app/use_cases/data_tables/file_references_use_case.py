"""
File References Use Case

Metadata records pointing at externally stored files, attached to a
(row, column) pair.
"""

from typing import List, Sequence
from uuid import UUID

from src.domain.data_table_inputs import CreateFileReferenceInput
from src.libs.result import Result, Return

from .dtos import FileReferenceResponse, SuccessResponse
from .scoped_use_case import WorkspaceScopedUseCase


class FileReferencesUseCase(WorkspaceScopedUseCase):
    async def add(self, data: CreateFileReferenceInput) -> Result[FileReferenceResponse]:
        async with self.uow:
            result = await self.verify.row_column(data.row_id, data.column_id)
            if result.is_err():
                return result

            file_ref = await self.uow.data_tables.add_file_reference(data)
            response = FileReferenceResponse.from_entity(file_ref)
            await self.uow.commit()
            return Return.ok(response)

    async def remove(self, file_ref_id: UUID) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.file_reference(file_ref_id)
            if result.is_err():
                return result

            await self.uow.data_tables.remove_file_reference(file_ref_id)
            await self.uow.commit()
            return Return.ok(SuccessResponse())

    async def list(self, row_id: UUID, column_id: UUID) -> Result[List[FileReferenceResponse]]:
        async with self.uow:
            result = await self.verify.row_column(row_id, column_id)
            if result.is_err():
                return result

            file_refs = await self.uow.data_tables.get_file_references(row_id, column_id)
            return Return.ok([FileReferenceResponse.from_entity(ref) for ref in file_refs])

    async def reorder(
        self, row_id: UUID, column_id: UUID, file_ref_ids: Sequence[UUID]
    ) -> Result[SuccessResponse]:
        async with self.uow:
            result = await self.verify.row_column(row_id, column_id)
            if result.is_err():
                return result

            await self.uow.data_tables.reorder_file_references(row_id, column_id, file_ref_ids)
            await self.uow.commit()
            return Return.ok(SuccessResponse())
