"""
Data Table Adapter Interface

Storage primitives for tables, columns, rows, views, select options,
relations and file references. Implementations never check ownership;
callers verify through OwnershipVerifier before every call.

Cascading deletes are the implementation's responsibility.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from src.domain.data_table_inputs import (
    CreateColumnInput,
    CreateFileReferenceInput,
    CreateRelationInput,
    CreateRowInput,
    CreateSelectOptionInput,
    CreateTableInput,
    CreateViewInput,
    QueryResult,
    RowQueryOptions,
    UpdateColumnInput,
    UpdateSelectOptionInput,
    UpdateTableInput,
    UpdateViewInput,
)
from src.domain.entities import (
    DataColumn,
    DataRow,
    DataTable,
    DataView,
    FileReference,
    Relation,
    SelectOption,
)


class IDataTableAdapter(ABC):
    """Data-table storage adapter interface - application layer"""

    # ------------------------------------------------------------------ tables

    @abstractmethod
    async def create_table(self, data: CreateTableInput) -> DataTable:
        pass

    @abstractmethod
    async def get_table(self, table_id: UUID) -> Optional[DataTable]:
        pass

    @abstractmethod
    async def update_table(self, table_id: UUID, updates: UpdateTableInput) -> DataTable:
        pass

    @abstractmethod
    async def delete_table(self, table_id: UUID) -> int:
        """Delete table and everything under it; returns number of rows removed"""
        pass

    @abstractmethod
    async def list_tables(self, workspace_id: UUID) -> List[DataTable]:
        pass

    @abstractmethod
    async def count_tables(self, workspace_ids: Sequence[UUID]) -> int:
        pass

    # ----------------------------------------------------------------- columns

    @abstractmethod
    async def create_column(self, data: CreateColumnInput) -> DataColumn:
        pass

    @abstractmethod
    async def get_column(self, column_id: UUID) -> Optional[DataColumn]:
        pass

    @abstractmethod
    async def get_columns(self, table_id: UUID) -> List[DataColumn]:
        pass

    @abstractmethod
    async def update_column(self, column_id: UUID, updates: UpdateColumnInput) -> DataColumn:
        pass

    @abstractmethod
    async def delete_column(self, column_id: UUID) -> None:
        pass

    @abstractmethod
    async def reorder_columns(self, table_id: UUID, column_ids: Sequence[UUID]) -> None:
        """Ids that do not belong to the table are ignored"""
        pass

    # -------------------------------------------------------------------- rows

    @abstractmethod
    async def create_row(self, data: CreateRowInput) -> DataRow:
        pass

    @abstractmethod
    async def get_row(self, row_id: UUID) -> Optional[DataRow]:
        pass

    @abstractmethod
    async def get_rows(
        self, table_id: UUID, query: Optional[RowQueryOptions] = None
    ) -> QueryResult[DataRow]:
        pass

    @abstractmethod
    async def update_row(self, row_id: UUID, cells: dict) -> DataRow:
        """Merge cells into the row"""
        pass

    @abstractmethod
    async def delete_row(self, row_id: UUID) -> int:
        """Delete row and its sub-items; returns number of rows removed"""
        pass

    @abstractmethod
    async def archive_row(self, row_id: UUID) -> None:
        pass

    @abstractmethod
    async def unarchive_row(self, row_id: UUID) -> None:
        pass

    @abstractmethod
    async def bulk_create_rows(self, inputs: Sequence[CreateRowInput]) -> List[DataRow]:
        pass

    @abstractmethod
    async def bulk_delete_rows(self, row_ids: Sequence[UUID]) -> int:
        pass

    @abstractmethod
    async def bulk_archive_rows(self, row_ids: Sequence[UUID]) -> None:
        pass

    @abstractmethod
    async def count_rows(self, table_ids: Sequence[UUID]) -> int:
        pass

    # ------------------------------------------------------------------- views

    @abstractmethod
    async def create_view(self, data: CreateViewInput) -> DataView:
        pass

    @abstractmethod
    async def get_view(self, view_id: UUID) -> Optional[DataView]:
        pass

    @abstractmethod
    async def get_views(self, table_id: UUID) -> List[DataView]:
        pass

    @abstractmethod
    async def update_view(self, view_id: UUID, updates: UpdateViewInput) -> DataView:
        pass

    @abstractmethod
    async def delete_view(self, view_id: UUID) -> None:
        pass

    @abstractmethod
    async def reorder_views(self, table_id: UUID, view_ids: Sequence[UUID]) -> None:
        pass

    # ---------------------------------------------------------- select options

    @abstractmethod
    async def create_select_option(self, data: CreateSelectOptionInput) -> SelectOption:
        pass

    @abstractmethod
    async def get_select_option(self, option_id: UUID) -> Optional[SelectOption]:
        pass

    @abstractmethod
    async def get_select_options(self, column_id: UUID) -> List[SelectOption]:
        pass

    @abstractmethod
    async def update_select_option(
        self, option_id: UUID, updates: UpdateSelectOptionInput
    ) -> SelectOption:
        pass

    @abstractmethod
    async def delete_select_option(self, option_id: UUID) -> None:
        pass

    @abstractmethod
    async def reorder_select_options(self, column_id: UUID, option_ids: Sequence[UUID]) -> None:
        pass

    # --------------------------------------------------------------- relations

    @abstractmethod
    async def create_relation(self, data: CreateRelationInput) -> Relation:
        pass

    @abstractmethod
    async def delete_relation(
        self, source_row_id: UUID, column_id: UUID, target_row_id: UUID
    ) -> None:
        pass

    @abstractmethod
    async def get_related_rows(self, row_id: UUID, column_id: UUID) -> List[DataRow]:
        pass

    @abstractmethod
    async def get_relations_for_row(self, row_id: UUID) -> List[Relation]:
        pass

    # --------------------------------------------------------- file references

    @abstractmethod
    async def add_file_reference(self, data: CreateFileReferenceInput) -> FileReference:
        pass

    @abstractmethod
    async def get_file_reference(self, file_ref_id: UUID) -> Optional[FileReference]:
        pass

    @abstractmethod
    async def remove_file_reference(self, file_ref_id: UUID) -> None:
        pass

    @abstractmethod
    async def get_file_references(self, row_id: UUID, column_id: UUID) -> List[FileReference]:
        pass

    @abstractmethod
    async def reorder_file_references(
        self, row_id: UUID, column_id: UUID, file_ref_ids: Sequence[UUID]
    ) -> None:
        pass
