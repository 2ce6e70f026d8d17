"""
Batch Operations

One typed record per batch method, joined into a union discriminated on
``method``. A batch entry's loose ``params`` bag is parsed into one of these
before dispatch, so every operation reaches its use case with checked ids.

Identifier params accept both ``id`` and the kind-specific name
(``tableId``, ``rowId``, ...).
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union, get_args
from uuid import UUID

from pydantic import AliasChoices, Field, TypeAdapter

from src.domain.data_table_inputs import (
    MAX_BULK_ROW_IDS,
    CamelModel,
    ColumnFields,
    CreateFileReferenceInput,
    CreateRelationInput,
    CreateRowInput,
    DeleteRelationInput,
    RowQueryOptions,
    SelectOptionFields,
    TableFields,
    UpdateColumnInput,
    UpdateSelectOptionInput,
    UpdateTableInput,
    UpdateViewInput,
    ViewFields,
)


def _id_field(kind_alias: str):
    return Field(validation_alias=AliasChoices("id", kind_alias))


def _ids_field(kind_alias: str):
    return Field(validation_alias=AliasChoices("ids", kind_alias), min_length=1)


def _row_ids_field():
    return Field(
        validation_alias=AliasChoices("rowIds", "ids"),
        min_length=1,
        max_length=MAX_BULK_ROW_IDS,
    )


# ============================================================================
# Tables
# ============================================================================


class CreateTableOperation(TableFields):
    """A caller-supplied workspaceId is ignored; the request's workspace is used"""

    method: Literal["createTable"]


class GetTableOperation(CamelModel):
    method: Literal["getTable"]
    table_id: UUID = _id_field("tableId")


class UpdateTableOperation(CamelModel):
    method: Literal["updateTable"]
    table_id: UUID = _id_field("tableId")
    updates: UpdateTableInput = Field(default_factory=UpdateTableInput)


class DeleteTableOperation(CamelModel):
    method: Literal["deleteTable"]
    table_id: UUID = _id_field("tableId")


class ListTablesOperation(CamelModel):
    method: Literal["listTables"]


# ============================================================================
# Columns
# ============================================================================


class CreateColumnOperation(ColumnFields):
    method: Literal["createColumn"]
    table_id: UUID


class GetColumnsOperation(CamelModel):
    method: Literal["getColumns"]
    table_id: UUID


class GetColumnOperation(CamelModel):
    method: Literal["getColumn"]
    column_id: UUID = _id_field("columnId")


class UpdateColumnOperation(CamelModel):
    method: Literal["updateColumn"]
    column_id: UUID = _id_field("columnId")
    updates: UpdateColumnInput = Field(default_factory=UpdateColumnInput)


class DeleteColumnOperation(CamelModel):
    method: Literal["deleteColumn"]
    column_id: UUID = _id_field("columnId")


class ReorderColumnsOperation(CamelModel):
    method: Literal["reorderColumns"]
    table_id: UUID
    ids: List[UUID] = _ids_field("columnIds")


# ============================================================================
# Rows
# ============================================================================


class CreateRowOperation(CreateRowInput):
    method: Literal["createRow"]


class GetRowOperation(CamelModel):
    method: Literal["getRow"]
    row_id: UUID = _id_field("rowId")


class GetRowsOperation(CamelModel):
    method: Literal["getRows"]
    table_id: UUID
    query: Optional[RowQueryOptions] = None


class UpdateRowOperation(CamelModel):
    method: Literal["updateRow"]
    row_id: UUID = _id_field("rowId")
    cells: Dict[str, Any]


class DeleteRowOperation(CamelModel):
    method: Literal["deleteRow"]
    row_id: UUID = _id_field("rowId")


class ArchiveRowOperation(CamelModel):
    method: Literal["archiveRow"]
    row_id: UUID = _id_field("rowId")


class UnarchiveRowOperation(CamelModel):
    method: Literal["unarchiveRow"]
    row_id: UUID = _id_field("rowId")


class BulkCreateRowsOperation(CamelModel):
    method: Literal["bulkCreateRows"]
    inputs: List[CreateRowInput] = Field(min_length=1, max_length=MAX_BULK_ROW_IDS)


class BulkDeleteRowsOperation(CamelModel):
    method: Literal["bulkDeleteRows"]
    row_ids: List[UUID] = _row_ids_field()


class BulkArchiveRowsOperation(CamelModel):
    method: Literal["bulkArchiveRows"]
    row_ids: List[UUID] = _row_ids_field()


# ============================================================================
# Views
# ============================================================================


class CreateViewOperation(ViewFields):
    method: Literal["createView"]
    table_id: UUID


class GetViewsOperation(CamelModel):
    method: Literal["getViews"]
    table_id: UUID


class GetViewOperation(CamelModel):
    method: Literal["getView"]
    view_id: UUID = _id_field("viewId")


class UpdateViewOperation(CamelModel):
    method: Literal["updateView"]
    view_id: UUID = _id_field("viewId")
    updates: UpdateViewInput = Field(default_factory=UpdateViewInput)


class DeleteViewOperation(CamelModel):
    method: Literal["deleteView"]
    view_id: UUID = _id_field("viewId")


class ReorderViewsOperation(CamelModel):
    method: Literal["reorderViews"]
    table_id: UUID
    ids: List[UUID] = _ids_field("viewIds")


# ============================================================================
# Select options
# ============================================================================


class CreateSelectOptionOperation(SelectOptionFields):
    method: Literal["createSelectOption"]
    column_id: UUID


class GetSelectOptionsOperation(CamelModel):
    method: Literal["getSelectOptions"]
    column_id: UUID


class UpdateSelectOptionOperation(CamelModel):
    method: Literal["updateSelectOption"]
    option_id: UUID = _id_field("optionId")
    updates: UpdateSelectOptionInput = Field(default_factory=UpdateSelectOptionInput)


class DeleteSelectOptionOperation(CamelModel):
    method: Literal["deleteSelectOption"]
    option_id: UUID = _id_field("optionId")


class ReorderSelectOptionsOperation(CamelModel):
    method: Literal["reorderSelectOptions"]
    column_id: UUID
    ids: List[UUID] = _ids_field("optionIds")


# ============================================================================
# Relations
# ============================================================================


class CreateRelationOperation(CreateRelationInput):
    method: Literal["createRelation"]


class DeleteRelationOperation(DeleteRelationInput):
    method: Literal["deleteRelation"]


class GetRelatedRowsOperation(CamelModel):
    method: Literal["getRelatedRows"]
    row_id: UUID
    column_id: UUID


class GetRelationsForRowOperation(CamelModel):
    method: Literal["getRelationsForRow"]
    row_id: UUID


# ============================================================================
# File references
# ============================================================================


class AddFileReferenceOperation(CreateFileReferenceInput):
    method: Literal["addFileReference"]


class RemoveFileReferenceOperation(CamelModel):
    method: Literal["removeFileReference"]
    file_ref_id: UUID = _id_field("fileRefId")


class GetFileReferencesOperation(CamelModel):
    method: Literal["getFileReferences"]
    row_id: UUID
    column_id: UUID


class ReorderFileReferencesOperation(CamelModel):
    method: Literal["reorderFileReferences"]
    row_id: UUID
    column_id: UUID
    ids: List[UUID] = _ids_field("fileRefIds")


BatchOperation = Annotated[
    Union[
        CreateTableOperation,
        GetTableOperation,
        UpdateTableOperation,
        DeleteTableOperation,
        ListTablesOperation,
        CreateColumnOperation,
        GetColumnsOperation,
        GetColumnOperation,
        UpdateColumnOperation,
        DeleteColumnOperation,
        ReorderColumnsOperation,
        CreateRowOperation,
        GetRowOperation,
        GetRowsOperation,
        UpdateRowOperation,
        DeleteRowOperation,
        ArchiveRowOperation,
        UnarchiveRowOperation,
        BulkCreateRowsOperation,
        BulkDeleteRowsOperation,
        BulkArchiveRowsOperation,
        CreateViewOperation,
        GetViewsOperation,
        GetViewOperation,
        UpdateViewOperation,
        DeleteViewOperation,
        ReorderViewsOperation,
        CreateSelectOptionOperation,
        GetSelectOptionsOperation,
        UpdateSelectOptionOperation,
        DeleteSelectOptionOperation,
        ReorderSelectOptionsOperation,
        CreateRelationOperation,
        DeleteRelationOperation,
        GetRelatedRowsOperation,
        GetRelationsForRowOperation,
        AddFileReferenceOperation,
        RemoveFileReferenceOperation,
        GetFileReferencesOperation,
        ReorderFileReferencesOperation,
    ],
    Field(discriminator="method"),
]

batch_operation_adapter: TypeAdapter = TypeAdapter(BatchOperation)


def operation_methods() -> List[str]:
    """Method names covered by the operation union, in declaration order"""
    members = get_args(get_args(BatchOperation)[0])
    return [get_args(member.model_fields["method"].annotation)[0] for member in members]


def parse_operation(method: str, params: Dict[str, Any]):
    """Parse a loose params bag into its typed operation; raises ValidationError"""
    return batch_operation_adapter.validate_python({**params, "method": method})
