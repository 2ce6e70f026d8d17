"""
Dispatch Batch Use Case

Runs the operations of one batch RPC call strictly in order. Each operation
is parsed into its typed record, then handed to the same use case the
single-resource route uses, so ownership and quota checks are identical.

A failed operation is recorded at its own index and rolled back alone;
operations committed before it stay committed.
"""

import logging
from typing import Any, List

from pydantic import ValidationError

from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.data_tables import (
    ColumnsUseCase,
    FileReferencesUseCase,
    RelationsUseCase,
    RowsUseCase,
    SelectOptionsUseCase,
    TablesUseCase,
    ViewsUseCase,
)
from src.domain.data_table_inputs import (
    ColumnFields,
    CreateRelationInput,
    CreateFileReferenceInput,
    DeleteRelationInput,
    RowFields,
    SelectOptionFields,
    TableFields,
    ViewFields,
)
from src.libs.result import Error, Result, Return
from src.libs.validation import validation_error_details

from .dtos import BatchOperationRequest, BatchRequest, BatchResponse, BatchResult
from .operations import (
    AddFileReferenceOperation,
    ArchiveRowOperation,
    BulkArchiveRowsOperation,
    BulkCreateRowsOperation,
    BulkDeleteRowsOperation,
    CreateColumnOperation,
    CreateRelationOperation,
    CreateRowOperation,
    CreateSelectOptionOperation,
    CreateTableOperation,
    CreateViewOperation,
    DeleteColumnOperation,
    DeleteRelationOperation,
    DeleteRowOperation,
    DeleteSelectOptionOperation,
    DeleteTableOperation,
    DeleteViewOperation,
    GetColumnOperation,
    GetColumnsOperation,
    GetFileReferencesOperation,
    GetRelatedRowsOperation,
    GetRelationsForRowOperation,
    GetRowOperation,
    GetRowsOperation,
    GetSelectOptionsOperation,
    GetTableOperation,
    GetViewOperation,
    GetViewsOperation,
    ListTablesOperation,
    RemoveFileReferenceOperation,
    ReorderColumnsOperation,
    ReorderFileReferencesOperation,
    ReorderSelectOptionsOperation,
    ReorderViewsOperation,
    UnarchiveRowOperation,
    UpdateColumnOperation,
    UpdateRowOperation,
    UpdateSelectOptionOperation,
    UpdateTableOperation,
    UpdateViewOperation,
    parse_operation,
)

logger = logging.getLogger(__name__)


def _narrow(operation, model_cls):
    """Re-validate the fields of operation that model_cls declares"""
    return model_cls.model_validate(operation.model_dump(include=set(model_cls.model_fields)))


class DispatchBatchUseCase:
    """
    Execute a batch of named operations for one workspace.

    Business Logic:
    1. Parse each entry's params into its typed operation (VALIDATION_ERROR)
    2. Dispatch to the resource use case, which verifies ownership (NOT_FOUND)
       and quotas (QUOTA_EXCEEDED) before touching storage
    3. Convert storage exceptions into OPERATION_FAILED for that entry only
    4. Return one result per entry, in input order
    """

    def __init__(self, uow: UnitOfWork, verifier: OwnershipVerifier):
        self.uow = uow
        self.tables = TablesUseCase(uow, verifier)
        self.columns = ColumnsUseCase(uow, verifier)
        self.rows = RowsUseCase(uow, verifier)
        self.views = ViewsUseCase(uow, verifier)
        self.select_options = SelectOptionsUseCase(uow, verifier)
        self.relations = RelationsUseCase(uow, verifier)
        self.file_references = FileReferencesUseCase(uow, verifier)

    async def execute(self, request: BatchRequest) -> BatchResponse:
        results: List[BatchResult] = []
        for index, entry in enumerate(request.operations):
            result = await self._run(entry)
            if result.is_err():
                logger.warning(
                    "Batch operation %d (%s) failed: %s", index, entry.method, result.error.code
                )
            results.append(BatchResult.from_result(result))
        return BatchResponse(results=results)

    async def _run(self, entry: BatchOperationRequest) -> Result[Any]:
        try:
            operation = parse_operation(entry.method, entry.params)
        except ValidationError as e:
            # Drop the union tag so paths name the param itself
            errors = [{**error, "loc": error["loc"][1:]} for error in e.errors(include_url=False)]
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Invalid params for {entry.method}",
                    validation_error_details(errors),
                )
            )

        try:
            return await self._dispatch(operation)
        except Exception as e:
            # Storage failures stay inside this entry; the unit of work already rolled back
            logger.exception("Batch operation %s raised", entry.method)
            return Return.err(Error("OPERATION_FAILED", str(e) or type(e).__name__))

    async def _dispatch(self, operation) -> Result[Any]:
        match operation:
            # Tables
            case CreateTableOperation():
                return await self.tables.create(_narrow(operation, TableFields))
            case GetTableOperation(table_id=table_id):
                return await self.tables.get(table_id)
            case UpdateTableOperation(table_id=table_id, updates=updates):
                return await self.tables.update(table_id, updates)
            case DeleteTableOperation(table_id=table_id):
                return await self.tables.delete(table_id)
            case ListTablesOperation():
                return await self.tables.list()

            # Columns
            case CreateColumnOperation(table_id=table_id):
                return await self.columns.create(table_id, _narrow(operation, ColumnFields))
            case GetColumnsOperation(table_id=table_id):
                return await self.columns.list(table_id)
            case GetColumnOperation(column_id=column_id):
                return await self.columns.get(column_id)
            case UpdateColumnOperation(column_id=column_id, updates=updates):
                return await self.columns.update(column_id, updates)
            case DeleteColumnOperation(column_id=column_id):
                return await self.columns.delete(column_id)
            case ReorderColumnsOperation(table_id=table_id, ids=ids):
                return await self.columns.reorder(table_id, ids)

            # Rows
            case CreateRowOperation(table_id=table_id):
                return await self.rows.create(table_id, _narrow(operation, RowFields))
            case GetRowOperation(row_id=row_id):
                return await self.rows.get(row_id)
            case GetRowsOperation(table_id=table_id, query=query):
                return await self.rows.query(table_id, query)
            case UpdateRowOperation(row_id=row_id, cells=cells):
                return await self.rows.update(row_id, cells)
            case DeleteRowOperation(row_id=row_id):
                return await self.rows.delete(row_id)
            case ArchiveRowOperation(row_id=row_id):
                return await self.rows.archive(row_id)
            case UnarchiveRowOperation(row_id=row_id):
                return await self.rows.unarchive(row_id)
            case BulkCreateRowsOperation(inputs=inputs):
                return await self.rows.bulk_create(inputs)
            case BulkDeleteRowsOperation(row_ids=row_ids):
                return await self.rows.bulk_delete(row_ids)
            case BulkArchiveRowsOperation(row_ids=row_ids):
                return await self.rows.bulk_archive(row_ids)

            # Views
            case CreateViewOperation(table_id=table_id):
                return await self.views.create(table_id, _narrow(operation, ViewFields))
            case GetViewsOperation(table_id=table_id):
                return await self.views.list(table_id)
            case GetViewOperation(view_id=view_id):
                return await self.views.get(view_id)
            case UpdateViewOperation(view_id=view_id, updates=updates):
                return await self.views.update(view_id, updates)
            case DeleteViewOperation(view_id=view_id):
                return await self.views.delete(view_id)
            case ReorderViewsOperation(table_id=table_id, ids=ids):
                return await self.views.reorder(table_id, ids)

            # Select options
            case CreateSelectOptionOperation(column_id=column_id):
                return await self.select_options.create(
                    column_id, _narrow(operation, SelectOptionFields)
                )
            case GetSelectOptionsOperation(column_id=column_id):
                return await self.select_options.list(column_id)
            case UpdateSelectOptionOperation(option_id=option_id, updates=updates):
                return await self.select_options.update(option_id, updates)
            case DeleteSelectOptionOperation(option_id=option_id):
                return await self.select_options.delete(option_id)
            case ReorderSelectOptionsOperation(column_id=column_id, ids=ids):
                return await self.select_options.reorder(column_id, ids)

            # Relations
            case CreateRelationOperation():
                return await self.relations.create(_narrow(operation, CreateRelationInput))
            case DeleteRelationOperation():
                return await self.relations.delete(_narrow(operation, DeleteRelationInput))
            case GetRelatedRowsOperation(row_id=row_id, column_id=column_id):
                return await self.relations.related_rows(row_id, column_id)
            case GetRelationsForRowOperation(row_id=row_id):
                return await self.relations.for_row(row_id)

            # File references
            case AddFileReferenceOperation():
                return await self.file_references.add(
                    _narrow(operation, CreateFileReferenceInput)
                )
            case RemoveFileReferenceOperation(file_ref_id=file_ref_id):
                return await self.file_references.remove(file_ref_id)
            case GetFileReferencesOperation(row_id=row_id, column_id=column_id):
                return await self.file_references.list(row_id, column_id)
            case ReorderFileReferencesOperation(row_id=row_id, column_id=column_id, ids=ids):
                return await self.file_references.reorder(row_id, column_id, ids)

            case _:
                raise ValueError(f"Unknown batch method: {getattr(operation, 'method', operation)}")
