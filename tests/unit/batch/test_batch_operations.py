"""
Unit tests for batch operation parsing and the batch request envelope
"""
from typing import get_args
from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.app.use_cases.batch import BatchRequest
from src.app.use_cases.batch.dtos import BatchMethod, BatchResult
from src.app.use_cases.batch.operations import (
    BulkDeleteRowsOperation,
    CreateTableOperation,
    GetTableOperation,
    ReorderColumnsOperation,
    UpdateRowOperation,
    operation_methods,
    parse_operation,
)
from src.libs.result import Error


def test_every_method_has_an_operation():
    methods = operation_methods()

    assert len(methods) == 40
    assert set(methods) == set(get_args(BatchMethod))


@pytest.mark.parametrize("key", ["id", "tableId"])
def test_identifier_accepts_generic_and_specific_name(key):
    table_id = uuid4()

    operation = parse_operation("getTable", {key: str(table_id)})

    assert isinstance(operation, GetTableOperation)
    assert operation.table_id == table_id


def test_row_ids_accept_ids_alias():
    ids = [uuid4(), uuid4()]

    operation = parse_operation("bulkDeleteRows", {"ids": [str(i) for i in ids]})

    assert isinstance(operation, BulkDeleteRowsOperation)
    assert operation.row_ids == ids


def test_reorder_rejects_empty_list():
    with pytest.raises(ValidationError):
        parse_operation("reorderColumns", {"tableId": str(uuid4()), "columnIds": []})


def test_reorder_accepts_kind_specific_list():
    table_id, column_id = uuid4(), uuid4()

    operation = parse_operation(
        "reorderColumns", {"tableId": str(table_id), "columnIds": [str(column_id)]}
    )

    assert isinstance(operation, ReorderColumnsOperation)
    assert operation.ids == [column_id]


def test_create_table_ignores_caller_workspace():
    operation = parse_operation("createTable", {"name": "Tasks", "workspaceId": str(uuid4())})

    assert isinstance(operation, CreateTableOperation)
    assert not hasattr(operation, "workspace_id")


def test_update_row_requires_cells():
    with pytest.raises(ValidationError):
        parse_operation("updateRow", {"rowId": str(uuid4())})

    operation = parse_operation("updateRow", {"rowId": str(uuid4()), "cells": {"a": 1}})
    assert isinstance(operation, UpdateRowOperation)


def test_bad_identifier_is_rejected():
    with pytest.raises(ValidationError):
        parse_operation("getTable", {"id": "not-a-uuid"})


def test_unknown_method_rejects_whole_batch():
    with pytest.raises(ValidationError):
        BatchRequest.model_validate(
            {"operations": [{"method": "listTables"}, {"method": "dropDatabase"}]}
        )


@pytest.mark.parametrize("count", [0, 51])
def test_batch_size_bounds(count):
    with pytest.raises(ValidationError):
        BatchRequest.model_validate({"operations": [{"method": "listTables"}] * count})


def test_batch_result_shapes():
    ok = BatchResult.ok({"id": "t1"}).model_dump()
    failed = BatchResult.fail(Error("NOT_FOUND", "Table not found")).model_dump()

    assert ok == {"success": True, "data": {"id": "t1"}}
    assert failed == {"success": False, "error": {"code": "NOT_FOUND", "message": "Table not found"}}
