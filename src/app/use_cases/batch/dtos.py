"""
Batch Use Case DTOs (Data Transfer Objects)

Request envelope for the batch RPC and the per-operation result records
collected into its response.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_serializer
from pydantic_core import to_jsonable_python

from src.libs.result import Error, Result

MAX_BATCH_OPERATIONS = 50

BatchMethod = Literal[
    "createTable",
    "getTable",
    "updateTable",
    "deleteTable",
    "listTables",
    "createColumn",
    "getColumns",
    "getColumn",
    "updateColumn",
    "deleteColumn",
    "reorderColumns",
    "createRow",
    "getRow",
    "getRows",
    "updateRow",
    "deleteRow",
    "archiveRow",
    "unarchiveRow",
    "bulkCreateRows",
    "bulkDeleteRows",
    "bulkArchiveRows",
    "createView",
    "getViews",
    "getView",
    "updateView",
    "deleteView",
    "reorderViews",
    "createSelectOption",
    "getSelectOptions",
    "updateSelectOption",
    "deleteSelectOption",
    "reorderSelectOptions",
    "createRelation",
    "deleteRelation",
    "getRelatedRows",
    "getRelationsForRow",
    "addFileReference",
    "removeFileReference",
    "getFileReferences",
    "reorderFileReferences",
]


# ============================================================================
# Request DTOs
# ============================================================================


class BatchOperationRequest(BaseModel):
    method: BatchMethod
    params: Dict[str, Any] = Field(default_factory=dict)


class BatchRequest(BaseModel):
    """An unknown method name or a bad count rejects the whole batch"""

    operations: List[BatchOperationRequest] = Field(
        ..., min_length=1, max_length=MAX_BATCH_OPERATIONS
    )


# ============================================================================
# Response DTOs
# ============================================================================


class BatchError(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class BatchResult(BaseModel):
    """Outcome of one operation: {success, data} or {success, error}"""

    success: bool
    data: Any = None
    error: Optional[BatchError] = None

    @classmethod
    def ok(cls, data: Any) -> "BatchResult":
        return cls(success=True, data=to_jsonable_python(data, by_alias=True))

    @classmethod
    def fail(cls, error: Error) -> "BatchResult":
        return cls(
            success=False,
            error=BatchError(code=error.code, message=error.message, details=error.details),
        )

    @classmethod
    def from_result(cls, result: Result[Any]) -> "BatchResult":
        if result.is_ok():
            return cls.ok(result.value)
        return cls.fail(result.error)

    @model_serializer
    def _serialize(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "error": self.error.model_dump(exclude_none=True)}


class BatchResponse(BaseModel):
    """Results in input order, one per operation"""

    results: List[BatchResult]
