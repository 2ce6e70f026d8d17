"""
Data Table Use Case DTOs (Data Transfer Objects)

Response classes shared by the single-resource routes and the batch RPC.
Serialized with camelCase keys.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import ConfigDict

from src.domain.data_table_inputs import CamelModel, QueryResult
from src.domain.entities import ColumnType, DataRow, FileReference, ViewType


class ResponseModel(CamelModel):
    model_config = ConfigDict(from_attributes=True)


# ============================================================================
# Response DTOs
# ============================================================================


class SuccessResponse(ResponseModel):
    """Acknowledgement for operations without a payload"""

    success: bool = True


class TableResponse(ResponseModel):
    id: UUID
    workspace_id: UUID
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ColumnResponse(ResponseModel):
    id: UUID
    table_id: UUID
    name: str
    type: ColumnType
    position: int
    width: int
    is_primary: bool
    config: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime


class RowResponse(ResponseModel):
    id: UUID
    table_id: UUID
    parent_row_id: Optional[UUID] = None
    cells: Dict[str, Any]
    archived: bool
    created_at: datetime
    updated_at: datetime


class RowPageResponse(ResponseModel):
    """One page of rows"""

    items: List[RowResponse]
    total: int
    has_more: bool
    cursor: Optional[str] = None

    @classmethod
    def from_query_result(cls, page: QueryResult[DataRow]) -> "RowPageResponse":
        return cls(
            items=[RowResponse.model_validate(row) for row in page.items],
            total=page.total,
            has_more=page.has_more,
            cursor=page.cursor,
        )


class ViewResponse(ResponseModel):
    id: UUID
    table_id: UUID
    name: str
    type: ViewType
    is_default: bool
    position: int
    config: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime


class SelectOptionResponse(ResponseModel):
    id: UUID
    column_id: UUID
    name: str
    color: Optional[str] = None
    position: int


class RelationResponse(ResponseModel):
    """Outgoing edge of a row"""

    column_id: UUID
    target_row_id: UUID


class FileReferenceResponse(ResponseModel):
    id: UUID
    row_id: UUID
    column_id: UUID
    file_id: str
    file_url: str
    original_name: str
    mime_type: str
    size_bytes: Optional[int] = None
    position: int
    metadata: Optional[Dict[str, Any]] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, file_ref: FileReference) -> "FileReferenceResponse":
        return cls(
            id=file_ref.id,
            row_id=file_ref.row_id,
            column_id=file_ref.column_id,
            file_id=file_ref.file_id,
            file_url=file_ref.file_url,
            original_name=file_ref.original_name,
            mime_type=file_ref.mime_type,
            size_bytes=file_ref.size_bytes,
            position=file_ref.position,
            metadata=file_ref.file_metadata,
            created_at=file_ref.created_at,
        )
