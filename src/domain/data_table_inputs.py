"""
Data Table Inputs

Value objects handed to the data-table adapter. Field names are snake_case in
Python and camelCase on the wire.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar
from urllib.parse import urlparse
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.domain.entities.enums import ColumnType, FilterOperator, SortDirection, ViewType

MAX_PAGE_LIMIT = 200
DEFAULT_PAGE_LIMIT = 50
MAX_BULK_ROW_IDS = 1000

_CURSOR_PATTERN = re.compile(r"^[A-Za-z0-9+/=]+$")

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Tables
# ============================================================================


class TableFields(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    icon: Optional[str] = Field(default=None, max_length=50)


class CreateTableInput(TableFields):
    workspace_id: UUID


class UpdateTableInput(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    icon: Optional[str] = Field(default=None, max_length=50)


# ============================================================================
# Columns
# ============================================================================


class ColumnFields(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: ColumnType
    position: Optional[int] = Field(default=None, ge=0)
    width: Optional[int] = Field(default=None, gt=0)
    is_primary: Optional[bool] = None
    config: Optional[Dict[str, Any]] = None


class CreateColumnInput(ColumnFields):
    table_id: UUID


class UpdateColumnInput(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    width: Optional[int] = Field(default=None, gt=0)
    config: Optional[Dict[str, Any]] = None


# ============================================================================
# Rows
# ============================================================================


class RowFields(CamelModel):
    parent_row_id: Optional[UUID] = None
    cells: Optional[Dict[str, Any]] = None


class CreateRowInput(RowFields):
    table_id: UUID


class RowFilter(CamelModel):
    column_id: str
    operator: FilterOperator
    value: Any = None


class RowSort(CamelModel):
    column_id: str
    direction: SortDirection


class RowQueryOptions(CamelModel):
    filters: Optional[List[RowFilter]] = None
    sorts: Optional[List[RowSort]] = None
    limit: Optional[int] = Field(default=None, ge=1, le=MAX_PAGE_LIMIT)
    offset: Optional[int] = Field(default=None, ge=0)
    cursor: Optional[str] = None
    include_archived: bool = False
    parent_row_id: Optional[UUID] = None
    include_sub_items: bool = False

    @field_validator("cursor")
    @classmethod
    def _check_cursor(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not _CURSOR_PATTERN.match(value):
            raise ValueError("Invalid cursor format")
        return value


@dataclass
class QueryResult(Generic[T]):
    """One page of a row query"""

    items: List[T]
    total: int
    has_more: bool
    cursor: Optional[str] = None


# ============================================================================
# Views
# ============================================================================


class ViewFields(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: ViewType
    is_default: Optional[bool] = None
    position: Optional[int] = Field(default=None, ge=0)
    config: Optional[Dict[str, Any]] = None


class CreateViewInput(ViewFields):
    table_id: UUID


class UpdateViewInput(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    type: Optional[ViewType] = None
    is_default: Optional[bool] = None
    config: Optional[Dict[str, Any]] = None


# ============================================================================
# Select options
# ============================================================================


class SelectOptionFields(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    color: Optional[str] = Field(default=None, max_length=50)
    position: Optional[int] = Field(default=None, ge=0)


class CreateSelectOptionInput(SelectOptionFields):
    column_id: UUID


class UpdateSelectOptionInput(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    color: Optional[str] = Field(default=None, max_length=50)
    position: Optional[int] = Field(default=None, ge=0)


# ============================================================================
# Relations & file references
# ============================================================================


class CreateRelationInput(CamelModel):
    source_row_id: UUID
    source_column_id: UUID
    target_row_id: UUID


class DeleteRelationInput(CamelModel):
    source_row_id: UUID
    column_id: UUID
    target_row_id: UUID


class CreateFileReferenceInput(CamelModel):
    row_id: UUID
    column_id: UUID
    file_id: str = Field(..., min_length=1)
    file_url: str
    original_name: str = Field(..., min_length=1, max_length=255)
    mime_type: str = Field(..., min_length=1, max_length=100)
    size_bytes: Optional[int] = Field(default=None, ge=0)
    position: Optional[int] = Field(default=None, ge=0)
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("file_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError("fileUrl must be an absolute URL")
        return value
