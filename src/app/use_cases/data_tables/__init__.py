"""
Data Table Use Cases

Workspace-scoped operations on tables, columns, rows, views, select
options, relations and file references.
"""

from .columns_use_case import ColumnsUseCase
from .dtos import (
    ColumnResponse,
    FileReferenceResponse,
    RelationResponse,
    RowPageResponse,
    RowResponse,
    SelectOptionResponse,
    SuccessResponse,
    TableResponse,
    ViewResponse,
)
from .file_references_use_case import FileReferencesUseCase
from .relations_use_case import RelationsUseCase
from .rows_use_case import RowsUseCase
from .scoped_use_case import WorkspaceScopedUseCase
from .select_options_use_case import SelectOptionsUseCase
from .tables_use_case import TablesUseCase
from .views_use_case import ViewsUseCase

__all__ = [
    "WorkspaceScopedUseCase",
    "TablesUseCase",
    "ColumnsUseCase",
    "RowsUseCase",
    "ViewsUseCase",
    "SelectOptionsUseCase",
    "RelationsUseCase",
    "FileReferencesUseCase",
    "TableResponse",
    "ColumnResponse",
    "RowResponse",
    "RowPageResponse",
    "ViewResponse",
    "SelectOptionResponse",
    "RelationResponse",
    "FileReferenceResponse",
    "SuccessResponse",
]
