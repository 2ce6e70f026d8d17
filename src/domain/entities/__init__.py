"""
Data Brain Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ColumnType,
    ViewType,
    FilterOperator,
    SortDirection,
)

# Export all entities
from .tenant import Tenant
from .workspace import Workspace
from .table import DataTable
from .column import DataColumn
from .row import DataRow
from .view import DataView
from .select_option import SelectOption
from .relation import Relation
from .file_reference import FileReference

__all__ = [
    # Enums
    "ColumnType",
    "ViewType",
    "FilterOperator",
    "SortDirection",
    # Entities
    "Tenant",
    "Workspace",
    "DataTable",
    "DataColumn",
    "DataRow",
    "DataView",
    "SelectOption",
    "Relation",
    "FileReference",
]
