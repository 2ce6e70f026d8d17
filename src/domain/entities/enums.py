"""
Data Brain Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ColumnType(str, Enum):
    """Column type tag"""

    text = "text"
    number = "number"
    date = "date"
    boolean = "boolean"
    select = "select"
    multi_select = "multi_select"
    url = "url"
    file = "file"
    formula = "formula"
    relation = "relation"
    rollup = "rollup"
    created_time = "created_time"
    last_edited_time = "last_edited_time"


class ViewType(str, Enum):
    """Saved view layout"""

    table = "table"
    board = "board"
    calendar = "calendar"
    gallery = "gallery"
    timeline = "timeline"
    list = "list"


class FilterOperator(str, Enum):
    """Row query filter operators"""

    equals = "equals"
    not_equals = "notEquals"
    contains = "contains"
    not_contains = "notContains"
    starts_with = "startsWith"
    ends_with = "endsWith"
    greater_than = "greaterThan"
    greater_than_or_equals = "greaterThanOrEquals"
    less_than = "lessThan"
    less_than_or_equals = "lessThanOrEquals"
    is_empty = "isEmpty"
    is_not_empty = "isNotEmpty"
    is_in = "isIn"
    is_not_in = "isNotIn"


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"
