"""
In-memory evaluation of row queries (filters, sorts, pagination).

Cells are schemaless JSON, so filtering happens after rows of the table are
loaded rather than in SQL.
"""

import base64
import binascii
import json
from typing import Any, Iterable, List, Optional

from src.domain.data_table_inputs import (
    DEFAULT_PAGE_LIMIT,
    QueryResult,
    RowFilter,
    RowQueryOptions,
)
from src.domain.entities import DataRow, FilterOperator, SortDirection


def encode_cursor(offset: int) -> str:
    return base64.b64encode(str(offset).encode("ascii")).decode("ascii")


def decode_cursor(cursor: str) -> int:
    try:
        offset = int(base64.b64decode(cursor, validate=True).decode("ascii"))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        raise ValueError("Invalid cursor")
    if offset < 0:
        raise ValueError("Invalid cursor")
    return offset


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def _contains(cell: Any, needle: Any) -> bool:
    if isinstance(cell, list):
        return needle in cell
    if isinstance(cell, str) and needle is not None:
        return str(needle).lower() in cell.lower()
    return False


def _compare(cell: Any, value: Any, operator: FilterOperator) -> bool:
    if cell is None or value is None or isinstance(cell, bool) != isinstance(value, bool):
        return False
    try:
        if operator == FilterOperator.greater_than:
            return cell > value
        if operator == FilterOperator.greater_than_or_equals:
            return cell >= value
        if operator == FilterOperator.less_than:
            return cell < value
        return cell <= value
    except TypeError:
        return False


def matches(cell: Any, row_filter: RowFilter) -> bool:
    operator = row_filter.operator
    value = row_filter.value

    if operator == FilterOperator.equals:
        return cell == value
    if operator == FilterOperator.not_equals:
        return cell != value
    if operator == FilterOperator.contains:
        return _contains(cell, value)
    if operator == FilterOperator.not_contains:
        return not _contains(cell, value)
    if operator == FilterOperator.starts_with:
        return isinstance(cell, str) and cell.lower().startswith(str(value).lower())
    if operator == FilterOperator.ends_with:
        return isinstance(cell, str) and cell.lower().endswith(str(value).lower())
    if operator == FilterOperator.is_empty:
        return _is_empty(cell)
    if operator == FilterOperator.is_not_empty:
        return not _is_empty(cell)
    if operator == FilterOperator.is_in:
        return isinstance(value, list) and cell in value
    if operator == FilterOperator.is_not_in:
        return not isinstance(value, list) or cell not in value
    return _compare(cell, value, operator)


def _sort_key(value: Any):
    # None last (ascending); numbers before strings; anything else by its JSON text
    if value is None:
        return (2, 0, "")
    if isinstance(value, (bool, int, float)):
        return (0, value, "")
    if isinstance(value, str):
        return (1, 0, value.lower())
    return (1, 0, json.dumps(value, sort_keys=True, default=str))


def apply_query(rows: Iterable[DataRow], query: Optional[RowQueryOptions]) -> QueryResult[DataRow]:
    query = query or RowQueryOptions()
    items: List[DataRow] = list(rows)

    for row_filter in query.filters or []:
        items = [row for row in items if matches(row.cells.get(row_filter.column_id), row_filter)]

    # Stable sorts applied last-key-first give multi-key ordering
    for sort in reversed(query.sorts or []):
        items.sort(
            key=lambda row, column_id=sort.column_id: _sort_key(row.cells.get(column_id)),
            reverse=sort.direction == SortDirection.desc,
        )

    total = len(items)
    offset = decode_cursor(query.cursor) if query.cursor else (query.offset or 0)
    limit = query.limit or DEFAULT_PAGE_LIMIT
    page = items[offset : offset + limit]
    has_more = offset + limit < total

    return QueryResult(
        items=page,
        total=total,
        has_more=has_more,
        cursor=encode_cursor(offset + limit) if has_more else None,
    )
