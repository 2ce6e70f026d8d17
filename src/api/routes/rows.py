import json
from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status
from pydantic import ValidationError

from src.api.error import ClientError, unwrap
from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.data_tables import (
    RowPageResponse,
    RowResponse,
    RowsUseCase,
    SuccessResponse,
)
from src.depends import get_ownership_verifier, get_unit_of_work
from src.domain.data_table_inputs import (
    MAX_BULK_ROW_IDS,
    MAX_PAGE_LIMIT,
    CreateRowInput,
    RowFields,
    RowQueryOptions,
)
from src.libs.result import Error
from src.libs.validation import validation_error_details

router = APIRouter(tags=["Rows"])


def _parse_json_param(name: str, raw: Optional[str]) -> Optional[Any]:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        raise ClientError(
            Error("VALIDATION_ERROR", f"Query parameter '{name}' must be a JSON array"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def get_row_query_options(
    limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_LIMIT),
    offset: Optional[int] = Query(None, ge=0),
    cursor: Optional[str] = Query(None),
    include_archived: bool = Query(False, alias="includeArchived"),
    parent_row_id: Optional[UUID] = Query(None, alias="parentRowId"),
    include_sub_items: bool = Query(False, alias="includeSubItems"),
    filters: Optional[str] = Query(None, description="JSON array of {columnId, operator, value}"),
    sorts: Optional[str] = Query(None, description="JSON array of {columnId, direction}"),
) -> RowQueryOptions:
    """Row query options from the query string; filters and sorts arrive as JSON"""
    raw = {
        "limit": limit,
        "offset": offset,
        "cursor": cursor,
        "includeArchived": include_archived,
        "parentRowId": parent_row_id,
        "includeSubItems": include_sub_items,
        "filters": _parse_json_param("filters", filters),
        "sorts": _parse_json_param("sorts", sorts),
    }
    try:
        return RowQueryOptions.model_validate(raw)
    except ValidationError as e:
        raise ClientError(
            Error(
                "VALIDATION_ERROR",
                "Invalid row query",
                validation_error_details(e.errors(include_url=False)),
            ),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


@router.get("/tables/{table_id}/rows", response_model=RowPageResponse)
async def query_rows(
    table_id: UUID,
    options: RowQueryOptions = Depends(get_row_query_options),
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """
    Query Rows

    Returns {items, total, hasMore, cursor}. Without parentRowId or
    includeSubItems only top-level rows are returned.
    """
    return unwrap(await RowsUseCase(uow, verifier).query(table_id, options))


@router.post(
    "/tables/{table_id}/rows",
    status_code=status.HTTP_201_CREATED,
    response_model=RowResponse,
)
async def create_row(
    table_id: UUID,
    request: RowFields,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """
    Create Row

    Raises:
        - 400 Bad Request: parent row of another table
        - 403 Forbidden: QUOTA_EXCEEDED
        - 404 Not Found: table or parent row not in this workspace
    """
    return unwrap(await RowsUseCase(uow, verifier).create(table_id, request))


@router.post(
    "/tables/{table_id}/rows/bulk",
    status_code=status.HTTP_201_CREATED,
    response_model=List[RowResponse],
)
async def bulk_create_rows(
    table_id: UUID,
    request: List[RowFields] = Body(..., min_length=1, max_length=MAX_BULK_ROW_IDS),
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    inputs = [CreateRowInput(table_id=table_id, **fields.model_dump()) for fields in request]
    return unwrap(await RowsUseCase(uow, verifier).bulk_create(inputs))


# Bulk routes are declared before /rows/{row_id} so "bulk" is not taken as an id


@router.delete("/rows/bulk", response_model=SuccessResponse)
async def bulk_delete_rows(
    row_ids: List[UUID] = Body(..., min_length=1, max_length=MAX_BULK_ROW_IDS),
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """
    Bulk Delete Rows

    All-or-nothing: every id is verified first; one id outside the workspace
    fails the request with 404 and nothing is deleted.
    """
    return unwrap(await RowsUseCase(uow, verifier).bulk_delete(row_ids))


@router.post("/rows/bulk/archive", response_model=SuccessResponse)
async def bulk_archive_rows(
    row_ids: List[UUID] = Body(..., min_length=1, max_length=MAX_BULK_ROW_IDS),
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await RowsUseCase(uow, verifier).bulk_archive(row_ids))


@router.get("/rows/{row_id}", response_model=RowResponse)
async def get_row(
    row_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await RowsUseCase(uow, verifier).get(row_id))


@router.patch("/rows/{row_id}", response_model=RowResponse)
async def update_row(
    row_id: UUID,
    cells: Dict[str, Any] = Body(...),
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """Merge the body (cell values keyed by column id) into the row"""
    return unwrap(await RowsUseCase(uow, verifier).update(row_id, cells))


@router.delete("/rows/{row_id}", response_model=SuccessResponse)
async def delete_row(
    row_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await RowsUseCase(uow, verifier).delete(row_id))


@router.post("/rows/{row_id}/archive", response_model=SuccessResponse)
async def archive_row(
    row_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await RowsUseCase(uow, verifier).archive(row_id))


@router.post("/rows/{row_id}/unarchive", response_model=SuccessResponse)
async def unarchive_row(
    row_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await RowsUseCase(uow, verifier).unarchive(row_id))
