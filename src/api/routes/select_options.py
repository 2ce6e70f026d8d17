from typing import List
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from src.api.error import unwrap
from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.data_tables import (
    SelectOptionResponse,
    SelectOptionsUseCase,
    SuccessResponse,
)
from src.depends import get_ownership_verifier, get_unit_of_work
from src.domain.data_table_inputs import SelectOptionFields, UpdateSelectOptionInput

router = APIRouter(tags=["Select Options"])


@router.get("/columns/{column_id}/options", response_model=List[SelectOptionResponse])
async def list_select_options(
    column_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await SelectOptionsUseCase(uow, verifier).list(column_id))


@router.post(
    "/columns/{column_id}/options",
    status_code=status.HTTP_201_CREATED,
    response_model=SelectOptionResponse,
)
async def create_select_option(
    column_id: UUID,
    request: SelectOptionFields,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    """
    Create Select Option

    Raises:
        - 400 Bad Request: column is not a select or multi_select column
        - 404 Not Found: column not in this workspace
    """
    return unwrap(await SelectOptionsUseCase(uow, verifier).create(column_id, request))


@router.put("/columns/{column_id}/options/reorder", response_model=SuccessResponse)
async def reorder_select_options(
    column_id: UUID,
    option_ids: List[UUID] = Body(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await SelectOptionsUseCase(uow, verifier).reorder(column_id, option_ids))


@router.patch("/options/{option_id}", response_model=SelectOptionResponse)
async def update_select_option(
    option_id: UUID,
    request: UpdateSelectOptionInput,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await SelectOptionsUseCase(uow, verifier).update(option_id, request))


@router.delete("/options/{option_id}", response_model=SuccessResponse)
async def delete_select_option(
    option_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await SelectOptionsUseCase(uow, verifier).delete(option_id))
