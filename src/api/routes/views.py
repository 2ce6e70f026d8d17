from typing import List
from uuid import UUID

from fastapi import APIRouter, Body, Depends, status

from src.api.error import unwrap
from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.data_tables import SuccessResponse, ViewResponse, ViewsUseCase
from src.depends import get_ownership_verifier, get_unit_of_work
from src.domain.data_table_inputs import UpdateViewInput, ViewFields

router = APIRouter(tags=["Views"])


@router.get("/tables/{table_id}/views", response_model=List[ViewResponse])
async def list_views(
    table_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ViewsUseCase(uow, verifier).list(table_id))


@router.post(
    "/tables/{table_id}/views",
    status_code=status.HTTP_201_CREATED,
    response_model=ViewResponse,
)
async def create_view(
    table_id: UUID,
    request: ViewFields,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ViewsUseCase(uow, verifier).create(table_id, request))


@router.put("/tables/{table_id}/views/reorder", response_model=SuccessResponse)
async def reorder_views(
    table_id: UUID,
    view_ids: List[UUID] = Body(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ViewsUseCase(uow, verifier).reorder(table_id, view_ids))


@router.get("/views/{view_id}", response_model=ViewResponse)
async def get_view(
    view_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ViewsUseCase(uow, verifier).get(view_id))


@router.patch("/views/{view_id}", response_model=ViewResponse)
async def update_view(
    view_id: UUID,
    request: UpdateViewInput,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ViewsUseCase(uow, verifier).update(view_id, request))


@router.delete("/views/{view_id}", response_model=SuccessResponse)
async def delete_view(
    view_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    verifier: OwnershipVerifier = Depends(get_ownership_verifier),
):
    return unwrap(await ViewsUseCase(uow, verifier).delete(view_id))
