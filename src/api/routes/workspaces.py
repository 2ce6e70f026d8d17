from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import unwrap
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext
from src.app.use_cases.workspaces import (
    CreateWorkspaceCommand,
    CreateWorkspaceUseCase,
    DeleteWorkspaceResponse,
    DeleteWorkspaceUseCase,
    GetWorkspaceUseCase,
    ListWorkspacesUseCase,
    UpdateWorkspaceCommand,
    UpdateWorkspaceUseCase,
    WorkspaceResponse,
)
from src.depends import get_unit_of_work, get_workspace_context

router = APIRouter(prefix="/workspaces", tags=["Workspaces"])


@router.get("", response_model=List[WorkspaceResponse])
async def list_workspaces(
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListWorkspacesUseCase(uow)
    return unwrap(await use_case.execute(context.tenant_id))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=WorkspaceResponse)
async def create_workspace(
    request: CreateWorkspaceCommand,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Workspace

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 409 Conflict: slug already used by this tenant
    """
    use_case = CreateWorkspaceUseCase(uow)
    return unwrap(await use_case.execute(context.tenant_id, request))


@router.get("/{workspace_id}", response_model=WorkspaceResponse)
async def get_workspace(
    workspace_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetWorkspaceUseCase(uow, context)
    return unwrap(await use_case.execute(workspace_id))


@router.patch("/{workspace_id}", response_model=WorkspaceResponse)
async def update_workspace(
    workspace_id: UUID,
    request: UpdateWorkspaceCommand,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Workspace

    Raises:
        - 400 Bad Request: BAD_REQUEST when no field is given
        - 404 Not Found: workspace absent or owned by another tenant
    """
    use_case = UpdateWorkspaceUseCase(uow, context)
    return unwrap(await use_case.execute(workspace_id, request))


@router.delete("/{workspace_id}", response_model=DeleteWorkspaceResponse)
async def delete_workspace(
    workspace_id: UUID,
    context: WorkspaceContext = Depends(get_workspace_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Workspace

    Deletes the workspace and all of its tables, rows and other data.
    """
    use_case = DeleteWorkspaceUseCase(uow, context)
    return unwrap(await use_case.execute(workspace_id))
