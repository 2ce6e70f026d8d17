"""
Workspace Use Cases
"""

from .create_workspace_use_case import CreateWorkspaceUseCase
from .delete_workspace_use_case import DeleteWorkspaceResponse, DeleteWorkspaceUseCase
from .dtos import CreateWorkspaceCommand, UpdateWorkspaceCommand, WorkspaceResponse
from .get_workspace_use_case import GetWorkspaceUseCase
from .list_workspaces_use_case import ListWorkspacesUseCase
from .update_workspace_use_case import UpdateWorkspaceUseCase

__all__ = [
    "ListWorkspacesUseCase",
    "CreateWorkspaceUseCase",
    "GetWorkspaceUseCase",
    "UpdateWorkspaceUseCase",
    "DeleteWorkspaceUseCase",
    "CreateWorkspaceCommand",
    "UpdateWorkspaceCommand",
    "WorkspaceResponse",
    "DeleteWorkspaceResponse",
]
