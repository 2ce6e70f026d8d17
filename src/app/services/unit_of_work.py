from abc import ABC, abstractmethod

from src.app.repositories.data_table_adapter import IDataTableAdapter
from src.app.repositories.tenant_repository import ITenantRepository
from src.app.repositories.workspace_repository import IWorkspaceRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tenants: ITenantRepository
    workspaces: IWorkspaceRepository
    data_tables: IDataTableAdapter

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
