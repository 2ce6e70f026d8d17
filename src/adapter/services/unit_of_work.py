from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.data_table_adapter import SqlModelDataTableAdapter
from src.adapter.repositories.tenant_repository import TenantRepository
from src.adapter.repositories.workspace_repository import WorkspaceRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.workspaces = WorkspaceRepository(self.session)
        self.data_tables = SqlModelDataTableAdapter(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
