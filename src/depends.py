from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import unwrap
from src.app.services.identity_resolver import IdentityResolver, IdentitySettings
from src.app.services.ownership_verifier import OwnershipVerifier
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.workspace_context import WorkspaceContext

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

identity_settings = IdentitySettings.from_config(ApplicationConfig)


async def create_schema():
    # Registers every table on SQLModel.metadata
    import src.domain.entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_identity_settings() -> IdentitySettings:
    return identity_settings


async def get_workspace_context(
    authorization: Optional[str] = Header(None),
    x_workspace_id: Optional[str] = Header(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings: IdentitySettings = Depends(get_identity_settings),
) -> WorkspaceContext:
    """
    Resolve the tenant and workspace of the request from its API key.

    Raises:
        ClientError: 401 for a missing, malformed or unknown key;
            404 when X-Workspace-Id is not one of the tenant's workspaces
    """
    result = await IdentityResolver(uow, settings).resolve(authorization, x_workspace_id)
    return unwrap(result)


async def get_ownership_verifier(
    uow: UnitOfWork = Depends(get_unit_of_work),
    context: WorkspaceContext = Depends(get_workspace_context),
) -> OwnershipVerifier:
    return OwnershipVerifier(uow, context)
