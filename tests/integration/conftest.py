import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from tests.integration.settings import ADMIN_API_KEY, API_PREFIX
from src.depends import get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

import src.domain.entities  # noqa: F401  registers tables on SQLModel.metadata


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def app(db_session, monkeypatch):
    from src.api.app import create_app
    from config import ApplicationConfig

    monkeypatch.setattr(ApplicationConfig, "ADMIN_API_KEY", ADMIN_API_KEY)
    monkeypatch.setattr(ApplicationConfig, "API_PREFIX", API_PREFIX)

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def client(app):
    from httpx import ASGITransport

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_API_KEY}"}


@pytest.fixture
def create_tenant(client: AsyncClient, admin_headers):
    """Provision a tenant through the admin API; returns (tenant, auth headers)"""

    async def _create(name: str = "Acme", **quotas):
        response = await client.post(
            f"{API_PREFIX}/admin/tenants",
            json={"name": name, **quotas},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return body["tenant"], {"Authorization": f"Bearer {body['apiKey']}"}

    return _create
