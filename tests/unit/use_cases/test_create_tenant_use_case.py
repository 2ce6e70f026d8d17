"""
Unit tests for CreateTenantUseCase
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.api_keys import hash_api_key
from src.app.use_cases.admin import CreateTenantUseCase
from src.app.use_cases.tenants import CreateTenantCommand


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.tenants = MagicMock()
    uow.tenants.get_by_api_key_hash = AsyncMock(return_value=None)
    uow.tenants.create = AsyncMock(side_effect=lambda tenant: tenant)
    return uow


@pytest.mark.asyncio
async def test_stores_only_the_digest(mock_uow):
    # Arrange
    use_case = CreateTenantUseCase(mock_uow, hash_salt="pepper", key_prefix="sk_test_")

    # Act
    result = await use_case.execute(CreateTenantCommand(name="Acme"))

    # Assert
    assert result.is_ok()
    response = result.value
    assert response.api_key.startswith("sk_test_")
    stored = mock_uow.tenants.create.call_args.args[0]
    assert stored.api_key_hash == hash_api_key(response.api_key, "pepper")
    assert response.api_key not in stored.api_key_hash
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_defaults_apply_when_quotas_are_omitted(mock_uow):
    use_case = CreateTenantUseCase(mock_uow, default_quota_rows=500, default_max_tables=4)

    defaulted = await use_case.execute(CreateTenantCommand(name="Acme"))
    explicit = await use_case.execute(CreateTenantCommand(name="Big", quota_rows=9, max_tables=2))

    assert (defaulted.value.tenant.quota_rows, defaulted.value.tenant.max_tables) == (500, 4)
    assert (explicit.value.tenant.quota_rows, explicit.value.tenant.max_tables) == (9, 2)
    assert defaulted.value.tenant.used_rows == 0


@pytest.mark.asyncio
async def test_digest_collision_regenerates_key(mock_uow):
    mock_uow.tenants.get_by_api_key_hash.side_effect = [object(), None]

    result = await CreateTenantUseCase(mock_uow).execute(CreateTenantCommand(name="Acme"))

    assert result.is_ok()
    assert mock_uow.tenants.get_by_api_key_hash.await_count == 2
