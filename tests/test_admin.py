"""Database diagnostics tests."""

import pytest
import pytest_asyncio
from httpx import AsyncClient

from fleet_api.database import build_engine, get_engine
from fleet_api.exceptions import StorageUnavailableError
from fleet_api.main import app
from fleet_api.services.diagnostics import run_database_diagnostics

API = "/api"


@pytest_asyncio.fixture
async def unreachable_engine():
    """Engine pointing at a database file that cannot be opened."""
    engine = build_engine("sqlite+aiosqlite:////nonexistent-directory/fleet.db")
    yield engine
    await engine.dispose()


class TestDatabaseHealth:
    """GET /admin/database-health"""

    @pytest.mark.asyncio
    async def test_returns_named_query_results(self, client: AsyncClient):
        response = await client.get(f"{API}/admin/database-health")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"CurrentlyExecuting", "DatabaseSize", "ActiveConnections"}
        for rows in data.values():
            assert isinstance(rows, list)
        assert "size_mb" in data["DatabaseSize"][0]

    @pytest.mark.asyncio
    async def test_unreachable_database_is_structured_error(
        self, client: AsyncClient, unreachable_engine
    ):
        app.dependency_overrides[get_engine] = lambda: unreachable_engine

        response = await client.get(f"{API}/admin/database-health")

        assert response.status_code == 500
        data = response.json()
        assert data["message"] == "Error retrieving database diagnostics"
        assert data["error"]


class TestDiagnosticsService:
    @pytest.mark.asyncio
    async def test_raises_storage_unavailable(self, unreachable_engine):
        with pytest.raises(StorageUnavailableError) as exc_info:
            await run_database_diagnostics(unreachable_engine)

        assert exc_info.value.status_code == 500
