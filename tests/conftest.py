"""Pytest configuration and fixtures."""

import itertools
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from fleet_api.database import (
    build_engine,
    build_session_maker,
    create_tables,
    get_db,
    get_engine,
)
from fleet_api.main import app

# Shared in-memory database, one per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"
API = "/api"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create test database engine."""
    engine = build_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return build_session_maker(db_engine)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_engine, session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client. Each request gets its own session."""

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_engine] = lambda: db_engine

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def days_ago(days: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=days)


@pytest.fixture
def vehicle_payload():
    """Build a valid vehicle request body."""

    def _make(**overrides):
        payload = {
            "vin": "12345678901234567",
            "make": "Ford",
            "model": "F-150",
            "year": 2020,
            "mileage": 50000,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def maintenance_payload():
    """Build a valid maintenance record request body."""

    def _make(vehicle_id: int, /, **overrides):
        payload = {
            "vehicle_id": vehicle_id,
            "service_date": days_ago(10).isoformat(),
            "service_type": "Oil Change",
            "performed_by": "Jane Mechanic",
            "cost": 89.99,
            "mileage_at_service": 49500,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def alert_payload():
    """Build a valid service alert request body."""

    def _make(vehicle_id: int, **overrides):
        payload = {
            "vehicle_id": vehicle_id,
            "alert_type": "Inspection Due",
            "priority": "High",
            "description": "Annual inspection due next month",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def create_vehicle(client, vehicle_payload):
    """POST a vehicle with a fresh VIN and return the response body."""
    counter = itertools.count(1)

    async def _create(**overrides):
        overrides.setdefault("vin", f"TESTVIN{next(counter):010d}")
        response = await client.post(f"{API}/vehicles", json=vehicle_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_maintenance(client, maintenance_payload):
    """POST a maintenance record and return the response body."""

    async def _create(vehicle_id: int, **overrides):
        response = await client.post(
            f"{API}/maintenance", json=maintenance_payload(vehicle_id, **overrides)
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_alert(client, alert_payload):
    """POST a service alert and return the response body."""

    async def _create(vehicle_id: int, **overrides):
        response = await client.post(f"{API}/alerts", json=alert_payload(vehicle_id, **overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _create
