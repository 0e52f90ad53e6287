"""Seed data generator tests."""

import random

import pytest
from faker import Faker
from sqlalchemy import select

from fleet_api.models import MaintenanceRecord, ServiceAlert, Vehicle
from fleet_api.seed import build_vehicles, generate_vin, seed_database


def test_generate_vin_avoids_taken_and_confusable_letters():
    taken = set()
    vins = [generate_vin(taken) for _ in range(200)]

    assert len(set(vins)) == 200
    assert all(len(vin) == 17 for vin in vins)
    assert not any(ch in vin for vin in vins for ch in "IOQ")


@pytest.mark.asyncio
async def test_seed_populates_consistent_data(db_session):
    result = await seed_database(db_session, vehicles=20, maintenance=60, alerts=40, seed=7)

    assert (result.vehicles, result.maintenance_records, result.service_alerts) == (20, 60, 40)

    vehicles = (await db_session.execute(select(Vehicle))).scalars().all()
    vehicle_ids = {v.id for v in vehicles}
    assert len(vehicles) == 20
    assert len({v.vin for v in vehicles}) == 20
    assert all(len(v.vin) == 17 for v in vehicles)
    assert all(2015 <= v.year <= 2024 for v in vehicles)

    records = (await db_session.execute(select(MaintenanceRecord))).scalars().all()
    assert len(records) == 60
    assert all(r.vehicle_id in vehicle_ids for r in records)
    assert all(50 <= r.cost <= 2500 for r in records)

    alerts = (await db_session.execute(select(ServiceAlert))).scalars().all()
    assert len(alerts) == 40
    for alert in alerts:
        assert alert.vehicle_id in vehicle_ids
        if alert.is_resolved:
            assert alert.resolved_date is not None
            assert alert.resolved_by
        else:
            assert alert.resolved_date is None
            assert alert.resolved_by is None
            assert alert.resolution_notes is None


@pytest.mark.asyncio
async def test_seed_skips_populated_database(db_session):
    await seed_database(db_session, vehicles=3, maintenance=5, alerts=2, seed=1)

    result = await seed_database(db_session, vehicles=3, maintenance=5, alerts=2, seed=1)

    assert result.vehicles == 0
    vehicles = (await db_session.execute(select(Vehicle))).scalars().all()
    assert len(vehicles) == 3


@pytest.mark.asyncio
async def test_seeded_data_is_served(client, session_maker):
    async with session_maker() as session:
        await seed_database(session, vehicles=5, maintenance=10, alerts=5, seed=3)

    stats = (await client.get("/api/dashboard/stats")).json()

    assert stats["total_vehicles"] == 5
    assert len(stats["recent_maintenance"]) == 5


def test_same_seed_builds_same_vehicles():
    first = build_vehicles(Faker(), random.Random(5), 10)
    second = build_vehicles(Faker(), random.Random(5), 10)

    assert [v.vin for v in first] == [v.vin for v in second]


@pytest.mark.asyncio
async def test_seed_leaves_global_random_untouched(db_session):
    random.seed(1234)
    expected = [random.random() for _ in range(3)]

    random.seed(1234)
    await seed_database(db_session, vehicles=5, maintenance=5, alerts=5, seed=99)

    assert [random.random() for _ in range(3)] == expected
