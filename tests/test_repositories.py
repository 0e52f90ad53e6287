"""Repository tests run directly against sessions."""

from datetime import datetime, timezone

import pytest

from fleet_api.exceptions import (
    IdMismatchError,
    InvalidRecordError,
    RecordNotFoundError,
)
from fleet_api.models import VehicleStatus
from fleet_api.repositories import MaintenanceRepository, VehicleRepository
from fleet_api.schemas import MaintenanceRecordCreate, VehicleCreate, VehicleUpdate


def vehicle_create(vin="1HGBH41JXMN109186", **overrides) -> VehicleCreate:
    fields = dict(vin=vin, make="Honda", model="Accord", year=2021, mileage=25000)
    fields.update(overrides)
    return VehicleCreate(**fields)


@pytest.mark.asyncio
async def test_create_fills_defaults(db_session):
    repository = VehicleRepository(db_session)

    vehicle = await repository.create(vehicle_create())

    assert vehicle.id > 0
    assert vehicle.status == VehicleStatus.ACTIVE
    assert vehicle.date_acquired is not None


@pytest.mark.asyncio
async def test_duplicate_vin_raises_invalid_record(db_session):
    repository = VehicleRepository(db_session)
    await repository.create(vehicle_create())

    with pytest.raises(InvalidRecordError):
        await repository.create(vehicle_create(make="Acura"))


@pytest.mark.asyncio
async def test_update_id_mismatch(db_session):
    repository = VehicleRepository(db_session)
    vehicle = await repository.create(vehicle_create())

    with pytest.raises(IdMismatchError):
        await repository.update(
            vehicle.id, VehicleUpdate(id=vehicle.id + 1, **vehicle_create().model_dump())
        )


@pytest.mark.asyncio
async def test_update_after_concurrent_delete_is_not_found(session_maker):
    async with session_maker() as session:
        vehicle = await VehicleRepository(session).create(vehicle_create())
        vehicle_id = vehicle.id

    # Another request removes the vehicle before the replace lands
    async with session_maker() as session:
        await VehicleRepository(session).delete(vehicle_id)

    async with session_maker() as session:
        with pytest.raises(RecordNotFoundError):
            await VehicleRepository(session).update(
                vehicle_id,
                VehicleUpdate(id=vehicle_id, **vehicle_create(mileage=30000).model_dump()),
            )


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["get", "delete"])
async def test_missing_id_is_not_found(db_session, operation):
    repository = VehicleRepository(db_session)

    with pytest.raises(RecordNotFoundError):
        await getattr(repository, operation)(12345)


@pytest.mark.asyncio
async def test_list_for_vehicle_orders_by_service_date(db_session):
    vehicle = await VehicleRepository(db_session).create(vehicle_create())
    repository = MaintenanceRepository(db_session)
    for month in (3, 9, 6):
        await repository.create(
            MaintenanceRecordCreate(
                vehicle_id=vehicle.id,
                service_date=datetime(2024, month, 1, tzinfo=timezone.utc),
                service_type=f"Service {month}",
            )
        )

    records = await repository.list_for_vehicle(vehicle.id)

    assert [r.service_type for r in records] == ["Service 9", "Service 6", "Service 3"]


@pytest.mark.asyncio
async def test_maintenance_for_unknown_vehicle_rejected(db_session):
    repository = MaintenanceRepository(db_session)

    with pytest.raises(InvalidRecordError):
        await repository.create(
            MaintenanceRecordCreate(
                vehicle_id=404,
                service_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
                service_type="Oil Change",
            )
        )
