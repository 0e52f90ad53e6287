"""
Generate demo fleet data for an empty database.

Creates vehicles, maintenance records for those vehicles over the past two
years and service alerts, using the Faker library. Run directly with
``python -m fleet_api.seed``.
"""
import asyncio
import logging
import random
from dataclasses import dataclass
from datetime import timedelta, timezone
from decimal import Decimal
from typing import List, Optional, Set

from faker import Faker
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fleet_api.models import (
    AlertPriority,
    MaintenanceRecord,
    ServiceAlert,
    Vehicle,
    VehicleStatus,
)
from fleet_api.models.base import utcnow

logger = logging.getLogger(__name__)

MAKES_MODELS = {
    "Ford": ["F-150", "Transit", "Explorer", "Escape", "Ranger"],
    "Chevrolet": ["Silverado", "Express", "Tahoe", "Colorado", "Equinox"],
    "Toyota": ["Camry", "Tacoma", "RAV4", "Tundra", "Prius"],
    "Honda": ["Accord", "Civic", "CR-V", "Pilot", "Odyssey"],
    "Ram": ["1500", "2500", "ProMaster"],
    "Nissan": ["Altima", "Frontier", "Rogue", "NV200"],
}

DEPARTMENTS = ["Transportation", "Maintenance", "Admin", "Field Operations"]

SERVICE_TYPES = [
    "Oil Change",
    "Tire Rotation",
    "Brake Service",
    "Engine Repair",
    "Transmission Service",
    "Inspection",
    "Battery Replacement",
    "Air Filter Replacement",
]

ALERT_TYPES = [
    "Inspection Due",
    "Maintenance Overdue",
    "Registration Expiring",
    "Safety Recall",
    "Emissions Test Due",
]

# VINs never use I, O or Q
VIN_CHARS = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"


@dataclass
class SeedResult:
    vehicles: int = 0
    maintenance_records: int = 0
    service_alerts: int = 0


def generate_vin(taken: Set[str], rng: Optional[random.Random] = None) -> str:
    """Generate a 17-character VIN not already in ``taken``."""
    choices = (rng or random).choices
    while True:
        vin = "".join(choices(VIN_CHARS, k=17))
        if vin not in taken:
            taken.add(vin)
            return vin


def _aware(value):
    return value.replace(tzinfo=timezone.utc)


def build_vehicles(fake: Faker, rng: random.Random, count: int) -> List[Vehicle]:
    vehicles = []
    taken: Set[str] = set()
    for _ in range(count):
        make = rng.choice(list(MAKES_MODELS))
        vehicles.append(
            Vehicle(
                vin=generate_vin(taken, rng),
                make=make,
                model=rng.choice(MAKES_MODELS[make]),
                year=rng.randint(2015, 2024),
                mileage=rng.randint(1000, 150000),
                status=rng.choice(list(VehicleStatus)),
                department=rng.choice(DEPARTMENTS),
                date_acquired=_aware(fake.date_time_between(start_date="-5y", end_date="now")),
                last_service_date=_aware(fake.date_time_between(start_date="-90d", end_date="now")),
            )
        )
    return vehicles


def build_maintenance(
    fake: Faker, rng: random.Random, vehicles: List[Vehicle], count: int
) -> List[MaintenanceRecord]:
    records = []
    for _ in range(count):
        service_date = _aware(fake.date_time_between(start_date="-2y", end_date="now"))
        records.append(
            MaintenanceRecord(
                vehicle_id=rng.choice(vehicles).id,
                service_date=service_date,
                service_type=rng.choice(SERVICE_TYPES),
                performed_by=fake.name()[:50],
                cost=Decimal(f"{rng.uniform(50, 2500):.2f}"),
                mileage_at_service=rng.randint(10000, 150000),
                notes=fake.sentence()[:500],
                parts_replaced=fake.word().title(),
                is_warranty_covered=rng.random() < 0.2,
                created_date=service_date,
            )
        )
    return records


def build_alerts(
    fake: Faker, rng: random.Random, vehicles: List[Vehicle], count: int
) -> List[ServiceAlert]:
    alerts = []
    now = utcnow()
    for _ in range(count):
        is_resolved = rng.random() < 0.3
        alert = ServiceAlert(
            vehicle_id=rng.choice(vehicles).id,
            alert_type=rng.choice(ALERT_TYPES),
            priority=rng.choice(list(AlertPriority)),
            description=fake.sentence()[:250],
            created_date=now - timedelta(days=rng.randint(0, 60)),
            due_date=now + timedelta(days=rng.randint(1, 365)),
            is_resolved=is_resolved,
        )
        # Resolution details only exist on resolved alerts
        if is_resolved:
            alert.resolved_date = now - timedelta(days=rng.randint(0, 30))
            alert.resolved_by = fake.name()[:100]
            alert.resolution_notes = fake.sentence()[:250]
        alerts.append(alert)
    return alerts


async def seed_database(
    session: AsyncSession,
    vehicles: int = 50,
    maintenance: int = 200,
    alerts: int = 75,
    seed: Optional[int] = None,
) -> SeedResult:
    """
    Populate an empty database with demo data.

    Does nothing if any vehicle already exists.
    """
    existing = (await session.execute(select(func.count()).select_from(Vehicle))).scalar_one()
    if existing:
        logger.info("Database already has %s vehicles, skipping seed", existing)
        return SeedResult()

    fake = Faker("en_US")
    rng = random.Random(seed)
    if seed is not None:
        fake.seed_instance(seed)

    vehicle_rows = build_vehicles(fake, rng, vehicles)
    session.add_all(vehicle_rows)
    await session.flush()

    result = SeedResult(vehicles=len(vehicle_rows))
    if vehicle_rows:
        maintenance_rows = build_maintenance(fake, rng, vehicle_rows, maintenance)
        alert_rows = build_alerts(fake, rng, vehicle_rows, alerts)
        session.add_all(maintenance_rows)
        session.add_all(alert_rows)
        result.maintenance_records = len(maintenance_rows)
        result.service_alerts = len(alert_rows)

    await session.commit()
    logger.info(
        "Seeded %s vehicles, %s maintenance records, %s service alerts",
        result.vehicles,
        result.maintenance_records,
        result.service_alerts,
    )
    return result


async def main():
    from fleet_api import database
    from fleet_api.config import get_settings
    from fleet_api.logging_config import configure_logging

    settings = get_settings()
    configure_logging(settings)
    await database.init_db(settings)
    try:
        async with database.async_session_maker() as session:
            await seed_database(
                session,
                vehicles=settings.seed_vehicle_count,
                maintenance=settings.seed_maintenance_count,
                alerts=settings.seed_alert_count,
            )
    finally:
        await database.close_db()


if __name__ == "__main__":
    asyncio.run(main())
