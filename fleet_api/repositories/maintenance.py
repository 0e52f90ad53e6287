"""
Maintenance record repository.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from fleet_api.exceptions import InvalidRecordError, RecordNotFoundError
from fleet_api.models.maintenance import MaintenanceRecord
from fleet_api.models.vehicle import Vehicle
from fleet_api.repositories.base import CrudRepository

RECENT_LIMIT = 100


async def ensure_vehicle_exists(repository: CrudRepository, vehicle_id: int) -> None:
    result = await repository.session.execute(select(Vehicle.id).where(Vehicle.id == vehicle_id))
    if result.first() is None:
        raise InvalidRecordError(f"Vehicle {vehicle_id} does not exist")


class MaintenanceRepository(CrudRepository[MaintenanceRecord]):
    model = MaintenanceRecord
    record_name = "Maintenance record"
    server_defaults = ("created_date",)

    async def list_recent(self, limit: int = RECENT_LIMIT) -> List[MaintenanceRecord]:
        """Most recent records by service date."""
        result = await self.session.execute(
            select(MaintenanceRecord)
            .order_by(MaintenanceRecord.service_date.desc(), MaintenanceRecord.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def list_for_vehicle(self, vehicle_id: int) -> List[MaintenanceRecord]:
        result = await self.session.execute(
            select(MaintenanceRecord)
            .where(MaintenanceRecord.vehicle_id == vehicle_id)
            .order_by(MaintenanceRecord.service_date.desc(), MaintenanceRecord.id.desc())
        )
        return list(result.scalars().all())

    async def get_with_vehicle(self, record_id: int) -> MaintenanceRecord:
        """Get a record with its vehicle loaded."""
        result = await self.session.execute(
            select(MaintenanceRecord)
            .options(selectinload(MaintenanceRecord.vehicle))
            .where(MaintenanceRecord.id == record_id)
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise RecordNotFoundError(self.record_name, record_id)
        return record

    async def validate(self, values: Dict[str, Any], record_id: Optional[int] = None) -> None:
        await ensure_vehicle_exists(self, values["vehicle_id"])
