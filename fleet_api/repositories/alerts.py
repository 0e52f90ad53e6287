"""
Service alert repository.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from fleet_api.exceptions import InvalidRecordError
from fleet_api.models.alert import ServiceAlert
from fleet_api.models.base import utcnow
from fleet_api.repositories.base import CrudRepository
from fleet_api.repositories.maintenance import ensure_vehicle_exists

logger = logging.getLogger(__name__)


class AlertRepository(CrudRepository[ServiceAlert]):
    model = ServiceAlert
    record_name = "Service alert"
    server_defaults = ("created_date",)

    async def list(self, resolved: Optional[bool] = None) -> List[ServiceAlert]:
        query = select(ServiceAlert).order_by(ServiceAlert.id)
        if resolved is not None:
            query = query.where(ServiceAlert.is_resolved == resolved)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_for_vehicle(self, vehicle_id: int) -> List[ServiceAlert]:
        result = await self.session.execute(
            select(ServiceAlert)
            .where(ServiceAlert.vehicle_id == vehicle_id)
            .order_by(ServiceAlert.created_date.desc(), ServiceAlert.id.desc())
        )
        return list(result.scalars().all())

    async def resolve(
        self,
        record_id: int,
        resolved_by: Optional[str] = None,
        resolution_notes: Optional[str] = None,
    ) -> ServiceAlert:
        """Mark an open alert as resolved now."""
        alert = await self.get(record_id)
        if alert.is_resolved:
            raise InvalidRecordError(f"Service alert {record_id} is already resolved")

        alert.is_resolved = True
        alert.resolved_date = utcnow()
        alert.resolved_by = resolved_by
        alert.resolution_notes = resolution_notes

        await self.session.commit()
        await self.session.refresh(alert)
        logger.info("Service alert %s resolved by %s", record_id, resolved_by or "unknown")
        return alert

    async def validate(self, values: Dict[str, Any], record_id: Optional[int] = None) -> None:
        await ensure_vehicle_exists(self, values["vehicle_id"])
