"""
Dashboard aggregation over the whole fleet.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fleet_api.models.alert import AlertPriority, ServiceAlert
from fleet_api.models.base import utcnow
from fleet_api.models.maintenance import MaintenanceRecord
from fleet_api.models.vehicle import Vehicle, VehicleStatus
from fleet_api.schemas.dashboard import DashboardStats, RecentMaintenance

logger = logging.getLogger(__name__)

RECENT_MAINTENANCE_COUNT = 5
CENTS = Decimal("0.01")


def months_ago(moment: datetime, months: int) -> datetime:
    """Shift ``moment`` back by whole calendar months, clamping the day."""
    total = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    day = moment.day
    while True:
        try:
            return moment.replace(year=year, month=month, day=day)
        except ValueError:
            day -= 1


async def _count(session: AsyncSession, model, *criteria) -> int:
    query = select(func.count()).select_from(model)
    if criteria:
        query = query.where(*criteria)
    return (await session.execute(query)).scalar_one()


async def get_dashboard_stats(session: AsyncSession, now: Optional[datetime] = None) -> DashboardStats:
    """
    Compute the dashboard snapshot.

    Args:
        session: Database session
        now: Evaluation instant for the trailing 12-month cost window.
            Defaults to the current UTC time.

    Returns:
        DashboardStats with vehicle and alert counts, the five most recent
        maintenance records and the maintenance spend of the last 12 months
    """
    logger.info("Fetching dashboard statistics")
    now = now or utcnow()

    total_vehicles = await _count(session, Vehicle)
    active_vehicles = await _count(session, Vehicle, Vehicle.status == VehicleStatus.ACTIVE)
    vehicles_in_maintenance = await _count(
        session, Vehicle, Vehicle.status == VehicleStatus.MAINTENANCE
    )
    unresolved_alerts = await _count(session, ServiceAlert, ServiceAlert.is_resolved.is_(False))
    critical_alerts = await _count(
        session,
        ServiceAlert,
        ServiceAlert.is_resolved.is_(False),
        ServiceAlert.priority == AlertPriority.CRITICAL,
    )

    result = await session.execute(
        select(MaintenanceRecord)
        .order_by(MaintenanceRecord.service_date.desc(), MaintenanceRecord.id.desc())
        .limit(RECENT_MAINTENANCE_COUNT)
    )
    recent_maintenance = [
        RecentMaintenance.model_validate(record) for record in result.scalars().all()
    ]

    cost_sum = (
        await session.execute(
            select(func.coalesce(func.sum(MaintenanceRecord.cost), 0)).where(
                MaintenanceRecord.service_date >= months_ago(now, 12)
            )
        )
    ).scalar_one()
    annual_maintenance_cost = Decimal(str(cost_sum)).quantize(CENTS)

    stats = DashboardStats(
        total_vehicles=total_vehicles,
        active_vehicles=active_vehicles,
        vehicles_in_maintenance=vehicles_in_maintenance,
        unresolved_alerts=unresolved_alerts,
        critical_alerts=critical_alerts,
        recent_maintenance=recent_maintenance,
        annual_maintenance_cost=annual_maintenance_cost,
    )
    logger.info("Dashboard stats retrieved successfully")
    return stats
