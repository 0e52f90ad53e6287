"""
Pydantic schemas for the dashboard snapshot.
"""
from decimal import Decimal
from pydantic import BaseModel, ConfigDict
from typing import List

from fleet_api.schemas.common import Money, UtcDateTime


class RecentMaintenance(BaseModel):
    """Summary of a recent maintenance record."""
    id: int
    vehicle_id: int
    service_type: str
    service_date: UtcDateTime
    cost: Money

    model_config = ConfigDict(from_attributes=True)


class DashboardStats(BaseModel):
    """Dashboard summary statistics."""
    total_vehicles: int = 0
    active_vehicles: int = 0
    vehicles_in_maintenance: int = 0
    unresolved_alerts: int = 0
    critical_alerts: int = 0
    recent_maintenance: List[RecentMaintenance] = []
    annual_maintenance_cost: Money = Decimal("0.00")
