"""
Pydantic schemas for request/response validation.
"""
from fleet_api.schemas.vehicle import VehicleBase, VehicleCreate, VehicleUpdate, Vehicle
from fleet_api.schemas.maintenance import (
    MaintenanceRecordBase, MaintenanceRecordCreate, MaintenanceRecordUpdate,
    MaintenanceRecord, MaintenanceRecordDetail,
)
from fleet_api.schemas.alert import (
    ServiceAlertBase, ServiceAlertCreate, ServiceAlertUpdate, ServiceAlertResolve, ServiceAlert,
)
from fleet_api.schemas.dashboard import RecentMaintenance, DashboardStats

__all__ = [
    "VehicleBase", "VehicleCreate", "VehicleUpdate", "Vehicle",
    "MaintenanceRecordBase", "MaintenanceRecordCreate", "MaintenanceRecordUpdate",
    "MaintenanceRecord", "MaintenanceRecordDetail",
    "ServiceAlertBase", "ServiceAlertCreate", "ServiceAlertUpdate", "ServiceAlertResolve",
    "ServiceAlert",
    "RecentMaintenance", "DashboardStats",
]
