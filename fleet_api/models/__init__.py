"""
SQLAlchemy database models.
"""
from fleet_api.models.vehicle import Vehicle, VehicleStatus
from fleet_api.models.maintenance import MaintenanceRecord
from fleet_api.models.alert import ServiceAlert, AlertPriority

__all__ = ["Vehicle", "VehicleStatus", "MaintenanceRecord", "ServiceAlert", "AlertPriority"]
