"""
Repositories wrapping typed CRUD access to the database.
"""
from fleet_api.repositories.base import CrudRepository
from fleet_api.repositories.vehicles import VehicleRepository
from fleet_api.repositories.maintenance import MaintenanceRepository
from fleet_api.repositories.alerts import AlertRepository

__all__ = ["CrudRepository", "VehicleRepository", "MaintenanceRepository", "AlertRepository"]
