"""
Maintenance record routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from fleet_api.database import get_db
from fleet_api.routers import RecordIdPath
from fleet_api.repositories.maintenance import MaintenanceRepository
from fleet_api.schemas.maintenance import (
    MaintenanceRecord as MaintenanceRecordSchema,
    MaintenanceRecordCreate,
    MaintenanceRecordDetail,
    MaintenanceRecordUpdate,
)

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


def get_maintenance_repository(db: AsyncSession = Depends(get_db)) -> MaintenanceRepository:
    return MaintenanceRepository(db)


@router.get("", response_model=List[MaintenanceRecordSchema])
async def get_maintenance_records(
    repository: MaintenanceRepository = Depends(get_maintenance_repository),
):
    """
    Get the 100 most recent maintenance records, newest service date first.
    """
    return await repository.list_recent()


@router.get("/vehicle/{vehicle_id}", response_model=List[MaintenanceRecordSchema])
async def get_maintenance_by_vehicle(
    vehicle_id: RecordIdPath,
    repository: MaintenanceRepository = Depends(get_maintenance_repository),
):
    """
    Get all maintenance records for a vehicle, newest service date first.
    """
    return await repository.list_for_vehicle(vehicle_id)


@router.get("/{record_id}", response_model=MaintenanceRecordDetail)
async def get_maintenance_record(
    record_id: RecordIdPath,
    repository: MaintenanceRepository = Depends(get_maintenance_repository),
):
    """
    Get a specific maintenance record with its vehicle.
    """
    return await repository.get_with_vehicle(record_id)


@router.post("", response_model=MaintenanceRecordSchema, status_code=status.HTTP_201_CREATED)
async def create_maintenance_record(
    record: MaintenanceRecordCreate,
    repository: MaintenanceRepository = Depends(get_maintenance_repository),
):
    """
    Create a maintenance record for an existing vehicle.
    """
    return await repository.create(record)


@router.put("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_maintenance_record(
    record_id: RecordIdPath,
    record: MaintenanceRecordUpdate,
    repository: MaintenanceRepository = Depends(get_maintenance_repository),
):
    """
    Replace a maintenance record. The body id must match the path id.
    """
    await repository.update(record_id, record)
    return None


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_maintenance_record(
    record_id: RecordIdPath,
    repository: MaintenanceRepository = Depends(get_maintenance_repository),
):
    """
    Delete a maintenance record.
    """
    await repository.delete(record_id)
    return None
