"""
Vehicle routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from fleet_api.database import get_db
from fleet_api.routers import RecordIdPath
from fleet_api.repositories.vehicles import VehicleRepository
from fleet_api.schemas.vehicle import Vehicle as VehicleSchema, VehicleCreate, VehicleUpdate

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


def get_vehicle_repository(db: AsyncSession = Depends(get_db)) -> VehicleRepository:
    return VehicleRepository(db)


@router.get("", response_model=List[VehicleSchema])
async def get_vehicles(repository: VehicleRepository = Depends(get_vehicle_repository)):
    """
    Get all vehicles.
    """
    return await repository.list()


@router.get("/{vehicle_id}", response_model=VehicleSchema)
async def get_vehicle(
    vehicle_id: RecordIdPath,
    repository: VehicleRepository = Depends(get_vehicle_repository),
):
    """
    Get a specific vehicle by ID.
    """
    return await repository.get(vehicle_id)


@router.post("", response_model=VehicleSchema, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    vehicle: VehicleCreate,
    repository: VehicleRepository = Depends(get_vehicle_repository),
):
    """
    Create a new vehicle. The VIN must not already be registered.
    """
    return await repository.create(vehicle)


@router.put("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_vehicle(
    vehicle_id: RecordIdPath,
    vehicle: VehicleUpdate,
    repository: VehicleRepository = Depends(get_vehicle_repository),
):
    """
    Replace a vehicle. The body id must match the path id.
    """
    await repository.update(vehicle_id, vehicle)
    return None


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(
    vehicle_id: RecordIdPath,
    repository: VehicleRepository = Depends(get_vehicle_repository),
):
    """
    Delete a vehicle along with its maintenance records and alerts.
    """
    await repository.delete(vehicle_id)
    return None
