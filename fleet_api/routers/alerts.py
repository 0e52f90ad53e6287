"""
Service alert routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from fleet_api.database import get_db
from fleet_api.routers import RecordIdPath
from fleet_api.repositories.alerts import AlertRepository
from fleet_api.schemas.alert import (
    ServiceAlert as ServiceAlertSchema,
    ServiceAlertCreate,
    ServiceAlertResolve,
    ServiceAlertUpdate,
)

router = APIRouter(prefix="/alerts", tags=["alerts"])


def get_alert_repository(db: AsyncSession = Depends(get_db)) -> AlertRepository:
    return AlertRepository(db)


@router.get("", response_model=List[ServiceAlertSchema])
async def get_alerts(
    resolved: Optional[bool] = None,
    repository: AlertRepository = Depends(get_alert_repository),
):
    """
    Get all service alerts, optionally filtered by resolution state.
    """
    return await repository.list(resolved=resolved)


@router.get("/vehicle/{vehicle_id}", response_model=List[ServiceAlertSchema])
async def get_alerts_by_vehicle(
    vehicle_id: RecordIdPath,
    repository: AlertRepository = Depends(get_alert_repository),
):
    """
    Get all alerts raised for a vehicle, newest first.
    """
    return await repository.list_for_vehicle(vehicle_id)


@router.get("/{alert_id}", response_model=ServiceAlertSchema)
async def get_alert(
    alert_id: RecordIdPath,
    repository: AlertRepository = Depends(get_alert_repository),
):
    """
    Get a specific service alert by ID.
    """
    return await repository.get(alert_id)


@router.post("", response_model=ServiceAlertSchema, status_code=status.HTTP_201_CREATED)
async def create_alert(
    alert: ServiceAlertCreate,
    repository: AlertRepository = Depends(get_alert_repository),
):
    """
    Raise a service alert for an existing vehicle.
    """
    return await repository.create(alert)


@router.put("/{alert_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_alert(
    alert_id: RecordIdPath,
    alert: ServiceAlertUpdate,
    repository: AlertRepository = Depends(get_alert_repository),
):
    """
    Replace a service alert. The body id must match the path id.
    """
    await repository.update(alert_id, alert)
    return None


@router.post("/{alert_id}/resolve", response_model=ServiceAlertSchema)
async def resolve_alert(
    alert_id: RecordIdPath,
    resolution: ServiceAlertResolve,
    repository: AlertRepository = Depends(get_alert_repository),
):
    """
    Mark an open alert as resolved.
    """
    return await repository.resolve(
        alert_id,
        resolved_by=resolution.resolved_by,
        resolution_notes=resolution.resolution_notes,
    )


@router.delete("/{alert_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_alert(
    alert_id: RecordIdPath,
    repository: AlertRepository = Depends(get_alert_repository),
):
    """
    Delete a service alert.
    """
    await repository.delete(alert_id)
    return None
