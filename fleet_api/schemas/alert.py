"""
Pydantic schemas for ServiceAlert.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional

from fleet_api.models.alert import AlertPriority
from fleet_api.models.base import utcnow
from fleet_api.schemas.common import RecordId, UtcDateTime


class ServiceAlertBase(BaseModel):
    """Base service alert schema with common fields."""
    vehicle_id: RecordId
    alert_type: str = Field(..., min_length=1, max_length=50)
    priority: AlertPriority
    description: str = Field(..., min_length=1, max_length=250)
    due_date: Optional[UtcDateTime] = None
    is_resolved: bool = False
    resolved_date: Optional[UtcDateTime] = None
    resolved_by: Optional[str] = Field(None, max_length=100)
    resolution_notes: Optional[str] = Field(None, max_length=250)


class ServiceAlertCreate(ServiceAlertBase):
    """Schema for creating a service alert."""

    @model_validator(mode="after")
    def check_resolution_fields(self):
        if not self.is_resolved:
            if self.resolved_date or self.resolved_by or self.resolution_notes:
                raise ValueError("Resolution fields may only be set on a resolved alert")
        elif self.resolved_date is None:
            self.resolved_date = utcnow()
        return self


class ServiceAlertUpdate(ServiceAlertCreate):
    """Schema for replacing a service alert. The id must match the path."""
    id: RecordId


class ServiceAlertResolve(BaseModel):
    """Schema for resolving an alert."""
    resolved_by: Optional[str] = Field(None, max_length=100)
    resolution_notes: Optional[str] = Field(None, max_length=250)


class ServiceAlert(ServiceAlertBase):
    """Schema for service alert responses."""
    id: int
    created_date: UtcDateTime

    model_config = ConfigDict(from_attributes=True)
