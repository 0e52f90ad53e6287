"""
Pydantic schemas for MaintenanceRecord.
"""
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from fleet_api.schemas.common import MAX_INTEGER, Money, RecordId, UtcDateTime
from fleet_api.schemas.vehicle import Vehicle


class MaintenanceRecordBase(BaseModel):
    """Base maintenance record schema with common fields."""
    vehicle_id: RecordId
    service_date: UtcDateTime
    service_type: str = Field(..., min_length=1, max_length=100)
    performed_by: Optional[str] = Field(None, max_length=50)
    cost: Money = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    mileage_at_service: int = Field(0, ge=0, le=MAX_INTEGER)
    notes: Optional[str] = Field(None, max_length=500)
    parts_replaced: Optional[str] = Field(None, max_length=100)
    is_warranty_covered: bool = False


class MaintenanceRecordCreate(MaintenanceRecordBase):
    """Schema for creating a maintenance record."""
    pass


class MaintenanceRecordUpdate(MaintenanceRecordBase):
    """Schema for replacing a maintenance record. The id must match the path."""
    id: RecordId


class MaintenanceRecord(MaintenanceRecordBase):
    """Schema for maintenance record responses."""
    id: int
    created_date: UtcDateTime

    model_config = ConfigDict(from_attributes=True)


class MaintenanceRecordDetail(MaintenanceRecord):
    """Maintenance record with its vehicle embedded."""
    vehicle: Optional[Vehicle] = None
