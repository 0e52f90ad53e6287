"""
Pydantic schemas for Vehicle.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from fleet_api.models.vehicle import VehicleStatus
from fleet_api.schemas.common import RecordId, UtcDateTime


class VehicleBase(BaseModel):
    """Base vehicle schema with common fields."""
    vin: str = Field(..., min_length=17, max_length=17)
    make: str = Field(..., min_length=1, max_length=50)
    model: str = Field(..., min_length=1, max_length=50)
    year: int = Field(..., ge=1900, le=2100)
    mileage: int = Field(..., ge=0, le=999999)
    status: VehicleStatus = VehicleStatus.ACTIVE
    department: Optional[str] = Field(None, max_length=100)
    date_acquired: Optional[UtcDateTime] = None
    last_service_date: Optional[UtcDateTime] = None


class VehicleCreate(VehicleBase):
    """Schema for creating a vehicle."""
    pass


class VehicleUpdate(VehicleBase):
    """Schema for replacing a vehicle. The id must match the path."""
    id: RecordId


class Vehicle(VehicleBase):
    """Schema for vehicle responses."""
    id: int
    date_acquired: UtcDateTime

    model_config = ConfigDict(from_attributes=True)
