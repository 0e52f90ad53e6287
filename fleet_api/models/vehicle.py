"""
Vehicle model for database.
"""
import enum

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from fleet_api.database import Base
from fleet_api.models.base import enum_column_type, utcnow


class VehicleStatus(str, enum.Enum):
    """Vehicle status enumeration."""
    ACTIVE = "Active"
    MAINTENANCE = "Maintenance"
    RETIRED = "Retired"


class Vehicle(Base):
    """Vehicle database model."""

    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    vin = Column(String(17), unique=True, nullable=False, index=True)
    make = Column(String(50), nullable=False)
    model = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    mileage = Column(Integer, nullable=False, default=0)
    status = Column(
        enum_column_type(VehicleStatus),
        nullable=False,
        default=VehicleStatus.ACTIVE,
        server_default=VehicleStatus.ACTIVE.value,
    )
    department = Column(String(100), nullable=True)
    date_acquired = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_service_date = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    maintenance_records = relationship(
        "MaintenanceRecord",
        back_populates="vehicle",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    service_alerts = relationship(
        "ServiceAlert",
        back_populates="vehicle",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Vehicle(id={self.id}, vin='{self.vin}', {self.year} {self.make} {self.model})>"
