"""
Maintenance record model for database.
"""
from sqlalchemy import Boolean, Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from fleet_api.database import Base
from fleet_api.models.base import utcnow


class MaintenanceRecord(Base):
    """Maintenance record database model."""

    __tablename__ = "maintenance_records"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(
        Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    service_date = Column(DateTime(timezone=True), nullable=False, index=True)
    service_type = Column(String(100), nullable=False)  # Oil Change, Tire Rotation, ...
    performed_by = Column(String(50), nullable=True)
    cost = Column(Numeric(10, 2), nullable=False, default=0)
    mileage_at_service = Column(Integer, nullable=False, default=0)
    notes = Column(String(500), nullable=True)
    parts_replaced = Column(String(100), nullable=True)
    is_warranty_covered = Column(Boolean, nullable=False, default=False)
    created_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Relationships
    vehicle = relationship("Vehicle", back_populates="maintenance_records")

    def __repr__(self):
        return (
            f"<MaintenanceRecord(id={self.id}, vehicle_id={self.vehicle_id}, "
            f"service_type='{self.service_type}')>"
        )
