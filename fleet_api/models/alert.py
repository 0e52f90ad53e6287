"""
Service alert model for database.
"""
import enum

from sqlalchemy import Boolean, Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from fleet_api.database import Base
from fleet_api.models.base import enum_column_type, utcnow


class AlertPriority(str, enum.Enum):
    """Alert priority enumeration."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class ServiceAlert(Base):
    """Service alert database model."""

    __tablename__ = "service_alerts"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(
        Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    alert_type = Column(String(50), nullable=False)  # Inspection Due, Maintenance Overdue, ...
    priority = Column(enum_column_type(AlertPriority), nullable=False, index=True)
    description = Column(String(250), nullable=False)
    created_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    due_date = Column(DateTime(timezone=True), nullable=True)
    is_resolved = Column(Boolean, nullable=False, default=False, index=True)
    resolved_date = Column(DateTime(timezone=True), nullable=True)
    resolved_by = Column(String(100), nullable=True)
    resolution_notes = Column(String(250), nullable=True)

    # Relationships
    vehicle = relationship("Vehicle", back_populates="service_alerts")

    def __repr__(self):
        return f"<ServiceAlert(id={self.id}, vehicle_id={self.vehicle_id}, priority='{self.priority}')>"
