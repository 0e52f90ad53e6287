"""
Vehicle repository.
"""
from typing import Any, Dict, Optional

from sqlalchemy import select

from fleet_api.exceptions import InvalidRecordError
from fleet_api.models.vehicle import Vehicle
from fleet_api.repositories.base import CrudRepository


class VehicleRepository(CrudRepository[Vehicle]):
    model = Vehicle
    record_name = "Vehicle"
    server_defaults = ("date_acquired",)

    async def validate(self, values: Dict[str, Any], record_id: Optional[int] = None) -> None:
        # Check if VIN already exists on another vehicle
        query = select(Vehicle.id).where(Vehicle.vin == values["vin"])
        if record_id is not None:
            query = query.where(Vehicle.id != record_id)
        result = await self.session.execute(query)
        if result.first() is not None:
            raise InvalidRecordError(f"VIN {values['vin']} already registered")
