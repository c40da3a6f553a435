from sqlalchemy import select

from ptfms.dao.base import BaseDAO
from ptfms.models.component import VehicleComponent


class VehicleComponentDAO(BaseDAO[VehicleComponent]):
    model = VehicleComponent

    async def list_by_vehicle(self, vehicle_id: int) -> list[VehicleComponent]:
        return await self._fetch(
            select(VehicleComponent).where(VehicleComponent.vehicle_id == vehicle_id).order_by(VehicleComponent.id)
        )

    async def needing_maintenance(self, threshold: float) -> list[VehicleComponent]:
        """Components whose usage reached ``threshold`` times their rated hours."""
        return await self._fetch(
            select(VehicleComponent)
            .where(
                VehicleComponent.max_hours.is_not(None),
                VehicleComponent.usage_hours >= VehicleComponent.max_hours * threshold,
            )
            .order_by(VehicleComponent.id)
        )
