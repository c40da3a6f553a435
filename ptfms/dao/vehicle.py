from sqlalchemy import select

from ptfms.dao.base import BaseDAO
from ptfms.models.vehicle import Vehicle


class VehicleDAO(BaseDAO[Vehicle]):
    model = Vehicle

    async def find_by_vin(self, vin: str) -> Vehicle | None:
        return await self._fetch_one(select(Vehicle).where(Vehicle.vin == vin))

    async def find_by_number(self, vehicle_number: str) -> Vehicle | None:
        return await self._fetch_one(select(Vehicle).where(Vehicle.vehicle_number == vehicle_number))

    async def find_by_status(self, status: str) -> list[Vehicle]:
        return await self._fetch(select(Vehicle).where(Vehicle.status == status).order_by(Vehicle.id))
