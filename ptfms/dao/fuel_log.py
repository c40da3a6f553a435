from datetime import date

from sqlalchemy import select

from ptfms.dao.base import BaseDAO
from ptfms.models.fuel_log import FuelLog


class FuelLogDAO(BaseDAO[FuelLog]):
    model = FuelLog

    async def list_by_vehicle(self, vehicle_id: int) -> list[FuelLog]:
        return await self._fetch(
            select(FuelLog).where(FuelLog.vehicle_id == vehicle_id).order_by(FuelLog.log_date, FuelLog.id)
        )

    async def list_between(self, start: date | None = None, end: date | None = None) -> list[FuelLog]:
        statement = select(FuelLog)
        if start is not None:
            statement = statement.where(FuelLog.log_date >= start)
        if end is not None:
            statement = statement.where(FuelLog.log_date <= end)
        return await self._fetch(statement.order_by(FuelLog.log_date, FuelLog.id))
