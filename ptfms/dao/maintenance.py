from sqlalchemy import select

from ptfms.dao.base import BaseDAO
from ptfms.models.maintenance import MaintenanceRecord


class MaintenanceDAO(BaseDAO[MaintenanceRecord]):
    model = MaintenanceRecord

    async def list_by_vehicle(self, vehicle_id: int) -> list[MaintenanceRecord]:
        return await self._fetch(
            select(MaintenanceRecord)
            .where(MaintenanceRecord.vehicle_id == vehicle_id)
            .order_by(MaintenanceRecord.service_date, MaintenanceRecord.id)
        )

    async def list_by_status(self, status: str) -> list[MaintenanceRecord]:
        return await self._fetch(
            select(MaintenanceRecord)
            .where(MaintenanceRecord.status == status)
            .order_by(MaintenanceRecord.service_date, MaintenanceRecord.id)
        )
