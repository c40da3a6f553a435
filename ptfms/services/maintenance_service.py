import logging
from datetime import date, datetime, timedelta, timezone

from ptfms.dao import MaintenanceDAO, VehicleDAO
from ptfms.models.maintenance import MaintenanceRecord, MaintenanceStatus
from ptfms.models.vehicle import Vehicle
from ptfms.services.commands import CommandHistory, ScheduleMaintenanceCommand
from ptfms.services.maintenance_strategies import StrategyRegistry, latest_service_record
from ptfms.utils.exceptions import AppException, NotFoundException

logger = logging.getLogger(__name__)

_CLOSED_STATUSES = {MaintenanceStatus.COMPLETED.value, MaintenanceStatus.CANCELLED.value}


def _is_open(record: MaintenanceRecord) -> bool:
    return (record.status or "").capitalize() not in _CLOSED_STATUSES


class MaintenanceService:
    def __init__(
        self,
        registry: StrategyRegistry,
        history: CommandHistory,
        maintenance_dao: MaintenanceDAO | None = None,
        vehicle_dao: VehicleDAO | None = None,
    ):
        self.registry = registry
        self.history = history
        self.maintenance_dao = maintenance_dao or MaintenanceDAO()
        self.vehicle_dao = vehicle_dao or VehicleDAO()

    async def schedule_maintenance(self, record: MaintenanceRecord) -> MaintenanceRecord:
        if await self.vehicle_dao.get(record.vehicle_id) is None:
            raise NotFoundException("Vehicle not found")
        if record.service_date is None:
            raise AppException("Service date is required")
        if not (record.description or "").strip():
            raise AppException("Description is required")
        if not record.status:
            record.status = MaintenanceStatus.PENDING.value

        result = await self.history.run(ScheduleMaintenanceCommand(record, dao=self.maintenance_dao))
        if not result:
            raise AppException("Could not schedule maintenance", status_code=500)
        return record

    async def get_record(self, maintenance_id: int) -> MaintenanceRecord | None:
        return await self.maintenance_dao.get(maintenance_id)

    async def list_records(self, vehicle_id: int | None = None, status: str | None = None) -> list[MaintenanceRecord]:
        if vehicle_id is not None:
            records = await self.maintenance_dao.list_by_vehicle(vehicle_id)
            if status:
                records = [r for r in records if r.status == status]
            return records
        if status:
            return await self.maintenance_dao.list_by_status(status)
        return await self.maintenance_dao.list_all()

    async def update_status(self, maintenance_id: int, status: str) -> MaintenanceRecord | None:
        record = await self.maintenance_dao.get(maintenance_id)
        if record is None:
            return None
        record.status = status
        if not await self.maintenance_dao.update(record):
            raise AppException("Could not update maintenance record", status_code=500)
        return record

    async def complete(self, maintenance_id: int) -> MaintenanceRecord | None:
        return await self.update_status(maintenance_id, MaintenanceStatus.COMPLETED.value)

    async def cancel(self, maintenance_id: int) -> MaintenanceRecord | None:
        return await self.update_status(maintenance_id, MaintenanceStatus.CANCELLED.value)

    async def delete(self, maintenance_id: int) -> bool:
        return await self.maintenance_dao.delete(maintenance_id)

    async def due_within(self, days: int, today: date | None = None) -> list[MaintenanceRecord]:
        """Open records whose service date falls between today and ``days`` from now."""
        today = today or date.today()
        horizon = today + timedelta(days=days)
        return [
            r for r in await self.maintenance_dao.list_all()
            if r.service_date is not None and today <= r.service_date <= horizon and _is_open(r)
        ]

    async def overdue(self, today: date | None = None) -> list[MaintenanceRecord]:
        today = today or date.today()
        return [
            r for r in await self.maintenance_dao.list_all()
            if r.service_date is not None and r.service_date < today and _is_open(r)
        ]

    def select_strategy(self, name: str) -> bool:
        return self.registry.select(name)

    async def _last_service(self, vehicle: Vehicle) -> MaintenanceRecord | None:
        return latest_service_record(await self.maintenance_dao.list_by_vehicle(vehicle.id))

    async def forecast(self, vehicle: Vehicle, now: datetime | None = None) -> dict:
        now = now or datetime.now(timezone.utc)
        strategy = self.registry.current
        last = await self._last_service(vehicle)
        return {
            "vehicle_id": vehicle.id,
            "strategy": strategy.strategy_type,
            "interval_days": strategy.get_maintenance_interval(vehicle, now),
            "last_service_date": last.service_date if last else None,
            "next_maintenance_date": strategy.calculate_next_maintenance_date(vehicle, last, now),
            "maintenance_due": strategy.is_maintenance_due(vehicle, last, now),
        }

    async def maintenance_forecast(self, vehicle_id: int, now: datetime | None = None) -> dict | None:
        vehicle = await self.vehicle_dao.get(vehicle_id)
        if vehicle is None:
            return None
        return await self.forecast(vehicle, now)

    async def is_maintenance_due(self, vehicle_id: int, now: datetime | None = None) -> bool:
        vehicle = await self.vehicle_dao.get(vehicle_id)
        if vehicle is None:
            return False
        last = await self._last_service(vehicle)
        return self.registry.current.is_maintenance_due(vehicle, last, now)

    async def vehicles_needing_maintenance(self, now: datetime | None = None) -> list[Vehicle]:
        strategy = self.registry.current
        due = []
        for vehicle in await self.vehicle_dao.list_all():
            last = await self._last_service(vehicle)
            if strategy.is_maintenance_due(vehicle, last, now):
                due.append(vehicle)
        logger.info("%d vehicle(s) due for maintenance under %s strategy", len(due), strategy.strategy_type)
        return due
