import logging
from datetime import date

from ptfms.config import settings
from ptfms.dao import FuelLogDAO, VehicleDAO
from ptfms.models.alert import AlertType
from ptfms.models.fuel_log import FuelLog
from ptfms.models.vehicle import Vehicle
from ptfms.services.alert_service import AlertService
from ptfms.services.commands import AddFuelLogCommand, CommandHistory
from ptfms.utils.exceptions import AppException, NotFoundException

logger = logging.getLogger(__name__)


def consumption_per_100km(fuel_log: FuelLog) -> float | None:
    if not fuel_log.distance or fuel_log.distance <= 0:
        return None
    return fuel_log.amount / fuel_log.distance * 100


class FuelService:
    def __init__(
        self,
        history: CommandHistory,
        alert_service: AlertService,
        fuel_log_dao: FuelLogDAO | None = None,
        vehicle_dao: VehicleDAO | None = None,
        tolerance: float | None = None,
    ):
        self.history = history
        self.alert_service = alert_service
        self.fuel_log_dao = fuel_log_dao or FuelLogDAO()
        self.vehicle_dao = vehicle_dao or VehicleDAO()
        self.tolerance = settings.fuel_consumption_tolerance if tolerance is None else tolerance

    async def add_fuel_log(self, fuel_log: FuelLog) -> FuelLog:
        vehicle = await self.vehicle_dao.get(fuel_log.vehicle_id)
        if vehicle is None:
            raise NotFoundException("Vehicle not found")
        if fuel_log.log_date is None:
            raise AppException("Log date is required")
        if fuel_log.amount is None or fuel_log.amount <= 0:
            raise AppException("Amount must be greater than zero")
        if fuel_log.cost is None or fuel_log.cost < 0:
            raise AppException("Cost must not be negative")
        if not fuel_log.fuel_type:
            fuel_log.fuel_type = vehicle.fuel_type

        result = await self.history.run(AddFuelLogCommand(fuel_log, dao=self.fuel_log_dao))
        if not result:
            raise AppException("Could not save fuel log", status_code=500)

        # log is committed and on the history by now
        try:
            await self._check_consumption(vehicle, fuel_log)
        except AppException:
            logger.exception("Could not raise fuel consumption alert for vehicle %s", vehicle.vehicle_number)
        return fuel_log

    async def _check_consumption(self, vehicle: Vehicle, fuel_log: FuelLog) -> None:
        actual = consumption_per_100km(fuel_log)
        rated = vehicle.consumption_rate
        if actual is None or not rated:
            return
        if actual > rated * (1 + self.tolerance):
            logger.info("Vehicle %s consumed %.1f per 100 km (rated %.1f)", vehicle.vehicle_number, actual, rated)
            await self.alert_service.raise_alert(
                vehicle.id,
                AlertType.FUEL_CONSUMPTION.value,
                f"Fuel consumption of {actual:.1f} per 100 km on {fuel_log.log_date} "
                f"exceeds the rated {rated:.1f} for vehicle {vehicle.vehicle_number}",
            )

    async def get_fuel_log(self, fuel_log_id: int) -> FuelLog | None:
        return await self.fuel_log_dao.get(fuel_log_id)

    async def list_fuel_logs(
        self,
        vehicle_id: int | None = None,
        start: date | None = None,
        end: date | None = None,
    ) -> list[FuelLog]:
        logs = await self.fuel_log_dao.list_between(start, end)
        if vehicle_id is not None:
            logs = [log for log in logs if log.vehicle_id == vehicle_id]
        return logs

    async def delete_fuel_log(self, fuel_log_id: int) -> bool:
        return await self.fuel_log_dao.delete(fuel_log_id)

    async def vehicle_summary(self, vehicle_id: int) -> dict:
        logs = await self.fuel_log_dao.list_by_vehicle(vehicle_id)
        total_amount = sum(log.amount for log in logs)
        total_cost = sum(log.cost or 0 for log in logs)
        total_distance = sum(log.distance or 0 for log in logs)
        return {
            "vehicle_id": vehicle_id,
            "log_count": len(logs),
            "total_amount": round(total_amount, 3),
            "total_cost": round(total_cost, 2),
            "total_distance": round(total_distance, 1),
            "average_amount": round(total_amount / len(logs), 3) if logs else 0.0,
            "cost_per_unit": round(total_cost / total_amount, 3) if total_amount > 0 else 0.0,
            "consumption_per_100km": round(total_amount / total_distance * 100, 2) if total_distance > 0 else None,
        }
