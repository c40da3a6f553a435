"""Aggregated fleet, maintenance and fuel figures computed on demand."""
from collections import defaultdict
from datetime import date

from ptfms.dao import AlertDAO, FuelLogDAO, MaintenanceDAO, VehicleDAO
from ptfms.models.alert import AlertStatus
from ptfms.models.maintenance import MaintenanceStatus
from ptfms.models.vehicle import VehicleStatus
from ptfms.services.maintenance_strategies import StrategyRegistry
from ptfms.services.notifications import AlertSubject


def _in_range(day: date | None, start: date | None, end: date | None) -> bool:
    if day is None:
        return False
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True


class ReportService:
    def __init__(
        self,
        registry: StrategyRegistry,
        subject: AlertSubject,
        vehicle_dao: VehicleDAO | None = None,
        maintenance_dao: MaintenanceDAO | None = None,
        fuel_log_dao: FuelLogDAO | None = None,
        alert_dao: AlertDAO | None = None,
    ):
        self.registry = registry
        self.subject = subject
        self.vehicle_dao = vehicle_dao or VehicleDAO()
        self.maintenance_dao = maintenance_dao or MaintenanceDAO()
        self.fuel_log_dao = fuel_log_dao or FuelLogDAO()
        self.alert_dao = alert_dao or AlertDAO()

    async def fleet_summary(self) -> dict:
        vehicles = await self.vehicle_dao.list_all()
        by_status = defaultdict(int)
        for vehicle in vehicles:
            by_status[vehicle.status] += 1
        open_alerts = await self.alert_dao.find(status=AlertStatus.OPEN.value)
        return {
            "total_vehicles": len(vehicles),
            "active_vehicles": by_status[VehicleStatus.ACTIVE.value],
            "maintenance_vehicles": by_status[VehicleStatus.MAINTENANCE.value],
            "available_vehicles": by_status[VehicleStatus.AVAILABLE.value],
            "current_maintenance_strategy": self.registry.current.strategy_type,
            "alert_observers": self.subject.observer_count,
            "open_alerts": len(open_alerts),
        }

    async def maintenance_costs(self, start: date | None = None, end: date | None = None) -> dict:
        records = [r for r in await self.maintenance_dao.list_all() if _in_range(r.service_date, start, end)]
        completed = [r for r in records if r.status == MaintenanceStatus.COMPLETED.value]
        pending = [r for r in records if r.status == MaintenanceStatus.PENDING.value]
        total_cost = sum(r.cost or 0 for r in completed)

        cost_by_vehicle = defaultdict(float)
        for r in completed:
            cost_by_vehicle[r.vehicle_id] += r.cost or 0

        return {
            "period_start": start,
            "period_end": end,
            "total_cost": round(total_cost, 2),
            "completed_services": len(completed),
            "pending_services": len(pending),
            "average_cost_per_service": round(total_cost / len(completed), 2) if completed else 0.0,
            "highest_cost_vehicle_id": max(cost_by_vehicle, key=cost_by_vehicle.get) if cost_by_vehicle else None,
        }

    async def fuel_consumption(self, start: date | None = None, end: date | None = None) -> dict:
        logs = await self.fuel_log_dao.list_between(start, end)
        amount_by_fuel = defaultdict(float)
        for log in logs:
            amount_by_fuel[log.fuel_type] += log.amount

        distance_by_vehicle = defaultdict(float)
        amount_by_vehicle = defaultdict(float)
        for log in logs:
            if log.distance:
                distance_by_vehicle[log.vehicle_id] += log.distance
                amount_by_vehicle[log.vehicle_id] += log.amount
        per_100km = {
            vehicle_id: amount_by_vehicle[vehicle_id] / distance * 100
            for vehicle_id, distance in distance_by_vehicle.items()
            if distance > 0
        }

        return {
            "period_start": start,
            "period_end": end,
            "total_fuel_cost": round(sum(log.cost or 0 for log in logs), 2),
            "total_fuel_amount": round(sum(log.amount for log in logs), 3),
            "amount_by_fuel_type": {k: round(v, 3) for k, v in amount_by_fuel.items()},
            "most_efficient_vehicle_id": min(per_100km, key=per_100km.get) if per_100km else None,
        }
