import logging
from datetime import datetime, timezone

from ptfms.dao import AlertDAO, VehicleDAO
from ptfms.models.alert import Alert, AlertStatus, AlertType
from ptfms.services.notifications import AlertSubject
from ptfms.utils.exceptions import AppException, NotFoundException

logger = logging.getLogger(__name__)


class AlertService:
    def __init__(
        self,
        subject: AlertSubject,
        alert_dao: AlertDAO | None = None,
        vehicle_dao: VehicleDAO | None = None,
    ):
        self.subject = subject
        self.alert_dao = alert_dao or AlertDAO()
        self.vehicle_dao = vehicle_dao or VehicleDAO()

    async def raise_alert(self, vehicle_id: int, alert_type: str, message: str) -> Alert:
        """Store an open alert and, once stored, push it to every observer."""
        if await self.vehicle_dao.get(vehicle_id) is None:
            raise NotFoundException("Vehicle not found")
        if not (message or "").strip():
            raise AppException("Alert message is required")

        alert = Alert(
            vehicle_id=vehicle_id,
            alert_type=alert_type,
            message=message.strip(),
            status=AlertStatus.OPEN.value,
            created_at=datetime.now(timezone.utc),
        )
        if not await self.alert_dao.add(alert):
            raise AppException("Could not save alert", status_code=500)

        failures = self.subject.notify_observers(alert)
        if failures:
            logger.warning(
                "Alert %s delivered with %d failed channel(s): %s",
                alert.id,
                len(failures),
                ", ".join(f.observer.observer_type for f in failures),
            )
        return alert

    async def get_alert(self, alert_id: int) -> Alert | None:
        return await self.alert_dao.get(alert_id)

    async def list_alerts(
        self,
        status: str | None = None,
        alert_type: str | None = None,
        vehicle_id: int | None = None,
    ) -> list[Alert]:
        return await self.alert_dao.find(status=status, alert_type=alert_type, vehicle_id=vehicle_id)

    async def resolve(self, alert_id: int) -> Alert | None:
        alert = await self.alert_dao.get(alert_id)
        if alert is None:
            return None
        alert.status = AlertStatus.RESOLVED.value
        if not await self.alert_dao.update(alert):
            raise AppException("Could not resolve alert", status_code=500)
        return alert

    async def delete(self, alert_id: int) -> bool:
        return await self.alert_dao.delete(alert_id)

    async def check_maintenance_alerts(self, maintenance_service, now: datetime | None = None) -> list[Alert]:
        """Raise a maintenance alert for each due vehicle without an open one."""
        already_flagged = {
            a.vehicle_id
            for a in await self.alert_dao.find(
                status=AlertStatus.OPEN.value, alert_type=AlertType.MAINTENANCE.value
            )
        }
        strategy_name = maintenance_service.registry.current.strategy_type
        raised = []
        for vehicle in await maintenance_service.vehicles_needing_maintenance(now):
            if vehicle.id in already_flagged:
                continue
            raised.append(await self.raise_alert(
                vehicle.id,
                AlertType.MAINTENANCE.value,
                f"Vehicle {vehicle.vehicle_number} is due for maintenance ({strategy_name} schedule)",
            ))
        return raised
