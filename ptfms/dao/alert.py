from sqlalchemy import select

from ptfms.dao.base import BaseDAO
from ptfms.models.alert import Alert


class AlertDAO(BaseDAO[Alert]):
    model = Alert

    async def list_all(self) -> list[Alert]:
        return await self.find()

    async def find(
        self,
        status: str | None = None,
        alert_type: str | None = None,
        vehicle_id: int | None = None,
    ) -> list[Alert]:
        statement = select(Alert)
        if status is not None:
            statement = statement.where(Alert.status == status)
        if alert_type is not None:
            statement = statement.where(Alert.alert_type == alert_type)
        if vehicle_id is not None:
            statement = statement.where(Alert.vehicle_id == vehicle_id)
        return await self._fetch(statement.order_by(Alert.created_at.desc(), Alert.id.desc()))
