import logging
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from ptfms.dao.base import BaseDAO
from ptfms.models.gps_tracking import GPSTracking, GPSEventType

logger = logging.getLogger(__name__)

_STATION_EVENTS = (GPSEventType.ARRIVAL.value, GPSEventType.DEPARTURE.value)


class GPSTrackingDAO(BaseDAO[GPSTracking]):
    model = GPSTracking

    async def list_by_vehicle(self, vehicle_id: int) -> list[GPSTracking]:
        return await self._fetch(
            select(GPSTracking)
            .where(GPSTracking.vehicle_id == vehicle_id)
            .order_by(GPSTracking.timestamp.desc(), GPSTracking.id.desc())
        )

    async def latest_for_vehicle(self, vehicle_id: int) -> GPSTracking | None:
        return await self._fetch_one(
            select(GPSTracking)
            .where(GPSTracking.vehicle_id == vehicle_id)
            .order_by(GPSTracking.timestamp.desc(), GPSTracking.id.desc())
            .limit(1)
        )

    async def station_events(self, vehicle_id: int, station_id: str | None = None) -> list[GPSTracking]:
        statement = select(GPSTracking).where(
            GPSTracking.vehicle_id == vehicle_id,
            GPSTracking.event_type.in_(_STATION_EVENTS),
        )
        if station_id is not None:
            statement = statement.where(GPSTracking.station_id == station_id)
        return await self._fetch(statement.order_by(GPSTracking.timestamp.desc(), GPSTracking.id.desc()))

    async def delete_older_than(self, cutoff: datetime) -> int:
        """Delete entries recorded before ``cutoff``; returns the number removed."""
        async with self._session_factory() as session:
            try:
                result = await session.execute(delete(GPSTracking).where(GPSTracking.timestamp < cutoff))
                await session.commit()
            except SQLAlchemyError:
                await session.rollback()
                logger.exception("Failed to purge gps_tracking entries before %s", cutoff)
                return 0
        return result.rowcount or 0
