import logging
from datetime import datetime, timedelta, timezone

from ptfms.dao import GPSTrackingDAO, VehicleDAO
from ptfms.models.gps_tracking import GPSEventType, GPSTracking
from ptfms.utils.exceptions import AppException, NotFoundException

logger = logging.getLogger(__name__)

STATION_EVENT_TYPES = {GPSEventType.ARRIVAL.value, GPSEventType.DEPARTURE.value}


class GPSService:
    def __init__(self, gps_dao: GPSTrackingDAO | None = None, vehicle_dao: VehicleDAO | None = None):
        self.gps_dao = gps_dao or GPSTrackingDAO()
        self.vehicle_dao = vehicle_dao or VehicleDAO()

    async def record_position(self, entry: GPSTracking) -> GPSTracking:
        if await self.vehicle_dao.get(entry.vehicle_id) is None:
            raise NotFoundException("Vehicle not found")
        if entry.timestamp is None:
            entry.timestamp = datetime.now(timezone.utc)
        if not entry.event_type:
            entry.event_type = GPSEventType.LOCATION.value
        if not await self.gps_dao.add(entry):
            raise AppException("Could not save GPS position", status_code=500)
        return entry

    async def log_station_event(
        self,
        vehicle_id: int,
        station_id: str,
        event_type: str,
        latitude: float,
        longitude: float,
        operator_id: int | None = None,
    ) -> GPSTracking:
        if event_type not in STATION_EVENT_TYPES:
            raise AppException(f"Station events must be one of {sorted(STATION_EVENT_TYPES)}")
        if not (station_id or "").strip():
            raise AppException("Station id is required")
        entry = GPSTracking(
            vehicle_id=vehicle_id,
            station_id=station_id.strip(),
            event_type=event_type,
            latitude=latitude,
            longitude=longitude,
            operator_id=operator_id,
        )
        return await self.record_position(entry)

    async def history(self, vehicle_id: int) -> list[GPSTracking]:
        return await self.gps_dao.list_by_vehicle(vehicle_id)

    async def latest_position(self, vehicle_id: int) -> GPSTracking | None:
        return await self.gps_dao.latest_for_vehicle(vehicle_id)

    async def station_events(self, vehicle_id: int, station_id: str | None = None) -> list[GPSTracking]:
        return await self.gps_dao.station_events(vehicle_id, station_id)

    async def delete_entry(self, tracking_id: int) -> bool:
        return await self.gps_dao.delete(tracking_id)

    async def purge_older_than(self, days: int, now: datetime | None = None) -> int:
        cutoff = (now or datetime.now(timezone.utc)) - timedelta(days=days)
        removed = await self.gps_dao.delete_older_than(cutoff)
        logger.info("Purged %d GPS entries older than %d days", removed, days)
        return removed
