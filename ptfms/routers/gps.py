from fastapi import APIRouter, Depends, HTTPException, Query

from ptfms.config import settings
from ptfms.dependencies import get_gps_service
from ptfms.models.gps_tracking import GPSTracking
from ptfms.schemas.gps import GPSPositionCreate, GPSResponse, StationEventCreate
from ptfms.services.gps_service import GPSService
from ptfms.utils.response import dump_all, success_response

router = APIRouter(prefix="/gps", tags=["gps"])


@router.post("", status_code=201)
async def record_position(payload: GPSPositionCreate, service: GPSService = Depends(get_gps_service)):
    entry = await service.record_position(GPSTracking(**payload.model_dump()))
    return success_response(data=GPSResponse.model_validate(entry).model_dump())


@router.post("/station-events", status_code=201)
async def log_station_event(payload: StationEventCreate, service: GPSService = Depends(get_gps_service)):
    entry = await service.log_station_event(**payload.model_dump())
    return success_response(data=GPSResponse.model_validate(entry).model_dump(), message="Station event logged")


@router.get("/vehicles/{vehicle_id}")
async def get_vehicle_history(vehicle_id: int, service: GPSService = Depends(get_gps_service)):
    entries = await service.history(vehicle_id)
    return success_response(data=dump_all(GPSResponse, entries))


@router.get("/vehicles/{vehicle_id}/latest")
async def get_latest_position(vehicle_id: int, service: GPSService = Depends(get_gps_service)):
    entry = await service.latest_position(vehicle_id)
    if not entry:
        raise HTTPException(status_code=404, detail="No GPS data for vehicle")
    return success_response(data=GPSResponse.model_validate(entry).model_dump())


@router.get("/vehicles/{vehicle_id}/station-events")
async def get_station_events(
    vehicle_id: int,
    station_id: str | None = None,
    service: GPSService = Depends(get_gps_service),
):
    entries = await service.station_events(vehicle_id, station_id)
    return success_response(data=dump_all(GPSResponse, entries))


@router.delete("/purge")
async def purge_old_entries(
    days: int = Query(default=settings.gps_retention_days, ge=1),
    service: GPSService = Depends(get_gps_service),
):
    removed = await service.purge_older_than(days)
    return success_response(data={"removed": removed})


@router.delete("/{tracking_id}")
async def delete_entry(tracking_id: int, service: GPSService = Depends(get_gps_service)):
    if not await service.delete_entry(tracking_id):
        raise HTTPException(status_code=404, detail="GPS entry not found")
    return success_response(message="GPS entry deleted")
