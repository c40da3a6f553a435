from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from ptfms.dependencies import get_fuel_service
from ptfms.models.fuel_log import FuelLog
from ptfms.schemas.fuel_log import FuelLogCreate, FuelLogResponse
from ptfms.services.fuel_service import FuelService
from ptfms.utils.response import dump_all, success_response

router = APIRouter(prefix="/fuel-logs", tags=["fuel"])


@router.get("")
async def get_fuel_logs(
    vehicle_id: int | None = None,
    start: date | None = None,
    end: date | None = None,
    service: FuelService = Depends(get_fuel_service),
):
    logs = await service.list_fuel_logs(vehicle_id=vehicle_id, start=start, end=end)
    return success_response(data=dump_all(FuelLogResponse, logs))


@router.post("", status_code=201)
async def create_fuel_log(payload: FuelLogCreate, service: FuelService = Depends(get_fuel_service)):
    fuel_log = await service.add_fuel_log(FuelLog(**payload.model_dump()))
    return success_response(data=FuelLogResponse.model_validate(fuel_log).model_dump(), message="Fuel log recorded")


@router.get("/summary/{vehicle_id}")
async def get_vehicle_fuel_summary(vehicle_id: int, service: FuelService = Depends(get_fuel_service)):
    return success_response(data=await service.vehicle_summary(vehicle_id))


@router.get("/{fuel_log_id}")
async def get_fuel_log(fuel_log_id: int, service: FuelService = Depends(get_fuel_service)):
    fuel_log = await service.get_fuel_log(fuel_log_id)
    if not fuel_log:
        raise HTTPException(status_code=404, detail="Fuel log not found")
    return success_response(data=FuelLogResponse.model_validate(fuel_log).model_dump())


@router.delete("/{fuel_log_id}")
async def delete_fuel_log(fuel_log_id: int, service: FuelService = Depends(get_fuel_service)):
    if not await service.delete_fuel_log(fuel_log_id):
        raise HTTPException(status_code=404, detail="Fuel log not found")
    return success_response(message="Fuel log deleted")
