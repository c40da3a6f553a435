from fastapi import APIRouter, Depends, HTTPException

from ptfms.dependencies import get_maintenance_service, get_vehicle_service
from ptfms.models.vehicle import Vehicle
from ptfms.schemas.maintenance import MaintenanceForecast
from ptfms.schemas.vehicle import VehicleCreate, VehicleResponse, VehicleStatusUpdate, VehicleUpdate
from ptfms.services.maintenance_service import MaintenanceService
from ptfms.services.vehicle_service import VehicleService
from ptfms.utils.response import dump_all, success_response

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("")
async def get_vehicles(
    status: str | None = None,
    vehicle_type: str | None = None,
    search: str | None = None,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicles = await service.list_vehicles(status=status, vehicle_type=vehicle_type, search=search)
    data = dump_all(VehicleResponse, vehicles)
    return success_response(data=data)


@router.post("", status_code=201)
async def create_vehicle(payload: VehicleCreate, service: VehicleService = Depends(get_vehicle_service)):
    vehicle = await service.register_vehicle(Vehicle(**payload.model_dump()))
    data = VehicleResponse.model_validate(vehicle).model_dump()
    return success_response(data=data, message="Vehicle registered")


@router.get("/status-counts")
async def get_status_counts(service: VehicleService = Depends(get_vehicle_service)):
    return success_response(data=await service.count_by_status())


@router.get("/{vehicle_id}")
async def get_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    vehicle = await service.get_vehicle(vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return success_response(data=VehicleResponse.model_validate(vehicle).model_dump())


@router.put("/{vehicle_id}")
async def update_vehicle(
    vehicle_id: int,
    payload: VehicleUpdate,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = await service.update_vehicle(vehicle_id, payload.model_dump(exclude_unset=True))
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return success_response(data=VehicleResponse.model_validate(vehicle).model_dump())


@router.put("/{vehicle_id}/status")
async def update_vehicle_status(
    vehicle_id: int,
    payload: VehicleStatusUpdate,
    service: VehicleService = Depends(get_vehicle_service),
):
    vehicle = await service.update_status(vehicle_id, payload.status)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return success_response(data=VehicleResponse.model_validate(vehicle).model_dump())


@router.delete("/{vehicle_id}")
async def delete_vehicle(vehicle_id: int, service: VehicleService = Depends(get_vehicle_service)):
    if not await service.delete_vehicle(vehicle_id):
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return success_response(message="Vehicle deleted")


@router.get("/{vehicle_id}/maintenance-forecast")
async def get_maintenance_forecast(
    vehicle_id: int,
    service: MaintenanceService = Depends(get_maintenance_service),
):
    forecast = await service.maintenance_forecast(vehicle_id)
    if forecast is None:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return success_response(data=MaintenanceForecast(**forecast).model_dump())
