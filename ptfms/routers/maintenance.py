from fastapi import APIRouter, Depends, HTTPException, Query

from ptfms.dependencies import get_alert_service, get_maintenance_service
from ptfms.models.maintenance import MaintenanceRecord
from ptfms.schemas.alert import AlertResponse
from ptfms.schemas.maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceStatusUpdate
from ptfms.schemas.strategy import StrategyResponse, StrategySelect
from ptfms.schemas.vehicle import VehicleResponse
from ptfms.services.alert_service import AlertService
from ptfms.services.maintenance_service import MaintenanceService
from ptfms.utils.exceptions import AppException
from ptfms.utils.response import dump_all, success_response

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


def _strategy_data(service: MaintenanceService) -> dict:
    registry = service.registry
    return StrategyResponse(
        current=registry.current_type.value,
        current_name=registry.current.strategy_type,
        available=registry.available(),
    ).model_dump()


@router.get("")
async def get_maintenance_records(
    vehicle_id: int | None = None,
    status: str | None = None,
    service: MaintenanceService = Depends(get_maintenance_service),
):
    records = await service.list_records(vehicle_id=vehicle_id, status=status)
    return success_response(data=dump_all(MaintenanceResponse, records))


@router.post("", status_code=201)
async def schedule_maintenance(
    payload: MaintenanceCreate,
    service: MaintenanceService = Depends(get_maintenance_service),
):
    record = await service.schedule_maintenance(MaintenanceRecord(**payload.model_dump()))
    return success_response(data=MaintenanceResponse.model_validate(record).model_dump(), message="Maintenance scheduled")


@router.get("/strategy")
async def get_strategy(service: MaintenanceService = Depends(get_maintenance_service)):
    return success_response(data=_strategy_data(service))


@router.put("/strategy")
async def set_strategy(payload: StrategySelect, service: MaintenanceService = Depends(get_maintenance_service)):
    if not service.select_strategy(payload.strategy):
        raise AppException(f"Unknown maintenance strategy '{payload.strategy}'")
    return success_response(data=_strategy_data(service), message="Maintenance strategy updated")


@router.get("/due")
async def get_due_records(
    days: int = Query(default=7, ge=0),
    service: MaintenanceService = Depends(get_maintenance_service),
):
    return success_response(data=dump_all(MaintenanceResponse, await service.due_within(days)))


@router.get("/overdue")
async def get_overdue_records(service: MaintenanceService = Depends(get_maintenance_service)):
    return success_response(data=dump_all(MaintenanceResponse, await service.overdue()))


@router.get("/vehicles-due")
async def get_vehicles_due(service: MaintenanceService = Depends(get_maintenance_service)):
    vehicles = await service.vehicles_needing_maintenance()
    return success_response(data=dump_all(VehicleResponse, vehicles))


@router.post("/check-alerts")
async def check_maintenance_alerts(
    service: MaintenanceService = Depends(get_maintenance_service),
    alert_service: AlertService = Depends(get_alert_service),
):
    alerts = await alert_service.check_maintenance_alerts(service)
    data = dump_all(AlertResponse, alerts)
    return success_response(data=data, message=f"{len(alerts)} maintenance alert(s) raised")


@router.get("/{maintenance_id}")
async def get_maintenance_record(maintenance_id: int, service: MaintenanceService = Depends(get_maintenance_service)):
    record = await service.get_record(maintenance_id)
    if not record:
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    return success_response(data=MaintenanceResponse.model_validate(record).model_dump())


@router.put("/{maintenance_id}/status")
async def update_maintenance_status(
    maintenance_id: int,
    payload: MaintenanceStatusUpdate,
    service: MaintenanceService = Depends(get_maintenance_service),
):
    record = await service.update_status(maintenance_id, payload.status)
    if not record:
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    return success_response(data=MaintenanceResponse.model_validate(record).model_dump())


@router.delete("/{maintenance_id}")
async def delete_maintenance_record(maintenance_id: int, service: MaintenanceService = Depends(get_maintenance_service)):
    if not await service.delete(maintenance_id):
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    return success_response(message="Maintenance record deleted")
