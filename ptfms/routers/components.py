from fastapi import APIRouter, Depends, HTTPException, Query

from ptfms.dependencies import get_component_service
from ptfms.models.component import VehicleComponent
from ptfms.schemas.component import ComponentCreate, ComponentResponse, UsageUpdate
from ptfms.services.component_service import ComponentService
from ptfms.utils.response import dump_all, success_response

router = APIRouter(prefix="/components", tags=["components"])


@router.post("", status_code=201)
async def add_component(payload: ComponentCreate, service: ComponentService = Depends(get_component_service)):
    component = await service.add_component(VehicleComponent(**payload.model_dump()))
    return success_response(data=ComponentResponse.model_validate(component).model_dump())


@router.get("/needing-maintenance")
async def get_components_needing_maintenance(
    threshold: float | None = Query(default=None, gt=0, le=1),
    service: ComponentService = Depends(get_component_service),
):
    components = await service.needing_maintenance(threshold)
    return success_response(data=dump_all(ComponentResponse, components))


@router.get("/vehicles/{vehicle_id}")
async def get_vehicle_components(vehicle_id: int, service: ComponentService = Depends(get_component_service)):
    components = await service.list_for_vehicle(vehicle_id)
    return success_response(data=dump_all(ComponentResponse, components))


@router.post("/{component_id}/usage")
async def record_usage(
    component_id: int,
    payload: UsageUpdate,
    service: ComponentService = Depends(get_component_service),
):
    component = await service.record_usage(component_id, payload.hours)
    if not component:
        raise HTTPException(status_code=404, detail="Component not found")
    return success_response(data=ComponentResponse.model_validate(component).model_dump())


@router.delete("/{component_id}")
async def delete_component(component_id: int, service: ComponentService = Depends(get_component_service)):
    if not await service.delete_component(component_id):
        raise HTTPException(status_code=404, detail="Component not found")
    return success_response(message="Component deleted")
