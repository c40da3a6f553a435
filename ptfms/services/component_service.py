from ptfms.config import settings
from ptfms.dao import VehicleComponentDAO, VehicleDAO
from ptfms.models.component import ComponentStatus, VehicleComponent
from ptfms.utils.exceptions import AppException, NotFoundException


def derive_status(usage_hours: float, max_hours: float | None, warning_ratio: float) -> str:
    if not max_hours:
        return ComponentStatus.GOOD.value
    if usage_hours >= max_hours:
        return ComponentStatus.CRITICAL.value
    if usage_hours >= max_hours * warning_ratio:
        return ComponentStatus.WARNING.value
    return ComponentStatus.GOOD.value


class ComponentService:
    def __init__(
        self,
        component_dao: VehicleComponentDAO | None = None,
        vehicle_dao: VehicleDAO | None = None,
        warning_ratio: float | None = None,
    ):
        self.component_dao = component_dao or VehicleComponentDAO()
        self.vehicle_dao = vehicle_dao or VehicleDAO()
        self.warning_ratio = settings.component_warning_ratio if warning_ratio is None else warning_ratio

    async def add_component(self, component: VehicleComponent) -> VehicleComponent:
        if await self.vehicle_dao.get(component.vehicle_id) is None:
            raise NotFoundException("Vehicle not found")
        component.usage_hours = component.usage_hours or 0.0
        component.status = derive_status(component.usage_hours, component.max_hours, self.warning_ratio)
        if not await self.component_dao.add(component):
            raise AppException("Could not save component", status_code=500)
        return component

    async def get_component(self, component_id: int) -> VehicleComponent | None:
        return await self.component_dao.get(component_id)

    async def list_for_vehicle(self, vehicle_id: int) -> list[VehicleComponent]:
        return await self.component_dao.list_by_vehicle(vehicle_id)

    async def record_usage(self, component_id: int, hours: float) -> VehicleComponent | None:
        if hours <= 0:
            raise AppException("Usage hours must be greater than zero")
        component = await self.component_dao.get(component_id)
        if component is None:
            return None
        component.usage_hours = (component.usage_hours or 0.0) + hours
        component.status = derive_status(component.usage_hours, component.max_hours, self.warning_ratio)
        if not await self.component_dao.update(component):
            raise AppException("Could not update component", status_code=500)
        return component

    async def needing_maintenance(self, threshold: float | None = None) -> list[VehicleComponent]:
        return await self.component_dao.needing_maintenance(self.warning_ratio if threshold is None else threshold)

    async def delete_component(self, component_id: int) -> bool:
        return await self.component_dao.delete(component_id)
