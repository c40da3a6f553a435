import logging

from ptfms.dao import VehicleDAO
from ptfms.models.vehicle import FuelType, Vehicle, VehicleStatus
from ptfms.services.commands import AddVehicleCommand, CommandHistory
from ptfms.utils.exceptions import AppException

logger = logging.getLogger(__name__)

FUEL_TYPE_BY_VEHICLE_TYPE = {
    "electric bus": FuelType.ELECTRIC,
    "electric light rail": FuelType.ELECTRIC,
    "cng bus": FuelType.CNG,
}

VIN_LENGTH = 17


def default_fuel_type(vehicle_type: str | None) -> str:
    return FUEL_TYPE_BY_VEHICLE_TYPE.get((vehicle_type or "").strip().lower(), FuelType.DIESEL).value


class VehicleService:
    def __init__(self, history: CommandHistory, vehicle_dao: VehicleDAO | None = None):
        self.history = history
        self.vehicle_dao = vehicle_dao or VehicleDAO()

    async def _check_unique(self, vehicle: Vehicle) -> None:
        by_vin = await self.vehicle_dao.find_by_vin(vehicle.vin)
        if by_vin is not None and by_vin.id != vehicle.id:
            raise AppException(f"A vehicle with VIN {vehicle.vin} already exists", status_code=409)
        by_number = await self.vehicle_dao.find_by_number(vehicle.vehicle_number)
        if by_number is not None and by_number.id != vehicle.id:
            raise AppException(f"Vehicle number {vehicle.vehicle_number} is already in use", status_code=409)

    @staticmethod
    def _check_required(vehicle: Vehicle) -> None:
        if not (vehicle.vin or "").strip():
            raise AppException("VIN is required")
        if len(vehicle.vin.strip()) != VIN_LENGTH:
            raise AppException(f"VIN must be {VIN_LENGTH} characters")
        if not (vehicle.vehicle_number or "").strip():
            raise AppException("Vehicle number is required")
        if not (vehicle.vehicle_type or "").strip():
            raise AppException("Vehicle type is required")

    async def register_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """Validate, fill defaults and insert through an undoable command."""
        self._check_required(vehicle)
        vehicle.vin = vehicle.vin.strip().upper()
        await self._check_unique(vehicle)

        if not vehicle.fuel_type:
            vehicle.fuel_type = default_fuel_type(vehicle.vehicle_type)
        if not vehicle.status:
            vehicle.status = VehicleStatus.AVAILABLE.value

        result = await self.history.run(AddVehicleCommand(vehicle, dao=self.vehicle_dao))
        if not result:
            raise AppException("Could not save vehicle", status_code=500)
        logger.info("Registered vehicle %s (%s)", vehicle.vehicle_number, vehicle.id)
        return vehicle

    async def get_vehicle(self, vehicle_id: int) -> Vehicle | None:
        if vehicle_id <= 0:
            return None
        return await self.vehicle_dao.get(vehicle_id)

    async def list_vehicles(
        self,
        status: str | None = None,
        vehicle_type: str | None = None,
        search: str | None = None,
    ) -> list[Vehicle]:
        if status:
            vehicles = await self.vehicle_dao.find_by_status(status)
        else:
            vehicles = await self.vehicle_dao.list_all()

        if vehicle_type:
            vehicles = [v for v in vehicles if (v.vehicle_type or "").lower() == vehicle_type.lower()]

        if search and search.strip():
            term = search.strip().lower()
            vehicles = [
                v for v in vehicles
                if any(term in (field or "").lower() for field in (v.vin, v.vehicle_number, v.make, v.model))
            ]
        return vehicles

    async def update_vehicle(self, vehicle_id: int, changes: dict) -> Vehicle | None:
        vehicle = await self.get_vehicle(vehicle_id)
        if vehicle is None:
            return None
        for field, value in changes.items():
            setattr(vehicle, field, value)
        self._check_required(vehicle)
        await self._check_unique(vehicle)
        if not await self.vehicle_dao.update(vehicle):
            raise AppException("Could not update vehicle", status_code=500)
        return vehicle

    async def update_status(self, vehicle_id: int, status: str) -> Vehicle | None:
        return await self.update_vehicle(vehicle_id, {"status": status})

    async def delete_vehicle(self, vehicle_id: int) -> bool:
        if vehicle_id <= 0:
            return False
        return await self.vehicle_dao.delete(vehicle_id)

    async def count_by_status(self) -> dict[str, int]:
        counts = {status.value: 0 for status in VehicleStatus}
        for vehicle in await self.vehicle_dao.list_all():
            counts[vehicle.status] = counts.get(vehicle.status, 0) + 1
        return counts
