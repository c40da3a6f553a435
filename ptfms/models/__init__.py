from ptfms.models.vehicle import Vehicle, VehicleStatus, FuelType
from ptfms.models.maintenance import MaintenanceRecord, MaintenanceStatus
from ptfms.models.fuel_log import FuelLog
from ptfms.models.alert import Alert, AlertType, AlertStatus
from ptfms.models.gps_tracking import GPSTracking, GPSEventType
from ptfms.models.component import VehicleComponent, ComponentStatus
from ptfms.models.user import User, UserRole, OperatorStatus

__all__ = [
    "Vehicle",
    "VehicleStatus",
    "FuelType",
    "MaintenanceRecord",
    "MaintenanceStatus",
    "FuelLog",
    "Alert",
    "AlertType",
    "AlertStatus",
    "GPSTracking",
    "GPSEventType",
    "VehicleComponent",
    "ComponentStatus",
    "User",
    "UserRole",
    "OperatorStatus",
]
