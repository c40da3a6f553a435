from ptfms.dao.base import BaseDAO
from ptfms.dao.vehicle import VehicleDAO
from ptfms.dao.maintenance import MaintenanceDAO
from ptfms.dao.fuel_log import FuelLogDAO
from ptfms.dao.alert import AlertDAO
from ptfms.dao.gps_tracking import GPSTrackingDAO
from ptfms.dao.component import VehicleComponentDAO
from ptfms.dao.user import UserDAO

__all__ = [
    "BaseDAO",
    "VehicleDAO",
    "MaintenanceDAO",
    "FuelLogDAO",
    "AlertDAO",
    "GPSTrackingDAO",
    "VehicleComponentDAO",
    "UserDAO",
]
