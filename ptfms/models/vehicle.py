import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, Float, DateTime

from ptfms.database import Base


class VehicleStatus(str, enum.Enum):
    ACTIVE = "Active"
    MAINTENANCE = "Maintenance"
    AVAILABLE = "Available"


class FuelType(str, enum.Enum):
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    CNG = "CNG"
    HYBRID = "Hybrid"


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vin = Column(String(17), nullable=False, unique=True)
    vehicle_number = Column(String(20), nullable=False, unique=True)
    vehicle_type = Column(String, nullable=False)
    make = Column(String, nullable=True)
    model = Column(String, nullable=True)
    year = Column(Integer, nullable=True)
    fuel_type = Column(String, nullable=False, default=FuelType.DIESEL.value)
    consumption_rate = Column(Float, nullable=True)  # L/100km or kWh/100km
    max_passengers = Column(Integer, nullable=True)
    current_route = Column(String, nullable=True)
    status = Column(String, nullable=False, default=VehicleStatus.AVAILABLE.value)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
