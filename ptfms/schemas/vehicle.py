from datetime import datetime

from pydantic import BaseModel, Field

from ptfms.models.vehicle import FuelType, VehicleStatus


class VehicleCreate(BaseModel):
    vin: str = Field(min_length=17, max_length=17)
    vehicle_number: str = Field(min_length=1, max_length=20)
    vehicle_type: str = Field(min_length=1)
    make: str | None = None
    model: str | None = None
    year: int | None = Field(default=None, ge=1900)
    fuel_type: FuelType | None = None
    consumption_rate: float | None = Field(default=None, gt=0)
    max_passengers: int | None = Field(default=None, ge=0)
    current_route: str | None = None
    status: VehicleStatus | None = None

    model_config = {"use_enum_values": True}


class VehicleUpdate(BaseModel):
    vehicle_number: str | None = Field(default=None, min_length=1, max_length=20)
    vehicle_type: str | None = None
    make: str | None = None
    model: str | None = None
    year: int | None = Field(default=None, ge=1900)
    fuel_type: FuelType | None = None
    consumption_rate: float | None = Field(default=None, gt=0)
    max_passengers: int | None = Field(default=None, ge=0)
    current_route: str | None = None
    status: VehicleStatus | None = None

    model_config = {"use_enum_values": True}


class VehicleStatusUpdate(BaseModel):
    status: VehicleStatus

    model_config = {"use_enum_values": True}


class VehicleResponse(BaseModel):
    id: int
    vin: str
    vehicle_number: str
    vehicle_type: str
    make: str | None = None
    model: str | None = None
    year: int | None = None
    fuel_type: str
    consumption_rate: float | None = None
    max_passengers: int | None = None
    current_route: str | None = None
    status: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
