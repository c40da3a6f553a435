from datetime import date

from pydantic import BaseModel, Field

from ptfms.models.vehicle import FuelType


class FuelLogCreate(BaseModel):
    vehicle_id: int
    log_date: date
    fuel_type: FuelType | None = None
    amount: float = Field(gt=0)
    cost: float = Field(ge=0)
    distance: float | None = Field(default=None, ge=0)
    operator_id: int | None = None

    model_config = {"use_enum_values": True}


class FuelLogResponse(BaseModel):
    id: int
    vehicle_id: int
    log_date: date
    fuel_type: str
    amount: float
    cost: float | None = None
    distance: float | None = None
    operator_id: int | None = None

    model_config = {"from_attributes": True}
