from datetime import date, datetime

from pydantic import BaseModel, Field

from ptfms.models.maintenance import MaintenanceStatus


class MaintenanceCreate(BaseModel):
    vehicle_id: int
    service_date: date
    description: str = Field(min_length=1)
    cost: float | None = Field(default=None, ge=0)
    status: MaintenanceStatus | None = None

    model_config = {"use_enum_values": True}


class MaintenanceStatusUpdate(BaseModel):
    status: MaintenanceStatus

    model_config = {"use_enum_values": True}


class MaintenanceResponse(BaseModel):
    id: int
    vehicle_id: int
    service_date: date
    description: str
    cost: float | None = None
    status: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class MaintenanceForecast(BaseModel):
    vehicle_id: int
    strategy: str
    interval_days: int
    last_service_date: date | None = None
    next_maintenance_date: datetime
    maintenance_due: bool
