from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from ptfms.models.gps_tracking import GPSEventType


class GPSPositionCreate(BaseModel):
    vehicle_id: int
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    timestamp: datetime | None = None
    operator_id: int | None = None
    station_id: str | None = None
    event_type: GPSEventType = GPSEventType.LOCATION.value
    speed: float | None = Field(default=None, ge=0)
    notes: str | None = None

    model_config = {"use_enum_values": True}


class StationEventCreate(BaseModel):
    vehicle_id: int
    station_id: str = Field(min_length=1)
    event_type: Literal["ARRIVAL", "DEPARTURE"]
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    operator_id: int | None = None


class GPSResponse(BaseModel):
    id: int
    vehicle_id: int
    latitude: float
    longitude: float
    timestamp: datetime
    operator_id: int | None = None
    station_id: str | None = None
    event_type: str
    speed: float | None = None
    notes: str | None = None

    model_config = {"from_attributes": True}
