from datetime import datetime

from pydantic import BaseModel, Field

from ptfms.models.alert import AlertType


class AlertCreate(BaseModel):
    vehicle_id: int
    alert_type: AlertType
    message: str = Field(min_length=1)

    model_config = {"use_enum_values": True}


class AlertResponse(BaseModel):
    id: int
    vehicle_id: int
    alert_type: str
    message: str
    status: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class ObserverCreate(BaseModel):
    channel: str
    recipient: str = Field(min_length=1)


class ObserverResponse(BaseModel):
    observer_type: str
    recipient: str
