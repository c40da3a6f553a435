from pydantic import BaseModel, Field


class ComponentCreate(BaseModel):
    vehicle_id: int
    component_name: str = Field(min_length=1)
    usage_hours: float = Field(default=0.0, ge=0)
    max_hours: float | None = Field(default=None, gt=0)


class UsageUpdate(BaseModel):
    hours: float = Field(gt=0)


class ComponentResponse(BaseModel):
    id: int
    vehicle_id: int
    component_name: str
    usage_hours: float
    max_hours: float | None = None
    status: str

    model_config = {"from_attributes": True}
