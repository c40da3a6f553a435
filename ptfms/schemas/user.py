from datetime import datetime

from pydantic import BaseModel, Field

from ptfms.models.user import OperatorStatus, UserRole


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    username: str = Field(min_length=1)
    role: UserRole
    status: OperatorStatus = OperatorStatus.ON_DUTY.value

    model_config = {"use_enum_values": True}


class UserStatusUpdate(BaseModel):
    status: OperatorStatus

    model_config = {"use_enum_values": True}


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    username: str
    role: str
    status: str
    created_at: datetime | None = None

    model_config = {"from_attributes": True}
