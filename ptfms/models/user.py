import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, DateTime

from ptfms.database import Base


class UserRole(str, enum.Enum):
    MANAGER = "Manager"
    OPERATOR = "Operator"


class OperatorStatus(str, enum.Enum):
    ON_DUTY = "On Duty"
    OFF_DUTY = "Off Duty"
    BREAK = "Break"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    username = Column(String, nullable=False, unique=True)
    role = Column(String, nullable=False)
    status = Column(String, nullable=False, default=OperatorStatus.ON_DUTY.value)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
