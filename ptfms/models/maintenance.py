import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, Float, Date, DateTime, ForeignKey

from ptfms.database import Base


class MaintenanceStatus(str, enum.Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class MaintenanceRecord(Base):
    __tablename__ = "maintenance"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False)
    service_date = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    cost = Column(Float, nullable=True)
    status = Column(String, nullable=False, default=MaintenanceStatus.PENDING.value)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
