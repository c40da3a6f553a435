import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey

from ptfms.database import Base


class AlertType(str, enum.Enum):
    MAINTENANCE = "Maintenance"
    FUEL_CONSUMPTION = "Fuel Consumption"
    GPS = "GPS"


class AlertStatus(str, enum.Enum):
    OPEN = "Open"
    RESOLVED = "Resolved"


class Alert(Base):
    __tablename__ = "alerts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False)
    alert_type = Column(String, nullable=False)
    message = Column(String, nullable=False)
    status = Column(String, nullable=False, default=AlertStatus.OPEN.value)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
