import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, Float, DateTime, ForeignKey

from ptfms.database import Base


class GPSEventType(str, enum.Enum):
    ARRIVAL = "ARRIVAL"
    DEPARTURE = "DEPARTURE"
    LOCATION = "LOCATION"


class GPSTracking(Base):
    __tablename__ = "gps_tracking"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    timestamp = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    operator_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    station_id = Column(String, nullable=True)
    event_type = Column(String, nullable=False, default=GPSEventType.LOCATION.value)
    speed = Column(Float, nullable=True)  # km/h
    notes = Column(String, nullable=True)
