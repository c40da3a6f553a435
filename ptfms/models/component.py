import enum

from sqlalchemy import Column, String, Integer, Float, ForeignKey

from ptfms.database import Base


class ComponentStatus(str, enum.Enum):
    GOOD = "Good"
    WARNING = "Warning"
    CRITICAL = "Critical"


class VehicleComponent(Base):
    __tablename__ = "vehicle_components"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False)
    component_name = Column(String, nullable=False)
    usage_hours = Column(Float, nullable=False, default=0.0)
    max_hours = Column(Float, nullable=True)  # alert threshold
    status = Column(String, nullable=False, default=ComponentStatus.GOOD.value)
