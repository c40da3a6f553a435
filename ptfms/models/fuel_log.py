from sqlalchemy import Column, String, Integer, Float, Date, ForeignKey

from ptfms.database import Base


class FuelLog(Base):
    __tablename__ = "fuel_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False)
    log_date = Column(Date, nullable=False)
    fuel_type = Column(String, nullable=False)
    amount = Column(Float, nullable=False)  # litres or kWh
    cost = Column(Float, nullable=True)
    distance = Column(Float, nullable=True)  # km
    operator_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
