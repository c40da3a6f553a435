from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ptfms.models.alert import Alert
from ptfms.models.component import VehicleComponent
from ptfms.models.fuel_log import FuelLog
from ptfms.models.maintenance import MaintenanceRecord
from ptfms.models.user import User
from ptfms.models.vehicle import Vehicle


SEED_USERS = [
    {"id": 1, "name": "John Manager", "email": "john.manager@ptfms.com", "username": "jmanager", "role": "Manager"},
    {"id": 2, "name": "Sarah Operator", "email": "sarah.operator@ptfms.com", "username": "soperator", "role": "Operator"},
    {"id": 3, "name": "Mike Wilson", "email": "mike.wilson@ptfms.com", "username": "mwilson", "role": "Manager"},
]

SEED_VEHICLES = [
    {"id": 1, "vin": "1HGCM82633A004352", "vehicle_number": "BUS001", "vehicle_type": "Diesel Bus", "make": "Volvo",
     "model": "B8RLE", "year": 2020, "fuel_type": "Diesel", "consumption_rate": 35.5, "max_passengers": 40,
     "current_route": "Route 101", "status": "Active"},
    {"id": 2, "vin": "JH4TB2H26CC000000", "vehicle_number": "LRT001", "vehicle_type": "Electric Light Rail",
     "make": "Siemens", "model": "S70", "year": 2021, "fuel_type": "Electric", "consumption_rate": 4.2,
     "max_passengers": 120, "current_route": "Blue Line", "status": "Active"},
    {"id": 3, "vin": "WBAFR9C50BC123456", "vehicle_number": "BUS002", "vehicle_type": "CNG Bus", "make": "New Flyer",
     "model": "Xcelsior", "year": 2019, "fuel_type": "CNG", "consumption_rate": 28.3, "max_passengers": 35,
     "current_route": "Route 205", "status": "Available"},
]

SEED_COMPONENTS = [
    {"vehicle_id": 1, "component_name": "Brake Pads", "usage_hours": 1250.5, "max_hours": 2000, "status": "Good"},
    {"vehicle_id": 1, "component_name": "Engine", "usage_hours": 8500.0, "max_hours": 10000, "status": "Warning"},
    {"vehicle_id": 2, "component_name": "Pantograph", "usage_hours": 3200.0, "max_hours": 5000, "status": "Good"},
]

SEED_FUEL_LOGS = [
    {"vehicle_id": 1, "log_date": date(2025, 8, 1), "fuel_type": "Diesel", "amount": 85.5, "cost": 142.50,
     "distance": 220.3, "operator_id": 2},
    {"vehicle_id": 3, "log_date": date(2025, 8, 2), "fuel_type": "CNG", "amount": 65.2, "cost": 98.30,
     "distance": 199.9, "operator_id": 2},
    {"vehicle_id": 2, "log_date": date(2025, 8, 3), "fuel_type": "Electric", "amount": 124.8, "cost": 18.72,
     "distance": 94.6, "operator_id": 2},
]

SEED_MAINTENANCE = [
    {"vehicle_id": 1, "service_date": date(2025, 7, 15), "description": "Regular oil change and filter replacement",
     "cost": 125.50, "status": "Completed"},
    {"vehicle_id": 1, "service_date": date(2025, 8, 5), "description": "Brake pad inspection and adjustment",
     "cost": 89.75, "status": "Completed"},
    {"vehicle_id": 2, "service_date": date(2025, 7, 20),
     "description": "Pantograph maintenance and electrical system check", "cost": 450.00, "status": "Completed"},
    {"vehicle_id": 2, "service_date": date(2025, 8, 10), "description": "Monthly safety inspection",
     "cost": 75.00, "status": "Pending"},
    {"vehicle_id": 3, "service_date": date(2025, 7, 25),
     "description": "CNG system pressure test and valve maintenance", "cost": 320.25, "status": "Completed"},
    {"vehicle_id": 3, "service_date": date(2025, 8, 8), "description": "Tire rotation and brake system inspection",
     "cost": 150.00, "status": "Pending"},
    {"vehicle_id": 1, "service_date": date(2025, 8, 12), "description": "Engine diagnostic and performance check",
     "cost": 200.00, "status": "Pending"},
]

SEED_ALERTS = [
    {"vehicle_id": 1, "alert_type": "Maintenance", "message": "Engine approaching maximum service hours"},
    {"vehicle_id": 2, "alert_type": "GPS", "message": "Routine inspection due"},
    {"vehicle_id": 3, "alert_type": "Fuel Consumption", "message": "Fuel efficiency below threshold"},
]


async def seed_data(session: AsyncSession) -> None:
    result = await session.execute(select(Vehicle).limit(1))
    if result.scalars().first() is not None:
        return

    for u in SEED_USERS:
        session.add(User(**u))
    for v in SEED_VEHICLES:
        session.add(Vehicle(**v))
    # parents must exist before the rows that reference them
    await session.flush()

    for c in SEED_COMPONENTS:
        session.add(VehicleComponent(**c))
    for f in SEED_FUEL_LOGS:
        session.add(FuelLog(**f))
    for m in SEED_MAINTENANCE:
        session.add(MaintenanceRecord(**m))
    for a in SEED_ALERTS:
        session.add(Alert(**a))

    await session.commit()
