from datetime import date

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from ptfms.database import Base, enable_sqlite_foreign_keys
from ptfms.models import FuelLog, MaintenanceRecord, User, Vehicle, VehicleComponent


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session
    await engine.dispose()


@pytest.mark.asyncio
async def test_create_vehicle_with_defaults(db_session):
    vehicle = Vehicle(vin="1HGCM82633A004352", vehicle_number="BUS001", vehicle_type="Diesel Bus")
    db_session.add(vehicle)
    await db_session.commit()

    result = await db_session.get(Vehicle, vehicle.id)
    assert result is not None
    assert result.fuel_type == "Diesel"
    assert result.status == "Available"
    assert result.created_at is not None


@pytest.mark.asyncio
async def test_vin_is_unique(db_session):
    db_session.add(Vehicle(vin="1HGCM82633A004352", vehicle_number="BUS001", vehicle_type="Bus"))
    await db_session.commit()

    db_session.add(Vehicle(vin="1HGCM82633A004352", vehicle_number="BUS002", vehicle_type="Bus"))
    with pytest.raises(IntegrityError):
        await db_session.commit()


@pytest.mark.asyncio
async def test_create_user(db_session):
    user = User(name="Sarah Operator", email="sarah@ptfms.com", username="soperator", role="Operator")
    db_session.add(user)
    await db_session.commit()

    result = await db_session.get(User, user.id)
    assert result.username == "soperator"
    assert result.status == "On Duty"


@pytest.mark.asyncio
async def test_component_defaults(db_session):
    vehicle = Vehicle(vin="1HGCM82633A004352", vehicle_number="BUS001", vehicle_type="Bus")
    db_session.add(vehicle)
    await db_session.flush()
    component = VehicleComponent(vehicle_id=vehicle.id, component_name="Brake Pads", max_hours=2000)
    db_session.add(component)
    await db_session.commit()

    result = await db_session.get(VehicleComponent, component.id)
    assert result.usage_hours == 0.0
    assert result.status == "Good"


@pytest.mark.asyncio
async def test_deleting_vehicle_cascades(db_session):
    vehicle = Vehicle(vin="1HGCM82633A004352", vehicle_number="BUS001", vehicle_type="Bus")
    db_session.add(vehicle)
    await db_session.flush()
    db_session.add(MaintenanceRecord(vehicle_id=vehicle.id, service_date=date(2025, 8, 1), description="Oil"))
    db_session.add(FuelLog(vehicle_id=vehicle.id, log_date=date(2025, 8, 1), fuel_type="Diesel", amount=40))
    await db_session.commit()

    await db_session.delete(vehicle)
    await db_session.commit()

    assert (await db_session.execute(select(MaintenanceRecord))).scalars().all() == []
    assert (await db_session.execute(select(FuelLog))).scalars().all() == []


@pytest.mark.asyncio
async def test_record_for_unknown_vehicle_is_rejected(db_session):
    db_session.add(MaintenanceRecord(vehicle_id=999, service_date=date(2025, 8, 1), description="Oil"))
    with pytest.raises(IntegrityError):
        await db_session.commit()
