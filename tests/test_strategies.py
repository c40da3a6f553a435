from datetime import date, datetime, timedelta, timezone

import pytest

from ptfms.models.maintenance import MaintenanceRecord
from ptfms.models.vehicle import Vehicle
from ptfms.services.maintenance_strategies import (
    PredictiveMaintenanceStrategy,
    StrategyRegistry,
    StrategyType,
    TimeBasedMaintenanceStrategy,
    UsageBasedMaintenanceStrategy,
    latest_service_record,
    parse_strategy_type,
)

NOW = datetime(2025, 9, 1, 12, 0, tzinfo=timezone.utc)


def _vehicle(vehicle_type="Bus", status="Active", year=2020):
    return Vehicle(vin="1HGCM82633A004352", vehicle_number="BUS001", vehicle_type=vehicle_type, status=status, year=year)


def _record(service_date, status="Completed", record_id=1):
    return MaintenanceRecord(id=record_id, vehicle_id=1, service_date=service_date, description="service", status=status)


@pytest.mark.parametrize("vehicle_type,expected", [
    ("Bus", 60),
    ("van", 90),
    ("TRUCK", 45),
    ("Diesel Bus", 90),
    (None, 90),
])
def test_time_based_interval_by_type(vehicle_type, expected):
    assert TimeBasedMaintenanceStrategy().get_maintenance_interval(_vehicle(vehicle_type=vehicle_type)) == expected


@pytest.mark.parametrize("status,expected", [
    ("Active", 30),
    ("in-service", 30),
    ("Maintenance", 180),
    ("Available", 90),
    ("Retired", 120),
])
def test_usage_based_interval_by_status(status, expected):
    assert UsageBasedMaintenanceStrategy().get_maintenance_interval(_vehicle(status=status)) == expected


@pytest.mark.parametrize("vehicle_type,year,expected", [
    ("Other", 2024, 90),
    ("Other", 2021, 60),
    ("Other", 2018, 45),
    ("Other", 2010, 30),
    ("Bus", 2024, 72),
    ("Van", 2024, 81),
    ("Truck", 2010, 21),
    ("Van", 2010, 27),
])
def test_predictive_interval_by_age_and_type(vehicle_type, year, expected):
    strategy = PredictiveMaintenanceStrategy()
    assert strategy.get_maintenance_interval(_vehicle(vehicle_type=vehicle_type, year=year), NOW) == expected


def test_predictive_interval_never_below_minimum():
    strategy = PredictiveMaintenanceStrategy()
    for vehicle_type in ("bus", "van", "truck", "other"):
        for year in (None, 1990, 2016, 2021, 2025):
            assert strategy.get_maintenance_interval(_vehicle(vehicle_type=vehicle_type, year=year), NOW) >= 14


def test_predictive_treats_unknown_year_as_oldest():
    strategy = PredictiveMaintenanceStrategy()
    unknown = _vehicle(vehicle_type="Other", year=None)
    old = _vehicle(vehicle_type="Other", year=2000)
    assert strategy.get_maintenance_interval(unknown, NOW) == strategy.get_maintenance_interval(old, NOW)
    assert strategy.due_buffer_days(unknown, NOW) == 14


def test_next_date_from_last_service():
    strategy = TimeBasedMaintenanceStrategy()
    last = _record(date(2025, 7, 1))
    next_date = strategy.calculate_next_maintenance_date(_vehicle(vehicle_type="Bus"), last, NOW)
    assert next_date == datetime(2025, 8, 30, tzinfo=timezone.utc)


def test_next_date_without_history_counts_from_now():
    strategy = TimeBasedMaintenanceStrategy()
    next_date = strategy.calculate_next_maintenance_date(_vehicle(vehicle_type="Bus"), None, NOW)
    assert next_date == NOW + timedelta(days=60)


def test_is_due_inside_buffer_window():
    strategy = TimeBasedMaintenanceStrategy()
    vehicle = _vehicle(vehicle_type="Bus")
    # next date 2025-09-05, buffer 7 days
    last = _record(date(2025, 7, 7))
    assert strategy.is_maintenance_due(vehicle, last, NOW)


def test_is_not_due_before_buffer_window():
    strategy = TimeBasedMaintenanceStrategy()
    vehicle = _vehicle(vehicle_type="Bus")
    last = _record(date(2025, 8, 1))
    assert not strategy.is_maintenance_due(vehicle, last, NOW)


def test_never_serviced_vehicle_is_not_due_immediately():
    assert not TimeBasedMaintenanceStrategy().is_maintenance_due(_vehicle(), None, NOW)


def test_usage_based_buffer_is_shorter_for_active_vehicles():
    strategy = UsageBasedMaintenanceStrategy()
    assert strategy.due_buffer_days(_vehicle(status="Active"), NOW) == 3
    assert strategy.due_buffer_days(_vehicle(status="Available"), NOW) == 7


def test_latest_service_record_ignores_pending_and_cancelled():
    records = [
        _record(date(2025, 7, 1), record_id=1),
        _record(date(2025, 8, 20), status="Pending", record_id=2),
        _record(date(2025, 8, 1), record_id=3),
        _record(date(2025, 8, 25), status="Cancelled", record_id=4),
    ]
    assert latest_service_record(records).id == 3


def test_latest_service_record_empty():
    assert latest_service_record([]) is None
    assert latest_service_record([_record(date(2025, 8, 1), status="Pending")]) is None


def test_parse_strategy_type():
    assert parse_strategy_type("Predictive") is StrategyType.PREDICTIVE
    assert parse_strategy_type(" usage ") is StrategyType.USAGE
    assert parse_strategy_type("weekly") is None
    assert parse_strategy_type(None) is None


def test_registry_select_and_reject_unknown():
    registry = StrategyRegistry()
    assert registry.current_type is StrategyType.TIME

    assert registry.select("predictive")
    assert registry.current.strategy_type == "Predictive"

    assert not registry.select("weekly")
    assert registry.current_type is StrategyType.PREDICTIVE


def test_registry_unknown_default_falls_back_to_time():
    assert StrategyRegistry("weekly").current_type is StrategyType.TIME


def test_registry_available():
    assert StrategyRegistry().available() == {
        "time": "Time-Based",
        "usage": "Usage-Based",
        "predictive": "Predictive",
    }


def test_predictive_twelve_year_old_bus():
    strategy = PredictiveMaintenanceStrategy()
    assert strategy.get_maintenance_interval(_vehicle(vehicle_type="bus", year=2013), NOW) == 24
