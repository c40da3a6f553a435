"""Process-wide collaborators shared by every request.

The strategy registry, the alert subject and the command history hold
in-memory state, so each is built once and handed to the services that
need it. Tests swap them through ``app.dependency_overrides``.
"""
from functools import lru_cache

from fastapi import Depends

from ptfms.config import settings
from ptfms.services.alert_service import AlertService
from ptfms.services.commands import CommandHistory
from ptfms.services.component_service import ComponentService
from ptfms.services.fuel_service import FuelService
from ptfms.services.gps_service import GPSService
from ptfms.services.maintenance_service import MaintenanceService
from ptfms.services.maintenance_strategies import StrategyRegistry
from ptfms.services.notifications import AlertSubject, EmailAlertObserver, SMSAlertObserver
from ptfms.services.report_service import ReportService
from ptfms.services.vehicle_service import VehicleService


@lru_cache
def get_alert_subject() -> AlertSubject:
    subject = AlertSubject()
    for address in settings.alert_email_recipients:
        subject.add_observer(EmailAlertObserver(address))
    for number in settings.alert_sms_recipients:
        subject.add_observer(SMSAlertObserver(number))
    return subject


@lru_cache
def get_strategy_registry() -> StrategyRegistry:
    return StrategyRegistry(settings.maintenance_strategy)


@lru_cache
def get_command_history() -> CommandHistory:
    return CommandHistory()


def get_vehicle_service(history: CommandHistory = Depends(get_command_history)) -> VehicleService:
    return VehicleService(history)


def get_maintenance_service(
    registry: StrategyRegistry = Depends(get_strategy_registry),
    history: CommandHistory = Depends(get_command_history),
) -> MaintenanceService:
    return MaintenanceService(registry, history)


def get_alert_service(subject: AlertSubject = Depends(get_alert_subject)) -> AlertService:
    return AlertService(subject)


def get_fuel_service(
    history: CommandHistory = Depends(get_command_history),
    alert_service: AlertService = Depends(get_alert_service),
) -> FuelService:
    return FuelService(history, alert_service)


def get_gps_service() -> GPSService:
    return GPSService()


def get_component_service() -> ComponentService:
    return ComponentService()


def get_report_service(
    registry: StrategyRegistry = Depends(get_strategy_registry),
    subject: AlertSubject = Depends(get_alert_subject),
) -> ReportService:
    return ReportService(registry, subject)
