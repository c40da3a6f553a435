from datetime import date

from fastapi import APIRouter, Depends

from ptfms.dependencies import get_report_service
from ptfms.services.report_service import ReportService
from ptfms.utils.exceptions import AppException
from ptfms.utils.response import success_response

router = APIRouter(prefix="/reports", tags=["reports"])


def _check_period(start: date | None, end: date | None) -> None:
    if start and end and start > end:
        raise AppException("Start date must not be after end date")


@router.get("/fleet-summary")
async def get_fleet_summary(service: ReportService = Depends(get_report_service)):
    return success_response(data=await service.fleet_summary())


@router.get("/maintenance-costs")
async def get_maintenance_costs(
    start: date | None = None,
    end: date | None = None,
    service: ReportService = Depends(get_report_service),
):
    _check_period(start, end)
    return success_response(data=await service.maintenance_costs(start, end))


@router.get("/fuel-consumption")
async def get_fuel_consumption(
    start: date | None = None,
    end: date | None = None,
    service: ReportService = Depends(get_report_service),
):
    _check_period(start, end)
    return success_response(data=await service.fuel_consumption(start, end))
