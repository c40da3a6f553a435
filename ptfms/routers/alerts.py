from fastapi import APIRouter, Depends, HTTPException

from ptfms.dependencies import get_alert_service, get_alert_subject
from ptfms.schemas.alert import AlertCreate, AlertResponse, ObserverCreate, ObserverResponse
from ptfms.services.alert_service import AlertService
from ptfms.services.notifications import AlertSubject, EmailAlertObserver, SMSAlertObserver
from ptfms.utils.exceptions import AppException
from ptfms.utils.response import dump_all, success_response

router = APIRouter(prefix="/alerts", tags=["alerts"])

OBSERVER_CHANNELS = {"email": EmailAlertObserver, "sms": SMSAlertObserver}


def _observer_data(subject: AlertSubject) -> list[dict]:
    return [
        ObserverResponse(observer_type=o.observer_type, recipient=o.recipient).model_dump()
        for o in subject.observers
    ]


@router.get("")
async def get_alerts(
    status: str | None = None,
    alert_type: str | None = None,
    vehicle_id: int | None = None,
    service: AlertService = Depends(get_alert_service),
):
    alerts = await service.list_alerts(status=status, alert_type=alert_type, vehicle_id=vehicle_id)
    return success_response(data=dump_all(AlertResponse, alerts))


@router.post("", status_code=201)
async def create_alert(payload: AlertCreate, service: AlertService = Depends(get_alert_service)):
    alert = await service.raise_alert(payload.vehicle_id, payload.alert_type, payload.message)
    return success_response(data=AlertResponse.model_validate(alert).model_dump(), message="Alert raised")


@router.get("/observers")
async def get_observers(subject: AlertSubject = Depends(get_alert_subject)):
    return success_response(data=_observer_data(subject))


@router.post("/observers", status_code=201)
async def add_observer(payload: ObserverCreate, subject: AlertSubject = Depends(get_alert_subject)):
    observer_cls = OBSERVER_CHANNELS.get(payload.channel.strip().lower())
    if observer_cls is None:
        raise AppException(f"Unknown notification channel '{payload.channel}'")
    if any(o.recipient == payload.recipient and isinstance(o, observer_cls) for o in subject.observers):
        raise AppException("Observer already registered", status_code=409)
    subject.add_observer(observer_cls(payload.recipient))
    return success_response(data=_observer_data(subject), message="Observer registered")


@router.delete("/observers")
async def remove_observer(channel: str, recipient: str, subject: AlertSubject = Depends(get_alert_subject)):
    observer_cls = OBSERVER_CHANNELS.get(channel.strip().lower())
    matches = [o for o in subject.observers if isinstance(o, observer_cls or ()) and o.recipient == recipient]
    if not matches:
        raise HTTPException(status_code=404, detail="Observer not found")
    for observer in matches:
        subject.remove_observer(observer)
    return success_response(data=_observer_data(subject), message="Observer removed")


@router.get("/{alert_id}")
async def get_alert(alert_id: int, service: AlertService = Depends(get_alert_service)):
    alert = await service.get_alert(alert_id)
    if not alert:
        raise HTTPException(status_code=404, detail="Alert not found")
    return success_response(data=AlertResponse.model_validate(alert).model_dump())


@router.put("/{alert_id}/resolve")
async def resolve_alert(alert_id: int, service: AlertService = Depends(get_alert_service)):
    alert = await service.resolve(alert_id)
    if not alert:
        raise HTTPException(status_code=404, detail="Alert not found")
    return success_response(data=AlertResponse.model_validate(alert).model_dump(), message="Alert resolved")


@router.delete("/{alert_id}")
async def delete_alert(alert_id: int, service: AlertService = Depends(get_alert_service)):
    if not await service.delete(alert_id):
        raise HTTPException(status_code=404, detail="Alert not found")
    return success_response(message="Alert deleted")
