"""Alert fan-out to notification channels."""
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ptfms.models.alert import Alert

logger = logging.getLogger(__name__)
channel_logger = logging.getLogger("ptfms.notifications")


class AlertObserver(ABC):
    observer_type: str

    @abstractmethod
    def update(self, alert: Alert) -> None:
        """Deliver ``alert`` through this channel."""

    @property
    @abstractmethod
    def recipient(self) -> str:
        ...


class EmailAlertObserver(AlertObserver):
    observer_type = "Email"

    def __init__(self, email_address: str):
        self.email_address = email_address

    @property
    def recipient(self) -> str:
        return self.email_address

    def format_message(self, alert: Alert) -> str:
        return (
            f"Subject: [PTFMS] {alert.alert_type} alert for vehicle {alert.vehicle_id}\n"
            f"Alert Type: {alert.alert_type}\n"
            f"Message: {alert.message}\n"
            f"Status: {alert.status}"
        )

    def update(self, alert: Alert) -> None:
        channel_logger.info("EMAIL to %s\n%s", self.email_address, self.format_message(alert))


class SMSAlertObserver(AlertObserver):
    observer_type = "SMS"

    MAX_LENGTH = 160

    def __init__(self, phone_number: str):
        self.phone_number = phone_number

    @property
    def recipient(self) -> str:
        return self.phone_number

    def format_message(self, alert: Alert) -> str:
        text = f"PTFMS {alert.alert_type} (vehicle {alert.vehicle_id}): {alert.message}"
        return text if len(text) <= self.MAX_LENGTH else text[: self.MAX_LENGTH - 3] + "..."

    def update(self, alert: Alert) -> None:
        channel_logger.info("SMS to %s: %s", self.phone_number, self.format_message(alert))


@dataclass
class NotificationFailure:
    observer: AlertObserver
    error: Exception


class AlertSubject:
    """Ordered, duplicate-free set of observers (compared by identity)."""

    def __init__(self):
        self._observers: list[AlertObserver] = []
        self._lock = threading.Lock()

    def add_observer(self, observer: AlertObserver) -> None:
        with self._lock:
            if not any(o is observer for o in self._observers):
                self._observers.append(observer)

    def remove_observer(self, observer: AlertObserver) -> None:
        with self._lock:
            self._observers = [o for o in self._observers if o is not observer]

    @property
    def observers(self) -> list[AlertObserver]:
        with self._lock:
            return list(self._observers)

    @property
    def observer_count(self) -> int:
        with self._lock:
            return len(self._observers)

    def notify_observers(self, alert: Alert) -> list[NotificationFailure]:
        """Call every observer in registration order.

        A failing observer does not stop the others; its error is logged and
        returned so the caller can decide what to do with it.
        """
        failures: list[NotificationFailure] = []
        for observer in self.observers:
            try:
                observer.update(alert)
            except Exception as e:
                logger.exception("%s observer failed for alert %s", observer.observer_type, alert.id)
                failures.append(NotificationFailure(observer=observer, error=e))
        return failures
