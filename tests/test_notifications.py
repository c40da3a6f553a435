import logging

from ptfms.models.alert import Alert
from ptfms.services.notifications import AlertObserver, AlertSubject, EmailAlertObserver, SMSAlertObserver


class RecordingObserver(AlertObserver):
    observer_type = "Test"

    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    @property
    def recipient(self):
        return self.name

    def update(self, alert):
        self.calls.append(self.name)


class BrokenObserver(RecordingObserver):
    def update(self, alert):
        raise RuntimeError("gateway down")


def _alert(message="Brake check due"):
    return Alert(id=1, vehicle_id=1, alert_type="Maintenance", message=message, status="Open")


def test_add_observer_is_idempotent():
    subject = AlertSubject()
    observer = EmailAlertObserver("a@ptfms.com")
    subject.add_observer(observer)
    subject.add_observer(observer)
    assert subject.observer_count == 1


def test_equal_but_distinct_observers_are_both_kept():
    subject = AlertSubject()
    subject.add_observer(EmailAlertObserver("a@ptfms.com"))
    subject.add_observer(EmailAlertObserver("a@ptfms.com"))
    assert subject.observer_count == 2


def test_remove_observer():
    subject = AlertSubject()
    email = EmailAlertObserver("a@ptfms.com")
    sms = SMSAlertObserver("+15550100")
    subject.add_observer(email)
    subject.add_observer(sms)

    subject.remove_observer(email)
    assert subject.observers == [sms]

    # removing an unknown observer is a no-op
    subject.remove_observer(email)
    assert subject.observer_count == 1


def test_notify_in_registration_order():
    calls = []
    subject = AlertSubject()
    for name in ("first", "second", "third"):
        subject.add_observer(RecordingObserver(name, calls))

    assert subject.notify_observers(_alert()) == []
    assert calls == ["first", "second", "third"]


def test_failing_observer_does_not_stop_the_others():
    calls = []
    subject = AlertSubject()
    broken = BrokenObserver("broken", calls)
    subject.add_observer(RecordingObserver("before", calls))
    subject.add_observer(broken)
    subject.add_observer(RecordingObserver("after", calls))

    failures = subject.notify_observers(_alert())

    assert calls == ["before", "after"]
    assert len(failures) == 1
    assert failures[0].observer is broken
    assert isinstance(failures[0].error, RuntimeError)


def test_observers_returns_a_copy():
    subject = AlertSubject()
    subject.add_observer(EmailAlertObserver("a@ptfms.com"))
    subject.observers.clear()
    assert subject.observer_count == 1


def test_email_message_format():
    text = EmailAlertObserver("a@ptfms.com").format_message(_alert())
    assert text.startswith("Subject: [PTFMS] Maintenance alert for vehicle 1")
    assert "Message: Brake check due" in text
    assert "Status: Open" in text


def test_sms_message_is_truncated():
    text = SMSAlertObserver("+15550100").format_message(_alert("x" * 300))
    assert len(text) == SMSAlertObserver.MAX_LENGTH
    assert text.endswith("...")


def test_channels_log_delivery(caplog):
    with caplog.at_level(logging.INFO, logger="ptfms.notifications"):
        EmailAlertObserver("a@ptfms.com").update(_alert())
        SMSAlertObserver("+15550100").update(_alert())

    assert "EMAIL to a@ptfms.com" in caplog.text
    assert "SMS to +15550100" in caplog.text
