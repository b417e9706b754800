import smtplib

import pytest
from fastapi import BackgroundTasks

from stockflow.application.ports.notifier import AlertDelivery
from stockflow.application.services.alert_delivery_service import AlertDeliveryService
from stockflow.core.config import Settings
from stockflow.exceptions import DeliveryFailure
from stockflow.infrastructure.email.dispatchers import BackgroundAlertDispatcher
from stockflow.infrastructure.email.smtp_notifier import SmtpNotifier


DELIVERY = AlertDelivery(
    notification_id=4,
    recipient="alice@example.com",
    subject="Low Stock Alert: Widget",
    html_body="<p>low</p>",
    text_body="low",
)


class FakeNotificationRepo:
    def __init__(self):
        self.sent = []

    def mark_sent(self, ids):
        self.sent.extend(ids)
        return len(ids)


class FailingNotifier:
    def send(self, recipient, subject, html_body, text_body):
        raise DeliveryFailure(recipient, "connection refused")


def test_successful_delivery_marks_notification_sent(notifier):
    repo = FakeNotificationRepo()
    assert AlertDeliveryService(notifier, repo).deliver(DELIVERY) is True
    assert notifier.sent == [("alice@example.com", "Low Stock Alert: Widget")]
    assert repo.sent == [4]


def test_failed_delivery_is_logged_and_not_marked(caplog):
    repo = FakeNotificationRepo()
    assert AlertDeliveryService(FailingNotifier(), repo).deliver(DELIVERY) is False
    assert repo.sent == []
    assert "not delivered" in caplog.text


class FakeSMTP:
    instances = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.calls = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.calls.append("starttls")

    def login(self, user, password):
        self.calls.append(("login", user))

    def sendmail(self, sender, recipients, body):
        self.calls.append(("sendmail", sender, tuple(recipients)))


def smtp_settings(**overrides):
    values = dict(SMTP_HOST="smtp.test", SMTP_PORT=2525, SMTP_USER="stock@test", SMTP_PASSWORD="pw")
    values.update(overrides)
    return Settings(**values)


def test_smtp_notifier_sends_through_configured_server():
    FakeSMTP.instances.clear()
    SmtpNotifier(smtp_settings(), smtp_factory=FakeSMTP).send("bob@example.com", "Subj", "<b>x</b>", "x")
    server = FakeSMTP.instances[0]
    assert (server.host, server.port) == ("smtp.test", 2525)
    assert server.calls == ["starttls", ("login", "stock@test"), ("sendmail", "stock@test", ("bob@example.com",))]


def test_smtp_errors_become_delivery_failures():
    class BrokenSMTP(FakeSMTP):
        def sendmail(self, sender, recipients, body):
            raise smtplib.SMTPRecipientsRefused({recipients[0]: (550, b"no such user")})

    with pytest.raises(DeliveryFailure) as info:
        SmtpNotifier(smtp_settings(), smtp_factory=BrokenSMTP).send("ghost@example.com", "S", "h", "t")
    assert info.value.recipient == "ghost@example.com"


def test_background_dispatcher_defers_delivery(notifier):
    tasks = BackgroundTasks()
    opened = []

    class FakeSession:
        def __enter__(self):
            opened.append(self)
            return self

        def __exit__(self, *exc):
            return False

    dispatcher = BackgroundAlertDispatcher(tasks, notifier, FakeSession)
    dispatcher.dispatch(DELIVERY)
    assert notifier.sent == []
    assert len(tasks.tasks) == 1
    assert opened == []


def test_relay_without_login_counts_as_configured():
    config = Settings(SMTP_HOST="localhost", SMTP_USER="", MAIL_FROM="alerts@example.com")
    assert config.email_configured is True
    assert config.mail_sender == "alerts@example.com"


def test_email_needs_a_sender_address():
    assert Settings(SMTP_HOST="localhost", SMTP_USER="", MAIL_FROM="").email_configured is False
    assert Settings(SMTP_HOST="", SMTP_USER="stock@test").email_configured is False


def test_smtp_notifier_skips_login_without_user():
    FakeSMTP.instances.clear()
    config = smtp_settings(SMTP_USER="", SMTP_PASSWORD="", SMTP_USE_TLS=False, MAIL_FROM="alerts@example.com")
    SmtpNotifier(config, smtp_factory=FakeSMTP).send("bob@example.com", "Subj", "<b>x</b>", "x")
    assert FakeSMTP.instances[0].calls == [("sendmail", "alerts@example.com", ("bob@example.com",))]
