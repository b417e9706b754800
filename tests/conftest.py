import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from stockflow.db import models  # noqa: F401
from stockflow.db.seed import seed_sectors


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        seed_sectors(session)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


class RecordingNotifier:
    def __init__(self):
        self.sent = []

    def send(self, recipient, subject, html_body, text_body):
        self.sent.append((recipient, subject))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(engine, notifier):
    from stockflow.main import app
    from stockflow.database import get_session
    from stockflow.dependencies import get_alert_dispatcher
    from stockflow.application.services.alert_delivery_service import AlertDeliveryService
    from stockflow.infrastructure.email.dispatchers import InlineAlertDispatcher
    from stockflow.infrastructure.persistence.sqlalchemy.repositories.notification_repository_sql import SqlNotificationRepository

    def _session():
        with Session(engine) as s:
            yield s

    def _dispatcher(s: Session = Depends(get_session)):
        return InlineAlertDispatcher(AlertDeliveryService(notifier, SqlNotificationRepository(s)))

    app.dependency_overrides[get_session] = _session
    app.dependency_overrides[get_alert_dispatcher] = _dispatcher
    yield TestClient(app)
    app.dependency_overrides.clear()
