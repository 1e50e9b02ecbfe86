import pytest
from fastapi.testclient import TestClient

from volunteer_hub.core.config import Settings
from volunteer_hub.main import create_application

GATE_CODE = "1957"
PASSWORD = "5791"


@pytest.fixture()
def settings(tmp_path):
    return Settings(
        data_dir=str(tmp_path / "data"),
        storage_backend="json",
        volunteer_gate_code=GATE_CODE,
        organizer_password=PASSWORD,
        email_user=None,
        organizer_email="organizer@example.com",
    )


@pytest.fixture()
def sent_emails():
    return []


@pytest.fixture()
def app(settings, sent_emails):
    application = create_application(settings)
    application.state.email_service.set_sender_override(
        lambda to, subject, html: sent_emails.append({"to": to, "subject": subject, "html": html})
    )
    return application


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def signup_body(**overrides):
    body = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "555-0100",
        "task": "Painting & Touch-ups",
        "notes": "Bringing brushes",
        "gateCode": GATE_CODE,
    }
    body.update(overrides)
    return body
