"""
Unit tests for the notification webhook router.
"""

import pytest
from functools import partial
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app
from app.application.use_cases.notification_email_use_cases import (
    NotificationEmailDispatcher,
    DispatcherConfig
)
from app.domain.models.user import UserProfile
from app.domain.repositories.user_repository import UserProfileRepository
from app.domain.services.email_service import EmailSender
from app.infrastructure.email.template_loader import EmailTemplateLoader
from app.infrastructure.supabase_client import create_supabase_client
from app.infrastructure.web.dependencies import (
    build_notification_dispatcher,
    get_notification_dispatcher
)


URL = "/api/v1/webhooks/notifications"
SECRET = "s3cret"


class StaticUserRepository(UserProfileRepository):
    def __init__(self, users):
        self.users = users

    async def get_by_id(self, user_id):
        return self.users.get(user_id)


class RecordingEmailSender(EmailSender):
    def __init__(self, configured=True):
        self.configured = configured
        self.sent = []

    @property
    def is_configured(self):
        return self.configured

    async def send(self, message):
        self.sent.append(message)


def insert_payload(**record_overrides):
    record = {
        "id": "n1",
        "userId": "u1",
        "type": "grade",
        "title": "Midterm Graded",
        "message": "You scored 92",
        "createdAt": "2026-10-19T15:27:00Z",
    }
    record.update(record_overrides)
    return {
        "type": "INSERT",
        "table": "notifications",
        "schema": "public",
        "record": record,
        "old_record": None,
    }


@pytest.fixture
def sender():
    return RecordingEmailSender()


@pytest.fixture
def client(sender):
    dispatcher = NotificationEmailDispatcher(
        config=DispatcherConfig(sender_address="courses@example.com", timezone="UTC"),
        user_repository=StaticUserRepository({
            "u1": UserProfile(id="u1", email="a@b.com", full_name="Ana"),
            "u2": UserProfile(id="u2", username="bo"),
        }),
        email_sender=sender,
        template_loader=EmailTemplateLoader()
    )
    app.dependency_overrides[get_notification_dispatcher] = lambda: dispatcher
    app.dependency_overrides[get_settings] = lambda: Settings(webhook_secret=SECRET, _env_file=None)
    yield TestClient(app)
    app.dependency_overrides.clear()


def post(client, payload, secret=SECRET):
    headers = {"X-Webhook-Secret": secret} if secret else {}
    return client.post(URL, json=payload, headers=headers)


class TestNotificationWebhook:
    """Test cases for the notification webhook endpoint."""

    def test_insert_sends_email(self, client, sender):
        """Test an insert is emailed to the addressed user."""
        response = post(client, insert_payload())

        assert response.status_code == 200
        assert response.json() == {"status": "sent", "notification_id": "n1"}
        assert len(sender.sent) == 1
        assert sender.sent[0].to == "a@b.com"
        assert sender.sent[0].subject == "⭐ Midterm Graded"

    def test_missing_user_still_200(self, client, sender):
        """Test skipped deliveries answer 200 so the webhook is not retried."""
        response = post(client, insert_payload(userId="ghost"))

        assert response.status_code == 200
        assert response.json()["status"] == "skipped_user_not_found"
        assert sender.sent == []

    def test_user_without_email(self, client, sender):
        """Test a user without email is skipped."""
        response = post(client, insert_payload(userId="u2"))

        assert response.json()["status"] == "skipped_no_email"
        assert sender.sent == []

    def test_invalid_record(self, client, sender):
        """Test a malformed row is skipped."""
        payload = insert_payload()
        del payload["record"]["message"]

        response = post(client, payload)

        assert response.status_code == 200
        assert response.json()["status"] == "skipped_invalid"

    def test_update_is_ignored(self, client, sender):
        """Test non-insert events are acknowledged and ignored."""
        payload = {**insert_payload(), "type": "UPDATE"}

        response = post(client, payload)

        assert response.json() == {"status": "ignored"}
        assert sender.sent == []

    def test_other_table_is_ignored(self, client, sender):
        """Test events for other tables are ignored."""
        payload = {**insert_payload(), "table": "submissions"}

        assert post(client, payload).json() == {"status": "ignored"}

    def test_wrong_secret(self, client, sender):
        """Test a bad secret is rejected."""
        response = post(client, insert_payload(), secret="nope")

        assert response.status_code == 401
        assert sender.sent == []

    def test_missing_secret(self, client, sender):
        """Test a missing secret is rejected."""
        response = post(client, insert_payload(), secret=None)

        assert response.status_code == 401

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


def unconfigured_settings(**overrides):
    values = dict(
        supabase_url=None,
        supabase_service_key=None,
        smtp_user=None,
        smtp_password=None,
        webhook_secret=SECRET,
        _env_file=None
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def wired_client():
    """Client whose dispatcher is wired from settings like in production."""
    def use(settings, email_sender=None):
        dispatcher = build_notification_dispatcher(
            settings,
            client_factory=partial(create_supabase_client, settings),
            email_sender=email_sender
        )
        app.dependency_overrides[get_notification_dispatcher] = lambda: dispatcher
        app.dependency_overrides[get_settings] = lambda: settings
        return TestClient(app)

    yield use
    app.dependency_overrides.clear()


class TestNotificationWebhookWiring:
    """Test cases for the webhook with a dispatcher built from settings."""

    def test_nothing_configured_skips(self, wired_client):
        """Test missing Supabase and SMTP settings answer 200 skipped_not_configured."""
        client = wired_client(unconfigured_settings())

        response = post(client, insert_payload())

        assert response.status_code == 200
        assert response.json() == {"status": "skipped_not_configured", "notification_id": "n1"}

    def test_missing_supabase_is_failed_not_http_error(self, wired_client):
        """Test a lookup that cannot reach Supabase becomes a failed outcome."""
        sender = RecordingEmailSender()
        settings = unconfigured_settings(smtp_user="courses@example.com", smtp_password="app-password")
        client = wired_client(settings, email_sender=sender)

        response = post(client, insert_payload())

        assert response.status_code == 200
        assert response.json() == {"status": "failed", "notification_id": "n1"}
        assert sender.sent == []
