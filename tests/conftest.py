"""Shared fixtures: in-memory database, recording mail service, auth helpers"""

import os
import tempfile

os.environ["TESTING"] = "true"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="getfurnitures-uploads-")
os.environ["ADMIN_EMAIL"] = "alerts@getfurnitures.test"

import pytest
from fastapi.testclient import TestClient

from getfurnitures.main import app
from getfurnitures.api.dependencies import get_email_service
from getfurnitures.db.database import engine
from getfurnitures.db.models import Base
from getfurnitures.infrastructure.external_services.email_service import EmailService


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 128


class RecordingEmailService(EmailService):
    """Keeps every message in memory instead of talking to SMTP"""

    def __init__(self):
        super().__init__()
        self.sent = []
        self.otps = {}
        self.reset_tokens = {}

    async def send_email(self, to_email, subject, html_content, text_content=None):
        self.sent.append({"to": to_email, "subject": subject, "html": html_content})
        return True

    async def send_verification_otp(self, to_email, name, otp):
        self.otps[to_email] = otp
        return await super().send_verification_otp(to_email, name, otp)

    async def send_password_reset_email(self, to_email, name, reset_token):
        self.reset_tokens[to_email] = reset_token
        return await super().send_password_reset_email(to_email, name, reset_token)

    def subjects_for(self, to_email):
        return [message["subject"] for message in self.sent if message["to"] == to_email]


@pytest.fixture
def email_service():
    return RecordingEmailService()


@pytest.fixture
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(email_service, tables):
    app.dependency_overrides[get_email_service] = lambda: email_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


def register_user(client, email="jane@example.com", password="secret123", **overrides):
    payload = {
        "name": "Jane Doe",
        "email": email,
        "phone": "9876543210",
        "password": password,
        "address": "12 Lake Road",
    }
    payload.update(overrides)
    return client.post("/public/user-register", json=payload)


@pytest.fixture
def user_token(client, email_service):
    """A registered, verified user's token"""
    register_user(client)
    otp = email_service.otps["jane@example.com"]
    response = client.post("/public/email-otp", json={"email": "jane@example.com", "otp": otp})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_token(client):
    client.post(
        "/public/admin-register",
        json={"name": "Admin", "email": "admin@example.com", "password": "adminpass"}
    )
    response = client.post(
        "/public/admin-login",
        json={"email": "admin@example.com", "password": "adminpass"}
    )
    assert response.status_code == 200
    return response.json()["token"]


def add_product(client, admin_token, images=1, **overrides):
    data = {
        "modelName": "Oslo",
        "category": "sofa",
        "description": "Three seater",
        "minPrice": "15000",
        "maxPrice": "22000",
        "manufacturerName": "Ravi",
        "manufacturerPhone": "9000000001",
        "factoryName": "Ravi Woodworks",
    }
    data.update(overrides)
    files = [("images", (f"photo{i}.png", PNG_BYTES, "image/png")) for i in range(images)]
    return client.post(
        "/private/add-product",
        data=data,
        files=files,
        headers=auth_header(admin_token)
    )


@pytest.fixture
def product_id(client, admin_token):
    response = add_product(client, admin_token)
    assert response.status_code == 201
    return response.json()["product"]["id"]
