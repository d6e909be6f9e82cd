"""Profile, password change and password reset"""

from datetime import datetime, timedelta

from getfurnitures.db.database import SessionLocal
from getfurnitures.infrastructure.orm import PasswordResetTokenORM
from tests.conftest import auth_header


def login(client, password):
    return client.post("/public/user-login", json={"email": "jane@example.com", "password": password})


def test_profile(client, user_token):
    response = client.get("/private/me", headers=auth_header(user_token))

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "jane@example.com"
    assert body["phone"] == "9876543210"
    assert body["isVerified"] is True


def test_update_user(client, user_token):
    headers = auth_header(user_token)
    response = client.post(
        "/private/update-user",
        json={"userInput": {"name": "Jane Smith", "address": "4 Hill Street"}},
        headers=headers
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Jane Smith"
    assert response.json()["phone"] == "9876543210"

    blank = client.post("/private/update-user", json={"userInput": {"name": " "}}, headers=headers)
    assert blank.status_code == 400


def test_update_password(client, user_token):
    headers = auth_header(user_token)

    wrong = client.post(
        "/private/update-password",
        json={"oldPassword": "nope", "newPassword": "another1"},
        headers=headers
    )
    short = client.post(
        "/private/update-password",
        json={"oldPassword": "secret123", "newPassword": "abc"},
        headers=headers
    )
    assert wrong.status_code == 401
    assert short.status_code == 400

    ok = client.post(
        "/private/update-password",
        json={"oldPassword": "secret123", "newPassword": "another1"},
        headers=headers
    )
    assert ok.status_code == 200
    assert login(client, "another1").status_code == 200


def test_forgot_password_unknown_email(client):
    response = client.post("/public/forgot-password", json={"email": "nobody@example.com"})
    assert response.status_code == 404


def test_reset_password(client, email_service, user_token):
    assert client.post("/public/forgot-password", json={"email": "jane@example.com"}).status_code == 200
    token = email_service.reset_tokens["jane@example.com"]
    assert len(token) == 64

    reset_mail = [m for m in email_service.sent if m["subject"] == "Password Reset"][0]
    assert f"/public/reset-password/{token}" in reset_mail["html"]

    response = client.post(f"/public/reset-password/{token}", json={"password": "brandnew1"})
    assert response.status_code == 200

    assert login(client, "secret123").status_code == 401
    assert login(client, "brandnew1").status_code == 200

    reused = client.post(f"/public/reset-password/{token}", json={"password": "again123"})
    assert reused.status_code == 400
    assert reused.json()["code"] == "validation_error"


def test_new_reset_request_replaces_old_token(client, email_service, user_token):
    client.post("/public/forgot-password", json={"email": "jane@example.com"})
    first = email_service.reset_tokens["jane@example.com"]
    client.post("/public/forgot-password", json={"email": "jane@example.com"})
    second = email_service.reset_tokens["jane@example.com"]

    stale = client.post(f"/public/reset-password/{first}", json={"password": "brandnew1"})
    assert stale.status_code == 400
    assert client.post(f"/public/reset-password/{second}", json={"password": "brandnew1"}).status_code == 200


def test_expired_reset_token(client, email_service, user_token):
    client.post("/public/forgot-password", json={"email": "jane@example.com"})
    token = email_service.reset_tokens["jane@example.com"]

    db = SessionLocal()
    try:
        db.query(PasswordResetTokenORM).update(
            {PasswordResetTokenORM.expires_at: datetime.utcnow() - timedelta(minutes=1)}
        )
        db.commit()
    finally:
        db.close()

    expired = client.post(f"/public/reset-password/{token}", json={"password": "brandnew1"})
    assert expired.status_code == 400
    assert expired.json()["code"] == "expired"

    assert login(client, "secret123").status_code == 200

    gone = client.post(f"/public/reset-password/{token}", json={"password": "brandnew1"})
    assert gone.json()["code"] == "validation_error"


def test_reset_password_enforces_minimum_length(client, email_service, user_token):
    client.post("/public/forgot-password", json={"email": "jane@example.com"})
    token = email_service.reset_tokens["jane@example.com"]

    short = client.post(f"/public/reset-password/{token}", json={"password": "abc"})
    assert short.status_code == 400
    assert short.json()["code"] == "validation_error"

    assert login(client, "secret123").status_code == 200
    assert client.post(f"/public/reset-password/{token}", json={"password": "brandnew1"}).status_code == 200
