"""Notification delivery never reaches the caller"""

import asyncio

from fastapi import BackgroundTasks

from getfurnitures.domain.events.user_events import UserRegistered
from getfurnitures.domain.value_objects.email import Email
from getfurnitures.domain.value_objects.entity_ids import UserId
from getfurnitures.infrastructure.external_services.notification_dispatcher import NotificationDispatcher
from tests.conftest import RecordingEmailService, register_user


class FailingEmailService(RecordingEmailService):

    async def send_verification_otp(self, to_email, name, otp):
        raise RuntimeError("smtp down")


def test_publish_schedules_background_tasks():
    tasks = BackgroundTasks()
    dispatcher = NotificationDispatcher(RecordingEmailService(), tasks)

    event = UserRegistered(UserId.generate(), Email("a@x.com"), "A", 482913)
    dispatcher.publish([event])

    assert len(tasks.tasks) == 1


def test_delivery_failure_is_swallowed():
    email_service = FailingEmailService()
    dispatcher = NotificationDispatcher(email_service, BackgroundTasks())

    event = UserRegistered(UserId.generate(), Email("a@x.com"), "A", 482913)
    asyncio.run(dispatcher.deliver(event))

    assert email_service.sent == []


def test_registration_survives_mail_failure(client):
    from getfurnitures.main import app
    from getfurnitures.api.dependencies import get_email_service

    app.dependency_overrides[get_email_service] = lambda: FailingEmailService()

    response = register_user(client)
    assert response.status_code == 201
    assert register_user(client).json()["code"] == "conflict"


def test_admin_alert_escapes_user_input():
    email_service = RecordingEmailService()

    asyncio.run(email_service.send_admin_order_alert(
        user_name="<img src=x>",
        user_phone="98765",
        model_name="Oslo & Co",
        factory_name="Ravi"
    ))

    body = email_service.sent[0]["html"]
    assert "&lt;img src=x&gt;" in body
    assert "<img" not in body
    assert "Oslo &amp; Co" in body
