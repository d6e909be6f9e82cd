"""Delivers domain events as notifications once the write has committed"""

import logging
from typing import Iterable

from fastapi import BackgroundTasks

from .email_service import EmailService
from ...domain.events.user_events import UserRegistered, PasswordResetRequested
from ...domain.events.order_events import OrderPlaced

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Outbox for best-effort side effects.

    Use cases hand over the events of a committed transaction; delivery runs
    as a background task after the response is sent. A failing delivery is
    logged and dropped: it never reaches the caller and is never retried.
    """

    def __init__(self, email_service: EmailService, background_tasks: BackgroundTasks):
        self.email_service = email_service
        self.background_tasks = background_tasks

    def publish(self, events: Iterable) -> None:
        for event in events:
            self.background_tasks.add_task(self.deliver, event)

    async def deliver(self, event) -> None:
        try:
            if isinstance(event, UserRegistered):
                await self.email_service.send_verification_otp(
                    to_email=str(event.email),
                    name=event.name,
                    otp=event.otp
                )
            elif isinstance(event, OrderPlaced):
                await self.email_service.send_order_confirmation(
                    to_email=str(event.user_email),
                    name=event.user_name,
                    model_name=event.model_name,
                    price_range=event.price_range
                )
                await self.email_service.send_admin_order_alert(
                    user_name=event.user_name,
                    user_phone=event.user_phone,
                    model_name=event.model_name,
                    factory_name=event.factory_name
                )
            elif isinstance(event, PasswordResetRequested):
                await self.email_service.send_password_reset_email(
                    to_email=str(event.email),
                    name=event.name,
                    reset_token=event.token
                )
            else:
                logger.debug("No notification for %s", type(event).__name__)
        except Exception:
            logger.exception("Notification delivery failed for %s", type(event).__name__)
