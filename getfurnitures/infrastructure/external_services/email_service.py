"""Email service for account and order notifications"""

import asyncio
import html
import logging
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional

from ...core.config import settings
from ...domain.value_objects.price_range import PriceRange

logger = logging.getLogger(__name__)


class EmailService:

    def __init__(self):
        self.smtp_host = settings.SMTP_HOST
        self.smtp_port = settings.SMTP_PORT
        self.smtp_username = settings.SMTP_USERNAME
        self.smtp_password = settings.SMTP_PASSWORD
        self.smtp_use_tls = settings.SMTP_USE_TLS
        self.from_email = settings.FROM_EMAIL
        self.from_name = settings.FROM_NAME
        self.admin_email = settings.ADMIN_EMAIL
        self.frontend_url = settings.FRONTEND_URL

    async def send_email(self,
                         to_email: str,
                         subject: str,
                         html_content: str,
                         text_content: Optional[str] = None) -> bool:
        """Send an HTML email. Never raises: failures are logged and reported as False."""
        try:
            logger.info("Sending email to %s: %s", to_email, subject)

            msg = MIMEMultipart('alternative')
            msg['Subject'] = subject
            msg['From'] = f"{self.from_name} <{self.from_email}>"
            msg['To'] = to_email

            if text_content:
                msg.attach(MIMEText(text_content, 'plain'))
            msg.attach(MIMEText(html_content, 'html'))

            await self._send_smtp_email(msg)

            logger.info("Email sent successfully to %s", to_email)
            return True

        except Exception as e:
            logger.error("Error sending email to %s: %s", to_email, e)
            return False

    async def _send_smtp_email(self, msg: MIMEMultipart):
        """Send email via SMTP"""
        def send_sync():
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=30) as server:
                if self.smtp_use_tls:
                    server.starttls()
                if self.smtp_username:
                    server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

        # Run in thread pool to avoid blocking
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, send_sync)

    async def send_verification_otp(self, to_email: str, name: str, otp: int) -> bool:
        """Send the registration OTP"""
        subject = "Email Verification OTP"
        safe_name = html.escape(name)
        html_content = f"""
        <p>Hello <b>{safe_name}</b>,</p>
        <p>Thank you for creating an account with <b>{self.from_name}</b>. Please use the OTP below to verify your email address:</p>
        <div style="text-align: center; margin: 30px 0;">
          <div style="display: inline-block; background: linear-gradient(135deg, #4F46E5, #7C3AED); padding: 20px 40px; border-radius: 12px;">
            <span style="font-size: 32px; font-weight: bold; color: #ffffff; letter-spacing: 8px; font-family: 'Courier New', monospace;">{otp}</span>
          </div>
        </div>
        <p style="color: #6b7280; font-size: 14px;">If you didn't request this, please ignore this email.</p>
        <p>Best Regards,<br><b>{self.from_name} Team</b></p>
        """
        text_content = f"Hello {name}, your {self.from_name} verification code is {otp}."
        return await self.send_email(to_email, subject, html_content, text_content)

    async def send_order_confirmation(
        self,
        to_email: str,
        name: str,
        model_name: str,
        price_range: PriceRange
    ) -> bool:
        """Tell the user their order request was received"""
        subject = f"Order Confirmation - {self.from_name}"
        safe_name = html.escape(name)
        safe_model = html.escape(model_name)
        html_content = f"""
        <p>Dear {safe_name},</p>
        <p>Thank you for placing an order for <b>{safe_model}</b>.<br>
        Our team will respond to you within 4-5 hours to confirm the details and process your request.</p>
        <p><b>Target Price Range:</b> &#8377;{price_range.min:g} - &#8377;{price_range.max:g}</p>
        <p>Best Regards,<br>{self.from_name} Team</p>
        """
        return await self.send_email(to_email, subject, html_content)

    async def send_admin_order_alert(
        self,
        user_name: str,
        user_phone: str,
        model_name: str,
        factory_name: str
    ) -> bool:
        """Alert the admin mailbox about a new order"""
        subject = f"New Order Received - {self.from_name}"
        html_content = f"""
        <p><b>New Order Alert!</b></p>
        <p>A new order has been placed.</p>
        <p><b>User:</b> {html.escape(user_name)} ({html.escape(user_phone)})<br>
        <b>Product:</b> {html.escape(model_name)}<br>
        <b>Factory:</b> {html.escape(factory_name)}</p>
        <p>Please check the admin dashboard for more details.</p>
        """
        return await self.send_email(self.admin_email, subject, html_content)

    async def send_password_reset_email(self, to_email: str, name: str, reset_token: str) -> bool:
        """Send password reset email"""
        reset_url = f"{self.frontend_url}/public/reset-password/{reset_token}"
        subject = "Password Reset"
        safe_name = html.escape(name)
        html_content = f"""
        <p>Hello <b>{safe_name}</b>,</p>
        <p>You requested to reset your password. Please use the link below to reset your password:</p>
        <a href="{reset_url}" style="display: inline-block; padding: 12px 24px; background-color: #4F46E5; color: white; text-decoration: none; border-radius: 6px; font-weight: bold; margin-top: 20px;">Reset Password</a>
        <p style="color: #6b7280; font-size: 14px;">This link will expire in {settings.PASSWORD_RESET_EXPIRE_MINUTES} minutes. If you didn't request this, please ignore this email.</p>
        <p>Best Regards,<br><b>{self.from_name} Team</b></p>
        """
        text_content = f"Reset your {self.from_name} password: {reset_url}"
        return await self.send_email(to_email, subject, html_content, text_content)
