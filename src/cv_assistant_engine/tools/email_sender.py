"""Email delivery over SMTP."""

from __future__ import annotations

import asyncio
from email.mime.multipart import MIMEMultipart
from typing import TYPE_CHECKING

import structlog

from cv_assistant_core.exceptions import EmailDeliveryError, EmailNotConfiguredError

if TYPE_CHECKING:
    from cv_assistant_core.config.settings import Settings

logger = structlog.get_logger()


class EmailSender:
    """Send plain-text notifications (with an HTML alternative) via SMTP."""

    def __init__(
        self,
        smtp_host: str = "smtp.gmail.com",
        smtp_port: int = 587,
        smtp_user: str = "",
        smtp_password: str = "",
        start_tls: bool = True,
    ) -> None:
        """Initialize with SMTP configuration."""
        self._smtp_host = smtp_host
        self._smtp_port = smtp_port
        self._smtp_user = smtp_user
        self._smtp_password = smtp_password
        self._start_tls = start_tls

    @classmethod
    def from_settings(cls, settings: Settings) -> EmailSender:
        """Build a sender from application settings."""
        password = settings.smtp_password.get_secret_value() if settings.smtp_password else ""
        return cls(
            smtp_host=settings.smtp_host,
            smtp_port=settings.smtp_port,
            smtp_user=settings.smtp_user,
            smtp_password=password,
            start_tls=settings.smtp_start_tls,
        )

    @property
    def configured(self) -> bool:
        return bool(self._smtp_user and self._smtp_password)

    async def send(self, to_email: str, subject: str, body: str) -> bool:
        """Send an email.

        Raises:
            EmailNotConfiguredError: If SMTP credentials are missing.
            EmailDeliveryError: If the SMTP exchange fails.
        """
        if not self.configured:
            msg = (
                "SMTP credentials not configured. "
                "Please set CVA_SMTP_USER and CVA_SMTP_PASSWORD environment variables."
            )
            raise EmailNotConfiguredError(msg)
        try:
            return await self._send_smtp(to_email, subject, body)
        except EmailDeliveryError:
            raise
        except Exception as e:
            logger.error("email_send_failed", to=to_email, error=str(e))
            msg = f"Failed to send email: {e}"
            raise EmailDeliveryError(msg) from e

    async def _send_smtp(self, to_email: str, subject: str, body: str) -> bool:
        """Send via SMTP using aiosmtplib."""
        import aiosmtplib

        msg = await asyncio.to_thread(self._build_message, to_email, subject, body)
        await aiosmtplib.send(
            msg,
            hostname=self._smtp_host,
            port=self._smtp_port,
            username=self._smtp_user,
            password=self._smtp_password,
            start_tls=self._start_tls,
        )
        logger.info("email_sent_smtp", to=to_email)
        return True

    def _build_message(self, to_email: str, subject: str, body: str) -> MIMEMultipart:
        """Build a multipart/alternative message with plain and HTML bodies."""
        from email.mime.text import MIMEText

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self._smtp_user
        msg["To"] = to_email
        msg.attach(MIMEText(body, "plain"))
        msg.attach(MIMEText(body.replace("\n", "<br>"), "html"))
        return msg

    async def verify_connection(self) -> bool:
        """Check that the SMTP server accepts a connection (and login, if configured)."""
        import aiosmtplib

        smtp = aiosmtplib.SMTP(
            hostname=self._smtp_host,
            port=self._smtp_port,
            start_tls=self._start_tls,
        )
        try:
            await smtp.connect()
            if self.configured:
                await smtp.login(self._smtp_user, self._smtp_password)
            await smtp.quit()
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.warning("smtp_verify_failed", host=self._smtp_host, error=str(e))
            return False
        logger.info("smtp_verified", host=self._smtp_host)
        return True
