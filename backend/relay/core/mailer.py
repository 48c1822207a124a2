# relay/core/mailer.py
import logging
import smtplib
from dataclasses import dataclass
from email.mime.text import MIMEText
from typing import Literal, Optional

from fastapi.concurrency import run_in_threadpool

from relay.core.settings import Settings
from relay.lib.email_body import Submission, render_contact_html

log = logging.getLogger("uvicorn.error")


class MailerNotConfigured(RuntimeError):
    pass


@dataclass(frozen=True)
class MailConfig:
    user: Optional[str]
    password: Optional[str]
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    subject: str = "New Contact Form Submission"
    escape_html: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "MailConfig":
        return cls(
            user=settings.gmail_user,
            password=settings.gmail_pass,
            smtp_host=settings.smtp_host,
            smtp_port=settings.smtp_port,
            subject=settings.mail_subject,
            escape_html=settings.mail_escape_html,
        )

    @property
    def credentials_configured(self) -> bool:
        return bool(self.user and self.password)


@dataclass(frozen=True)
class SendResult:
    status: Literal["sent", "failed"]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "sent"


def build_message(config: MailConfig, submission: Submission) -> MIMEText:
    """The relay always mails itself: sender and recipient are the operator mailbox."""
    mailbox = config.user or ""
    msg = MIMEText(render_contact_html(submission, escape=config.escape_html), "html", "utf-8")
    msg["Subject"] = config.subject
    msg["From"] = mailbox
    msg["To"] = mailbox
    return msg


def deliver(config: MailConfig, msg: MIMEText) -> None:
    """Blocking SMTP hand-off. Raises whatever the transport raises."""
    if not config.credentials_configured:
        raise MailerNotConfigured("GMAIL_USER / GMAIL_PASS are not set")

    with smtplib.SMTP_SSL(config.smtp_host, config.smtp_port) as smtp:
        smtp.login(config.user, config.password)
        smtp.send_message(msg)


class Mailer:
    def __init__(self, config: MailConfig):
        self.config = config

    async def send(self, submission: Submission) -> SendResult:
        """
        Builds one email for the submission and hands it to the transport once.
        Never raises: a message that cannot be built or delivered becomes
        a failed SendResult.
        """
        try:
            msg = build_message(self.config, submission)
            await run_in_threadpool(deliver, self.config, msg)
        except Exception as exc:
            log.exception(f"[mailer] send via {self.config.smtp_host}:{self.config.smtp_port} failed: {exc!r}")
            return SendResult(status="failed", error=str(exc))

        log.info(f"[mailer] contact email accepted for {self.config.user}")
        return SendResult(status="sent")
