import os
from typing import List, Optional

import pytest

os.environ.setdefault("GMAIL_USER", "owner@example.com")
os.environ.setdefault("GMAIL_PASS", "app-password")
os.environ.setdefault("CORS_ORIGINS", "*")

from relay.core.settings import Settings
from relay.main import create_app


class FakeSMTP:
    """Stands in for smtplib.SMTP_SSL and records what the relay does with it."""

    def __init__(self, recorder: "SmtpRecorder", host: str, port: int, *args, **kwargs):
        self.recorder = recorder
        self.host = host
        self.port = port
        self.logged_in = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def login(self, user, password):
        if self.recorder.login_error is not None:
            raise self.recorder.login_error
        self.logged_in = (user, password)

    def send_message(self, msg):
        if self.recorder.send_error is not None:
            raise self.recorder.send_error
        self.recorder.sent.append(msg)


class SmtpRecorder:
    def __init__(self):
        self.connections: List[FakeSMTP] = []
        self.sent = []
        self.login_error: Optional[Exception] = None
        self.send_error: Optional[Exception] = None

    def factory(self, host, port, *args, **kwargs):
        conn = FakeSMTP(self, host, port, *args, **kwargs)
        self.connections.append(conn)
        return conn

    def html_bodies(self) -> List[str]:
        return [m.get_payload(decode=True).decode("utf-8") for m in self.sent]


@pytest.fixture
def smtp(monkeypatch):
    recorder = SmtpRecorder()
    monkeypatch.setattr("smtplib.SMTP_SSL", recorder.factory)
    return recorder


def make_settings(**overrides) -> Settings:
    values = {
        "GMAIL_USER": "owner@example.com",
        "GMAIL_PASS": "app-password",
        "CORS_ORIGINS": "*",
        "SMTP_HOST": "smtp.gmail.com",
        "SMTP_PORT": 465,
        "MAIL_ESCAPE_HTML": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def relay_app():
    return create_app(make_settings())
