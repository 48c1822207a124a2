# backend/relay/dependencies.py
from fastapi import HTTPException, Request

from relay.core.mailer import Mailer
from relay.core.settings import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_mailer(request: Request) -> Mailer:
    mailer = getattr(request.app.state, "mailer", None)
    if mailer is None:
        # create_app() always sets this; only reachable for a hand-built app
        raise HTTPException(status_code=500, detail="Mailer is not initialised")
    return mailer
