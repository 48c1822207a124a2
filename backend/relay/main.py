# relay/main.py
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from relay.core.mailer import MailConfig, Mailer
from relay.core.settings import Settings
from relay.routers.contact import router as contact_router
from relay.routers.health import router as health_router

log = logging.getLogger("uvicorn.error")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    app = FastAPI(title=settings.api_title)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # read once here; handlers get the mailer through relay.dependencies
    mail_config = MailConfig.from_settings(settings)
    app.state.settings = settings
    app.state.mailer = Mailer(mail_config)

    if not mail_config.credentials_configured:
        log.warning("[main] GMAIL_USER / GMAIL_PASS not set; every submission will fail with 500")
    if not mail_config.escape_html:
        log.warning("[main] contact fields are embedded in the email HTML without escaping (MAIL_ESCAPE_HTML=false)")

    # Routers
    app.include_router(health_router)
    app.include_router(contact_router)

    @app.get("/__routes")
    async def __routes():
        return [
            {"methods": sorted(list(r.methods)), "path": r.path}
            for r in app.routes
            if isinstance(r, APIRoute)
        ]

    return app


app = create_app()


def serve():
    import uvicorn

    settings: Settings = app.state.settings
    log.info(f"[main] listening on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
