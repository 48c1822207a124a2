# relay/routers/health.py
from fastapi import APIRouter, Depends

from relay.core.mailer import Mailer
from relay.core.settings import Settings
from relay.dependencies import get_mailer, get_settings

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
async def health_root():
    return {"status": "ok"}

@router.get("/mail")
async def health_mail(
    mailer: Mailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
):
    # config only; the provider is never contacted from here
    return {
        "ok": mailer.config.credentials_configured,
        "smtp_host": settings.smtp_host,
        "smtp_port": settings.smtp_port,
        "user_configured": bool(settings.gmail_user),
    }
