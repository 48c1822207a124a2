# relay/client/contact_form.py
import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

import httpx

from relay.core.settings import Settings
from relay.lib.email_body import SUBMISSION_FIELDS

log = logging.getLogger("uvicorn.error")

FormStatus = Literal["idle", "sending", "success", "error", "invalid"]

SUCCESS_TEXT = "Thanks! Your message has been sent."
ERROR_TEXT = "Sorry, your message could not be sent. Please try again later."
INVALID_TEXT = "Please fill in your name, email and message."


@dataclass
class SubmitResult:
    status: Literal["success", "error", "invalid", "busy"]
    http_status: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"


def _empty_fields() -> Dict[str, str]:
    return {field: "" for field in SUBMISSION_FIELDS}


class ContactForm:
    """
    Client side of the contact form.

    Holds the three fields, posts them once per submit and keeps the
    outcome in `status` / `status_message` so a UI can render it.
    A submit issued while another one is in flight is refused with
    status "busy" instead of sending a duplicate.
    """

    def __init__(self, endpoint_url: str, http_client: Optional[httpx.AsyncClient] = None):
        self.endpoint_url = endpoint_url
        self._http_client = http_client
        self.fields: Dict[str, str] = _empty_fields()
        self.status: FormStatus = "idle"
        self.status_message: str = ""
        self._in_flight = False

    @classmethod
    def from_settings(cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> "ContactForm":
        return cls(settings.contact_endpoint_url, http_client=http_client)

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def update_field(self, name: str, value: str) -> None:
        if name not in self.fields:
            raise KeyError(f"unknown contact form field: {name}")
        self.fields = {**self.fields, name: value}

    def missing_fields(self) -> List[str]:
        return [f for f in SUBMISSION_FIELDS if not (self.fields.get(f) or "").strip()]

    def reset(self) -> None:
        self.fields = _empty_fields()

    async def _post(self, payload: Dict[str, str]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(self.endpoint_url, json=payload)
        async with httpx.AsyncClient() as client:
            return await client.post(self.endpoint_url, json=payload)

    async def submit(self) -> SubmitResult:
        if self._in_flight:
            log.info("[contact-form] submit ignored, previous submission still in flight")
            return SubmitResult(status="busy")

        missing = self.missing_fields()
        if missing:
            self.status = "invalid"
            self.status_message = INVALID_TEXT
            return SubmitResult(status="invalid")

        payload = dict(self.fields)
        self._in_flight = True
        self.status = "sending"
        self.status_message = ""
        try:
            resp = await self._post(payload)
        except httpx.HTTPError as exc:
            log.error(f"[contact-form] error sending email: {exc!r}")
            result = SubmitResult(status="error")
        else:
            if resp.is_success:
                log.info("[contact-form] email sent successfully")
                result = SubmitResult(status="success", http_status=resp.status_code)
            else:
                log.error(f"[contact-form] failed to send email: {resp.status_code}")
                result = SubmitResult(status="error", http_status=resp.status_code)
        finally:
            self._in_flight = False
            self.reset()

        self.status = result.status
        self.status_message = SUCCESS_TEXT if result.ok else ERROR_TEXT
        return result
