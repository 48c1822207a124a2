import html
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

SUBMISSION_FIELDS = ("name", "email", "message")


class Submission(BaseModel):
    """
    Contact form payload as received by the relay.

    The relay does not validate the fields: missing or null values become
    empty strings, numbers are turned into text and unknown keys are dropped.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str = ""
    email: str = ""
    message: str = ""

    @field_validator("name", "email", "message", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Optional[Any]) -> Any:
        return "" if value is None else value


def render_contact_html(submission: Submission, escape: bool = False) -> str:
    # With escape=False the submitted values are embedded as-is, so any
    # markup in them ends up in the email.
    values = {}
    for field in SUBMISSION_FIELDS:
        raw = getattr(submission, field)
        values[field] = html.escape(raw) if escape else raw

    return (
        f"<p>Name: {values['name']}</p>"
        f"<p>Email: {values['email']}</p>"
        f"<p>Message: {values['message']}</p>"
    )
