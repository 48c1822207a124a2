# relay/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    api_title: str = Field(default="Contact Relay API", alias="API_TITLE")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3001, alias="PORT")

    # "*" lets any origin call the relay
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    # Operator mailbox: used for login, sender and recipient
    gmail_user: Optional[str] = Field(default=None, alias="GMAIL_USER")
    # Gmail App Password, not the account password
    gmail_pass: Optional[str] = Field(default=None, alias="GMAIL_PASS")

    smtp_host: str = Field(default="smtp.gmail.com", alias="SMTP_HOST")
    smtp_port: int = Field(default=465, alias="SMTP_PORT")

    mail_subject: str = Field(default="New Contact Form Submission", alias="MAIL_SUBJECT")
    mail_escape_html: bool = Field(default=False, alias="MAIL_ESCAPE_HTML")

    # Where the form client posts submissions
    contact_endpoint_url: str = Field(
        default="https://my-contact-form-backend.onrender.com",
        alias="CONTACT_ENDPOINT_URL",
    )

    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]
