"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

EMAIL_PROVIDERS = ("resend", "sendgrid")
SMS_PROVIDERS = ("twilio", "fast2sms")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    restaurant_name: str = "Vilas's RestoCafe"
    log_level: str = "INFO"
    restaurant_timezone: str = "Asia/Kolkata"
    catalog_path: str | None = None
    email_from: str = "RestoCafe <noreply@restocafe.com>"
    email_providers: str = ",".join(EMAIL_PROVIDERS)
    sms_providers: str = ",".join(SMS_PROVIDERS)
    resend_api_key: str | None = None
    sendgrid_api_key: str | None = None
    twilio_account_sid: str | None = None
    twilio_auth_token: str | None = None
    twilio_phone_number: str | None = None
    twilio_whatsapp_number: str | None = None
    fast2sms_api_key: str | None = None
    vapid_public_key: str | None = None
    vapid_private_key: str | None = None
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_provider_order(raw: str | None, known: tuple[str, ...]) -> list[str]:
    """Parse a comma-separated provider preference list from env."""
    if raw is None:
        return list(known)
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return list(known)
    order: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().lower()
        if value in known and value not in order:
            order.append(value)
    return order
