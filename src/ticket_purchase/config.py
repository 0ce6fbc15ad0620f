"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    payment_service_url: str
    seat_reservation_service_url: str
    account_service_url: str | None = None
    static_account_balance: int = 400
    http_timeout_seconds: float = 10
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("payment_service_url", "seat_reservation_service_url")
    @classmethod
    def _require_base_url(cls, value: str) -> str:
        cleaned = normalize_base_url(value)
        if cleaned is None:
            raise ValueError("Service URL cannot be blank")
        return cleaned

    @field_validator("account_service_url")
    @classmethod
    def _optional_base_url(cls, value: str | None) -> str | None:
        return normalize_base_url(value)


def normalize_base_url(raw: str | None) -> str | None:
    """Strip whitespace and trailing slashes; blank values become None."""
    if raw is None:
        return None
    cleaned = raw.strip().rstrip("/")
    return cleaned or None
