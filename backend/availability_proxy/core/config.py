from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode
from typing import Annotated, Optional, List
from dataclasses import dataclass
from datetime import time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import json
import logging

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

MISSING_CATEGORY_POLICIES = ("empty", "unavailable")


class Settings(BaseSettings):
    # Environment
    environment: str = "development"
    port: int = 8000

    # FastAPI & CORS
    cors_origins: Annotated[List[str], NoDecode] = ["*"]

    # Mews Connector API Configuration
    mews_client_token: Optional[str] = None
    mews_access_token: Optional[str] = None
    mews_service_id: Optional[str] = None
    mews_connector_api_url: Optional[str] = "https://api.mews.com"
    mews_client_name: str = "AvailabilityProxy 1.0"
    mews_timeout_seconds: float = 15.0

    # Start of the upstream day (check-in anchor), e.g. "14:00" in mews_timezone
    mews_day_start: Optional[str] = None
    mews_timezone: str = "UTC"

    # What a category missing from the upstream report means: "empty" or "unavailable"
    missing_category_policy: str = "empty"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields in .env file

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, raw_val):
        if isinstance(raw_val, str):
            # Parse JSON-like strings for lists
            try:
                return json.loads(raw_val)
            except json.JSONDecodeError:
                # Fallback to comma-separated values
                return [item.strip() for item in raw_val.split(',') if item.strip()]
        return raw_val


@dataclass(frozen=True)
class UpstreamConfig:
    """Validated, read-only view of the settings the resolver needs."""

    client_token: str
    access_token: str
    service_id: str
    base_url: str
    client_name: str
    day_start: time
    timezone: ZoneInfo
    timeout_seconds: float = 15.0
    missing_category_policy: str = "empty"

    @property
    def availability_endpoint(self) -> str:
        return f"{self.base_url}/api/connector/v1/services/getAvailability"


def parse_day_start(raw: str) -> time:
    """Parse an ``HH:MM`` or ``HH:MM:SS`` anchor into a naive time."""
    parts = raw.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() and len(p) == 2 for p in parts):
        raise ValueError(f"expected HH:MM or HH:MM:SS, got {raw!r}")
    hour, minute = int(parts[0]), int(parts[1])
    second = int(parts[2]) if len(parts) == 3 else 0
    return time(hour, minute, second)


def load_upstream_config(settings: Settings) -> UpstreamConfig:
    """
    Build the upstream configuration once, at startup.

    Raises ConfigurationError listing every missing or malformed key, so a
    misconfigured deployment fails before serving traffic.
    """
    problems = []

    required = {
        "MEWS_CLIENT_TOKEN": settings.mews_client_token,
        "MEWS_ACCESS_TOKEN": settings.mews_access_token,
        "MEWS_SERVICE_ID": settings.mews_service_id,
        "MEWS_CONNECTOR_API_URL": settings.mews_connector_api_url,
        "MEWS_DAY_START": settings.mews_day_start,
    }
    for key, value in required.items():
        if not (value or "").strip():
            problems.append(f"{key} is missing")

    base_url = (settings.mews_connector_api_url or "").strip().rstrip("/")
    if base_url and not base_url.startswith(("http://", "https://")):
        problems.append("MEWS_CONNECTOR_API_URL must be an http(s) URL")

    day_start = None
    if (settings.mews_day_start or "").strip():
        try:
            day_start = parse_day_start(settings.mews_day_start)
        except ValueError as e:
            problems.append(f"MEWS_DAY_START is malformed ({e})")

    zone = None
    try:
        zone = ZoneInfo(settings.mews_timezone)
    except (ZoneInfoNotFoundError, ValueError):
        problems.append(f"MEWS_TIMEZONE {settings.mews_timezone!r} is not a known time zone")

    if settings.missing_category_policy not in MISSING_CATEGORY_POLICIES:
        problems.append(
            f"MISSING_CATEGORY_POLICY must be one of {', '.join(MISSING_CATEGORY_POLICIES)}"
        )

    if settings.mews_timeout_seconds <= 0:
        problems.append("MEWS_TIMEOUT_SECONDS must be positive")

    if problems:
        logger.error(f"Invalid upstream configuration: {'; '.join(problems)}")
        raise ConfigurationError("; ".join(problems))

    return UpstreamConfig(
        client_token=settings.mews_client_token.strip(),
        access_token=settings.mews_access_token.strip(),
        service_id=settings.mews_service_id.strip(),
        base_url=base_url,
        client_name=settings.mews_client_name,
        day_start=day_start,
        timezone=zone,
        timeout_seconds=settings.mews_timeout_seconds,
        missing_category_policy=settings.missing_category_policy,
    )


settings = Settings()
