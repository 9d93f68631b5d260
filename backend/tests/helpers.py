"""Builders for upstream configs and Mews availability reports."""
from datetime import time
from zoneinfo import ZoneInfo

from availability_proxy.core.config import UpstreamConfig

MEWS_URL = "https://api.mews.test/api/connector/v1/services/getAvailability"


def make_config(**overrides) -> UpstreamConfig:
    values = dict(
        client_token="client-token",
        access_token="access-token",
        service_id="service-1",
        base_url="https://api.mews.test",
        client_name="AvailabilityProxy 1.0",
        day_start=time(12, 0),
        timezone=ZoneInfo("UTC"),
        timeout_seconds=5.0,
        missing_category_policy="empty",
    )
    values.update(overrides)
    return UpstreamConfig(**values)


def make_report(days, series) -> dict:
    """Mews getAvailability body with one boundary per day at 12:00 UTC."""
    return {
        "TimeUnitStartsUtc": [f"{day}T12:00:00Z" for day in days],
        "CategoryAvailabilities": [
            {"CategoryId": category_id, "Availabilities": counts, "Adjustments": [0] * len(counts)}
            for category_id, counts in series.items()
        ],
    }


APRIL_DAYS = [f"2025-04-0{i}" for i in range(1, 6)]


