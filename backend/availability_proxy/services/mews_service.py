"""
Mews Connector API Service
Calls services/getAvailability for one service and a range of time units
"""
import httpx
import logging
from typing import Dict, Any

from pydantic import ValidationError as PydanticValidationError

from availability_proxy.core.config import UpstreamConfig
from availability_proxy.core.errors import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamResponseError,
)
from availability_proxy.models.availability import UpstreamAvailabilityReport

logger = logging.getLogger(__name__)

SECRET_FIELDS = ("ClientToken", "AccessToken")
ERROR_BODY_LOG_LIMIT = 500


def redact_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of the payload that is safe to log."""
    return {key: ("***" if key in SECRET_FIELDS else value) for key, value in payload.items()}


class MewsAvailabilityClient:
    def __init__(self, config: UpstreamConfig):
        self.config = config

    def build_payload(self, first_time_unit_start: str, last_time_unit_start: str) -> Dict[str, Any]:
        return {
            "ClientToken": self.config.client_token,
            "AccessToken": self.config.access_token,
            "Client": self.config.client_name,
            "ServiceId": self.config.service_id,
            "FirstTimeUnitStartUtc": first_time_unit_start,
            "LastTimeUnitStartUtc": last_time_unit_start,
        }

    async def get_availability(
        self,
        first_time_unit_start: str,
        last_time_unit_start: str,
    ) -> UpstreamAvailabilityReport:
        """
        Get per-category availability from the Mews Connector API

        Args:
            first_time_unit_start: Boundary timestamp of the first day (ISO 8601, UTC)
            last_time_unit_start: Boundary timestamp of the last day (ISO 8601, UTC)

        Returns:
            Parsed availability report

        Raises:
            UpstreamError: Mews answered with a non-success status
            UpstreamConnectionError: Mews could not be reached
            UpstreamResponseError: Mews answered with a body we cannot parse
        """
        url = self.config.availability_endpoint
        payload = self.build_payload(first_time_unit_start, last_time_unit_start)

        logger.info(f"Calling Mews API: {url} with payload: {redact_payload(payload)}")

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                response = await client.post(url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling Mews API: {e}")
            raise UpstreamConnectionError(f"Mews API unreachable: {e}") from e

        logger.info(f"Mews API responded with status {response.status_code}")

        if not response.is_success:
            body = response.text
            logger.error(f"Mews API Error ({response.status_code}): {body[:ERROR_BODY_LOG_LIMIT]}")
            raise UpstreamError(
                f"Mews API request failed with status {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        try:
            report = UpstreamAvailabilityReport.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logger.error(f"Unexpected Mews response structure: {e}")
            raise UpstreamResponseError(
                "Mews API returned an unreadable availability report",
                status_code=response.status_code,
                body=response.text,
            ) from e

        logger.info(
            f"Mews API returned {len(report.time_unit_starts_utc)} time units "
            f"for {len(report.category_availabilities)} categories"
        )
        return report
