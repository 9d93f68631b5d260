"""
Availability Resolver

Turns one AvailabilityQuery into the sorted list of unavailable calendar days
for a single category: builds the upstream boundary timestamps, calls Mews,
reads the category's availability series, and fills in the checkout day Mews
leaves out at the end of every unavailable block.
"""
import logging
from datetime import date, timedelta
from typing import Iterable, Optional, Set

from availability_proxy.core.config import UpstreamConfig
from availability_proxy.models.availability import (
    AvailabilityQuery,
    AvailabilityResponse,
    CorrectedUnavailableDays,
    UpstreamAvailabilityReport,
)
from availability_proxy.utils.dates import (
    boundary_timestamp,
    consecutive_runs,
    day_of_boundary,
    format_day,
)

from .mews_service import MewsAvailabilityClient

logger = logging.getLogger(__name__)


def correct_checkout_days(days: Iterable[date]) -> CorrectedUnavailableDays:
    """
    Add the day after every run of consecutive unavailable days.

    Mews attaches a night to the day it starts on, so the morning after the last
    booked night of a block is never reported. The result is sorted and
    duplicate-free and remembers which days were added. Passing an already
    corrected value returns it unchanged, so the correction applies once.
    """
    if isinstance(days, CorrectedUnavailableDays):
        return days

    raw = set(days)
    synthesized = {run[-1] + timedelta(days=1) for run in consecutive_runs(raw)}
    if synthesized:
        logger.info(f"Synthesized checkout days: {[format_day(d) for d in sorted(synthesized)]}")
    return CorrectedUnavailableDays(raw | synthesized, synthesized=synthesized)


class AvailabilityResolver:
    """Resolves unavailable dates for one category using a validated upstream config."""

    def __init__(self, config: UpstreamConfig, client: Optional[MewsAvailabilityClient] = None):
        self.config = config
        self.client = client or MewsAvailabilityClient(config)

    def boundaries_for(self, query: AvailabilityQuery):
        """First and last upstream time-unit boundaries for the query range."""
        return (
            boundary_timestamp(query.start_date, self.config.day_start, self.config.timezone),
            boundary_timestamp(query.end_date, self.config.day_start, self.config.timezone),
        )

    def unavailable_days(self, query: AvailabilityQuery, report: UpstreamAvailabilityReport) -> Set[date]:
        """Raw unavailable days (count <= 0) for the query's category, limited to the query range."""
        series = report.series_for(query.category_id)
        boundaries = report.time_unit_starts_utc

        if series is None:
            logger.warning(
                f"Category {query.category_id} not found in Mews availability report "
                f"(policy: {self.config.missing_category_policy})",
                extra={"anomaly": "category_not_found"},
            )
            if self.config.missing_category_policy == "unavailable":
                return set(query.days())
            return set()

        if len(series) != len(boundaries):
            logger.warning(
                f"Availability series length mismatch for category "
                f"{query.category_id}: {len(series)} counts vs {len(boundaries)} time units; "
                f"treating as no availability data",
                extra={"anomaly": "length_mismatch"},
            )
            return set()

        unavailable = set()
        for boundary, count in zip(boundaries, series):
            day = day_of_boundary(boundary, self.config.timezone)
            if day < query.start_date or day > query.end_date:
                continue
            if count <= 0:
                unavailable.add(day)
        return unavailable

    async def resolve(self, query: AvailabilityQuery) -> AvailabilityResponse:
        first, last = self.boundaries_for(query)
        report = await self.client.get_availability(first, last)

        raw = self.unavailable_days(query, report)
        logger.info(f"Raw unavailable days for {query.category_id}: {[format_day(d) for d in sorted(raw)]}")

        corrected = correct_checkout_days(raw)
        return AvailabilityResponse(unavailable=[format_day(d) for d in corrected])
