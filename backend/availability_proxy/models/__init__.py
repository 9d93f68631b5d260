"""
Pydantic models for the proxy's request/response and the upstream report.
"""

from .availability import (
    AvailabilityQuery,
    AvailabilityResponse,
    CategoryAvailability,
    CorrectedUnavailableDays,
    UpstreamAvailabilityReport,
)

__all__ = [
    'AvailabilityQuery',
    'AvailabilityResponse',
    'CategoryAvailability',
    'CorrectedUnavailableDays',
    'UpstreamAvailabilityReport',
]
