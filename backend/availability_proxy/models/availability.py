from pydantic import BaseModel, ConfigDict, Field, StrictInt
from typing import List
from datetime import date, datetime


# Inbound / outbound models for the proxy endpoint

class AvailabilityQuery(BaseModel):
    category_id: str
    start_date: date
    end_date: date

    model_config = ConfigDict(frozen=True)

    def days(self) -> List[date]:
        """Every calendar day of the inclusive range."""
        span = (self.end_date - self.start_date).days
        return [date.fromordinal(self.start_date.toordinal() + i) for i in range(span + 1)]


class CorrectedUnavailableDays(list):
    """
    Sorted unavailable days after the checkout-day correction.

    ``synthesized`` holds the days the correction added. A value of this type
    is already corrected and is never corrected again.
    """

    def __init__(self, days=(), synthesized=frozenset()):
        super().__init__(sorted(set(days)))
        self.synthesized = frozenset(synthesized)

    @property
    def raw(self) -> List[date]:
        return [day for day in self if day not in self.synthesized]


class AvailabilityResponse(BaseModel):
    unavailable: List[str]


# Mews Connector models (services/getAvailability)

class CategoryAvailability(BaseModel):
    category_id: str = Field(alias="CategoryId")
    availabilities: List[StrictInt] = Field(default_factory=list, alias="Availabilities")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class UpstreamAvailabilityReport(BaseModel):
    time_unit_starts_utc: List[datetime] = Field(alias="TimeUnitStartsUtc")
    category_availabilities: List[CategoryAvailability] = Field(
        default_factory=list, alias="CategoryAvailabilities"
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def series_for(self, category_id: str):
        """Availability series for one category, or None when it is absent (exact match)."""
        for category in self.category_availabilities:
            if category.category_id == category_id:
                return category.availabilities
        return None
