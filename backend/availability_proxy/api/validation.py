"""
Request validation for the availability endpoint.

Turns a raw JSON body into an AvailabilityQuery, or raises ValidationError
with a message naming the constraint that failed. Nothing here talks to the
booking service.
"""
from datetime import date
from typing import Any

from availability_proxy.core.errors import MSG_INVALID_BODY, ValidationError
from availability_proxy.models.availability import AvailabilityQuery
from availability_proxy.utils.dates import is_date_string

# Older frontend builds still post the category as "villaId"
CATEGORY_FIELDS = ("categoryId", "villaId")


def parse_availability_request(body: Any) -> AvailabilityQuery:
    if not isinstance(body, dict):
        raise ValidationError(MSG_INVALID_BODY)

    category_id = next((body[f] for f in CATEGORY_FIELDS if body.get(f)), None)
    start_raw = body.get("startDate")
    end_raw = body.get("endDate")

    missing = [
        name
        for name, value in (("categoryId", category_id), ("startDate", start_raw), ("endDate", end_raw))
        if not value
    ]
    if missing:
        raise ValidationError(
            f"Missing required parameters: {', '.join(missing)} (categoryId, startDate, endDate required)."
        )

    if not isinstance(category_id, str) or not category_id.strip():
        raise ValidationError("categoryId must be a non-empty string.")

    for name, value in (("startDate", start_raw), ("endDate", end_raw)):
        if not is_date_string(value):
            raise ValidationError(f"{name} must be in YYYY-MM-DD format.")

    try:
        start_date = date.fromisoformat(start_raw)
    except ValueError:
        raise ValidationError("startDate is not a valid calendar date.")
    try:
        end_date = date.fromisoformat(end_raw)
    except ValueError:
        raise ValidationError("endDate is not a valid calendar date.")

    if start_date > end_date:
        raise ValidationError("startDate must not be after endDate.")

    return AvailabilityQuery(category_id=category_id, start_date=start_date, end_date=end_date)
