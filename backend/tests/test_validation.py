from datetime import date

import pytest
from availability_proxy.api.validation import parse_availability_request
from availability_proxy.core.errors import ValidationError


def test_valid_request_builds_query():
    query = parse_availability_request(
        {"categoryId": "cat-1", "startDate": "2025-04-01", "endDate": "2025-04-05"}
    )
    assert query.category_id == "cat-1"
    assert query.start_date == date(2025, 4, 1)
    assert query.end_date == date(2025, 4, 5)


def test_single_day_range_is_allowed():
    query = parse_availability_request(
        {"categoryId": "cat-1", "startDate": "2025-04-01", "endDate": "2025-04-01"}
    )
    assert query.days() == [date(2025, 4, 1)]


def test_villa_id_alias_is_accepted():
    query = parse_availability_request(
        {"villaId": "villa-7", "startDate": "2025-04-01", "endDate": "2025-04-02"}
    )
    assert query.category_id == "villa-7"


def test_category_id_wins_over_villa_id():
    query = parse_availability_request(
        {"categoryId": "cat-1", "villaId": "villa-7", "startDate": "2025-04-01", "endDate": "2025-04-02"}
    )
    assert query.category_id == "cat-1"


def test_category_id_is_not_transformed():
    query = parse_availability_request(
        {"categoryId": " Cat-1 ", "startDate": "2025-04-01", "endDate": "2025-04-02"}
    )
    assert query.category_id == " Cat-1 "


def test_missing_category_is_rejected():
    with pytest.raises(ValidationError, match="categoryId"):
        parse_availability_request({"startDate": "2025-04-01", "endDate": "2025-04-05"})


def test_missing_dates_are_named():
    with pytest.raises(ValidationError) as exc_info:
        parse_availability_request({"categoryId": "cat-1"})
    assert "startDate" in str(exc_info.value)
    assert "endDate" in str(exc_info.value)


@pytest.mark.parametrize("bad", ["25-04-01", "2025/04/01", "2025-4-1", "2025-04-01T00:00:00", 20250401])
def test_pattern_invalid_dates_are_rejected(bad):
    with pytest.raises(ValidationError, match="YYYY-MM-DD"):
        parse_availability_request({"categoryId": "cat-1", "startDate": bad, "endDate": "2025-04-05"})


def test_calendar_invalid_date_is_rejected():
    with pytest.raises(ValidationError, match="valid calendar date"):
        parse_availability_request({"categoryId": "cat-1", "startDate": "2025-13-40", "endDate": "2025-12-31"})


def test_start_after_end_is_rejected():
    with pytest.raises(ValidationError, match="after endDate"):
        parse_availability_request({"categoryId": "cat-1", "startDate": "2025-04-05", "endDate": "2025-04-01"})


def test_non_string_category_is_rejected():
    with pytest.raises(ValidationError, match="non-empty string"):
        parse_availability_request({"categoryId": 42, "startDate": "2025-04-01", "endDate": "2025-04-05"})


@pytest.mark.parametrize("body", [None, [], "cat-1"])
def test_non_object_body_is_rejected(body):
    with pytest.raises(ValidationError, match="Invalid request body"):
        parse_availability_request(body)


@pytest.mark.parametrize("bad", ["2025-04-01\n", "２０２５-０４-０１", "2025-04-01 "])
def test_near_miss_dates_fail_the_pattern_check(bad):
    with pytest.raises(ValidationError, match="YYYY-MM-DD"):
        parse_availability_request({"categoryId": "cat-1", "startDate": bad, "endDate": "2025-04-05"})
