from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.services.formatting import (
    format_date,
    format_discount,
    format_money,
    normalize_image_url,
)


@pytest.mark.parametrize(
    "value, expected",
    [(12.5, "$12.50"), (Decimal("89.90"), "$89.90"), (45, "$45.00"), (0.1 + 0.2, "$0.30"), (None, "$0.00")],
)
def test_money_has_two_decimals(value, expected):
    assert format_money(value) == expected


def test_discount_rendering():
    assert format_discount("fixed", 12.5) == "$12.50"
    assert format_discount("percentage", 10) == "10%"
    assert format_discount("percentage", Decimal("10.00")) == "10%"
    assert format_discount("percentage", Decimal("12.50")) == "12.5%"


def test_dates_are_human_readable():
    assert format_date(date(2025, 1, 5)) == "Jan 5, 2025"
    assert format_date(datetime(2025, 1, 5, 14, 30)) == "Jan 5, 2025, 02:30 PM"
    assert format_date(None) == "N/A"


def test_aware_timestamps_render_in_utc():
    singapore = timezone(timedelta(hours=8))
    # 07:30 on Jan 6 in UTC+8 is still Jan 5 in UTC
    assert format_date(datetime(2025, 1, 6, 7, 30, tzinfo=singapore)) == "Jan 5, 2025, 11:30 PM"
    assert format_date(datetime(2025, 1, 5, 23, 30, tzinfo=timezone.utc)) == "Jan 5, 2025, 11:30 PM"


def test_image_urls_start_with_slash():
    assert normalize_image_url("uploads/a.jpg") == "/uploads/a.jpg"
    assert normalize_image_url("/uploads/a.jpg") == "/uploads/a.jpg"
    assert normalize_image_url("") is None
    assert normalize_image_url(None) is None
