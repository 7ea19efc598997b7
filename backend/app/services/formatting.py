"""Shared text formatting for chatbot replies.

Money is always rendered with exactly two decimals. Dates use a short
en-US style ("Jan 5, 2025"), timestamps add the time ("Jan 5, 2025, 02:30 PM").
Timestamps are shown in UTC: aware values are converted, naive values (as
SQLite hands them back) are already UTC.
"""
from datetime import date, datetime, timezone
from decimal import Decimal


def format_money(value: Decimal | float | int | None) -> str:
    return f"${Decimal(str(value or 0)):.2f}"


def format_percent(value: Decimal | float | int) -> str:
    return f"{float(value):g}%"


def format_discount(discount_type: str, value: Decimal | float | int) -> str:
    if (discount_type or "").lower() == "percentage":
        return format_percent(value)
    return format_money(value)


def format_date(value: date | datetime | None) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    text = f"{value:%b} {value.day}, {value.year}"
    if isinstance(value, datetime):
        text += f", {value:%I:%M %p}"
    return text


def normalize_image_url(url: str | None) -> str | None:
    if not url:
        return None
    return url if url.startswith("/") else "/" + url
