"""Approximate calendar arithmetic shared by both conversion directions."""

from __future__ import annotations

import math

from pysagacal._constants import SECONDS_PER_DAY, SECONDS_PER_MONTH, SECONDS_PER_YEAR


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded


def add_years(timestamp: int, years: int) -> int:
    """Shift a timestamp by whole years of 365.25 days."""
    return timestamp + round_half_away(years * SECONDS_PER_YEAR)


def add_months(timestamp: int, months: int) -> int:
    """Shift a timestamp by 30-day months."""
    return timestamp + months * SECONDS_PER_MONTH


def add_days(timestamp: int, days: int) -> int:
    """Shift a timestamp by days."""
    return timestamp + days * SECONDS_PER_DAY


def years_difference(from_timestamp: int, to_timestamp: int) -> int:
    """Whole years between two timestamps, rounded half away from zero."""
    return round_half_away((to_timestamp - from_timestamp) / SECONDS_PER_YEAR)


def years_to_seconds(years: int | float) -> int:
    """Length of ``years`` in seconds, rounded half away from zero."""
    return round_half_away(years * SECONDS_PER_YEAR)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def describe_time_span(start_timestamp: int, end_timestamp: int) -> str:
    """Describe the distance between two timestamps, e.g. ``"1 year, 1 month"``.

    Days are only reported for spans shorter than a year. The order of
    the arguments does not matter.
    """
    diff = abs(end_timestamp - start_timestamp)

    years, remainder = divmod(diff, SECONDS_PER_YEAR)
    months, remainder = divmod(remainder, SECONDS_PER_MONTH)
    days = remainder // SECONDS_PER_DAY

    parts: list[str] = []
    if years > 0:
        parts.append(_plural(years, "year"))
    if months > 0:
        parts.append(_plural(months, "month"))
    if days > 0 and years == 0:
        parts.append(_plural(days, "day"))

    return ", ".join(parts) if parts else "Less than a day"
