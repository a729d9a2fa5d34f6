"""Absolute (Gregorian-like) date parsing and rendering.

Parsing delegates to dateparser. Rendering works from day counts with a
proleptic Gregorian conversion so timestamps outside the ``datetime``
range (years before 1 or after 9999) still render.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import dateparser

from pysagacal._constants import (
    GENERIC_DATE_FORMAT,
    ISO_DATETIME_FORMAT,
    MONTH_NAMES,
    SECONDS_PER_DAY,
)
from pysagacal._errors import ERR_MSG_UNPARSEABLE_DATE, UnparseableDateError

# Relative phrases and partial dates ("2020", "14:30") would be completed
# from the wall clock, so relative parsing is off and all date parts are required.
_DATEPARSER_SETTINGS = {
    "RELATIVE_BASE": datetime(1970, 1, 1),
    "REQUIRE_PARTS": ["day", "month", "year"],
    "TIMEZONE": "UTC",
    "TO_TIMEZONE": "UTC",
    "RETURN_AS_TIMEZONE_AWARE": True,
    "PARSERS": ["timestamp", "custom-formats", "absolute-time"],
}

# Days from 0000-03-01 to 1970-01-01 in the proleptic Gregorian calendar.
_UNIX_EPOCH_SHIFT = 719468
_DAYS_PER_ERA = 146097


@dataclass(frozen=True)
class CivilDateTime:
    """Calendar breakdown of a timestamp (UTC)."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    @property
    def year_text(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}"


def _civil_from_days(days: int) -> tuple[int, int, int]:
    z = days + _UNIX_EPOCH_SHIFT
    era = z // _DAYS_PER_ERA
    doe = z - era * _DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def breakdown(timestamp: int) -> CivilDateTime:
    days, seconds = divmod(timestamp, SECONDS_PER_DAY)
    year, month, day = _civil_from_days(days)
    hour, seconds = divmod(seconds, 3600)
    minute, second = divmod(seconds, 60)
    return CivilDateTime(year, month, day, hour, minute, second)


def format_datetime(timestamp: int) -> str:
    """Render as ``YYYY-MM-DD HH:MM:SS``."""
    civil = breakdown(timestamp)
    return ISO_DATETIME_FORMAT.format(
        year=civil.year_text,
        month=civil.month,
        day=civil.day,
        hour=civil.hour,
        minute=civil.minute,
        second=civil.second,
    )


def format_date(timestamp: int) -> str:
    """Render as ``YYYY-MM-DD``."""
    civil = breakdown(timestamp)
    return GENERIC_DATE_FORMAT.format(year=civil.year_text, month=civil.month, day=civil.day)


def parse_absolute(text: str) -> int:
    """Parse free-text date/time into a timestamp. Naive input is UTC."""
    parsed = dateparser.parse(text, languages=["en"], settings=_DATEPARSER_SETTINGS)
    if parsed is None:
        raise UnparseableDateError(
            ERR_MSG_UNPARSEABLE_DATE,
            f"invalid absolute date: {text!r}",
            text=text,
        )
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())
