"""Standard linear (Gregorian-like) calendar."""

from __future__ import annotations

from pysagacal._dates import format_datetime, parse_absolute
from pysagacal.calendar._base import Calendar
from pysagacal.config import AbsoluteConfig, CalendarKind


class AbsoluteCalendar(Calendar):
    kind = CalendarKind.ABSOLUTE
    config_type = AbsoluteConfig

    def __init__(self, config: AbsoluteConfig | None = None) -> None:
        super().__init__(config if config is not None else AbsoluteConfig())

    def to_timestamp(self, date_text: str) -> int:
        return parse_absolute(date_text)

    def to_canon_date(self, timestamp: int) -> str:
        return format_datetime(timestamp)
