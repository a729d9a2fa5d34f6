"""CalendarConverter - a saga's calendar, validated once and reused per request."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pysagacal._arithmetic import describe_time_span
from pysagacal.calendar import Calendar, get_calendar
from pysagacal.config import CalendarKind, NormalizedConfig, validate_config


class CalendarConverter:
    """Converts canon dates for one calendar kind and configuration."""

    def __init__(
        self,
        kind: CalendarKind | str,
        config: Mapping[str, Any] | NormalizedConfig | None = None,
    ) -> None:
        self._config = validate_config(config, kind)
        self._calendar: Calendar = get_calendar(kind, self._config)

    @property
    def kind(self) -> CalendarKind:
        return self._calendar.kind

    @property
    def config(self) -> NormalizedConfig:
        return self._config

    def to_timestamp(self, date_text: str) -> int:
        return self._calendar.to_timestamp(date_text)

    def to_canon_date(self, timestamp: int) -> str:
        return self._calendar.to_canon_date(timestamp)

    def describe_time_span(self, start_timestamp: int, end_timestamp: int) -> str:
        return describe_time_span(start_timestamp, end_timestamp)

    def __repr__(self) -> str:
        return f"CalendarConverter(kind={self.kind.value!r}, config={self._config!r})"
