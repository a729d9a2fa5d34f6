"""Helpers for ordering and summarizing events on the normalized time axis."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pysagacal._constants import SECONDS_PER_YEAR
from pysagacal.calendar import Calendar


@dataclass(frozen=True)
class TimelineEvent:
    """An event with its canon date and normalized timestamp."""

    canon_date: str
    normalized_timestamp: int
    title: str = ""


@dataclass(frozen=True)
class DateRange:
    """Earliest and latest timestamps; both ``None`` for an empty timeline."""

    min: int | None = None
    max: int | None = None


def normalize_event(canon_date: str, calendar: Calendar, title: str = "") -> TimelineEvent:
    """Build an event by converting its canon date with ``calendar``.

    Raises:
        ParseError: If the canon date cannot be converted.
    """
    return TimelineEvent(
        canon_date=canon_date,
        normalized_timestamp=calendar.to_timestamp(canon_date),
        title=title,
    )


def sort_chronologically(events: Iterable[TimelineEvent]) -> list[TimelineEvent]:
    return sorted(events, key=lambda event: event.normalized_timestamp)


def filter_by_range(
    events: Iterable[TimelineEvent],
    start: int | None = None,
    end: int | None = None,
) -> list[TimelineEvent]:
    """Keep events with ``start <= timestamp <= end``; a ``None`` bound is open."""
    return [
        event
        for event in events
        if (start is None or event.normalized_timestamp >= start)
        and (end is None or event.normalized_timestamp <= end)
    ]


def calculate_date_range(events: Iterable[TimelineEvent]) -> DateRange:
    timestamps = [event.normalized_timestamp for event in events]
    if not timestamps:
        return DateRange()
    return DateRange(min=min(timestamps), max=max(timestamps))


def time_span_years(events: Iterable[TimelineEvent]) -> float:
    date_range = calculate_date_range(events)
    if date_range.min is None or date_range.max is None:
        return 0.0
    return round((date_range.max - date_range.min) / SECONDS_PER_YEAR, 2)
