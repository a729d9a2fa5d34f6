"""pysagacal - Convert fictional-universe canon dates to and from normalized timestamps."""

from __future__ import annotations

__version__ = "0.1.0"

from pysagacal._arithmetic import (
    add_days,
    add_months,
    add_years,
    describe_time_span,
    years_difference,
    years_to_seconds,
)
from pysagacal._constants import SECONDS_PER_DAY, SECONDS_PER_MONTH, SECONDS_PER_YEAR
from pysagacal._converter import CalendarConverter
from pysagacal._errors import (
    CalendarError,
    ConfigError,
    ConfigKindMismatchError,
    InvalidFieldError,
    MalformedAgeError,
    MissingFieldError,
    ParseError,
    UnknownAgeError,
    UnknownCalendarKindError,
    UnparseableDateError,
)
from pysagacal.calendar import get_calendar
from pysagacal.config import (
    AbsoluteConfig,
    Age,
    AgeBasedConfig,
    CalendarKind,
    EpochRelativeConfig,
    NormalizedConfig,
    find_overlapping_ages,
    validate_config,
)
from pysagacal.timeline import (
    DateRange,
    TimelineEvent,
    calculate_date_range,
    filter_by_range,
    normalize_event,
    sort_chronologically,
    time_span_years,
)

__all__ = [
    "to_timestamp",
    "to_canon_date",
    "validate_config",
    "describe_time_span",
    "add_years",
    "add_months",
    "add_days",
    "years_difference",
    "years_to_seconds",
    "find_overlapping_ages",
    "get_calendar",
    "CalendarConverter",
    "CalendarKind",
    "NormalizedConfig",
    "AbsoluteConfig",
    "EpochRelativeConfig",
    "AgeBasedConfig",
    "Age",
    "CalendarError",
    "ConfigError",
    "ParseError",
    "UnknownCalendarKindError",
    "MissingFieldError",
    "InvalidFieldError",
    "MalformedAgeError",
    "ConfigKindMismatchError",
    "UnparseableDateError",
    "UnknownAgeError",
    "TimelineEvent",
    "DateRange",
    "normalize_event",
    "sort_chronologically",
    "filter_by_range",
    "calculate_date_range",
    "time_span_years",
    "SECONDS_PER_DAY",
    "SECONDS_PER_MONTH",
    "SECONDS_PER_YEAR",
]


def to_timestamp(
    date_text: str,
    calendar_kind: CalendarKind | str,
    config: NormalizedConfig,
) -> int:
    """Convert a canon date to a normalized timestamp.

    Args:
        date_text: Native date notation, e.g. ``"32 BBY"`` or
            ``"Third Age, Year 3019"``.
        calendar_kind: Calendar kind tag.
        config: Config returned by :func:`validate_config` for the same kind.

    Returns:
        Seconds on the normalized time axis (may be negative).

    Raises:
        UnknownCalendarKindError: If the kind is unknown.
        ConfigKindMismatchError: If the config was not validated for this kind.
        UnparseableDateError: If no notation matches the text.
        UnknownAgeError: If an age-based date names an unconfigured age.
    """
    return get_calendar(calendar_kind, config).to_timestamp(date_text)


def to_canon_date(
    timestamp: int,
    calendar_kind: CalendarKind | str,
    config: NormalizedConfig,
) -> str:
    """Render a normalized timestamp in the calendar's native notation.

    Age-based calendars fall back to ``YYYY-MM-DD`` when no configured age
    covers the timestamp instead of raising.

    Raises:
        UnknownCalendarKindError: If the kind is unknown.
        ConfigKindMismatchError: If the config was not validated for this kind.
    """
    return get_calendar(calendar_kind, config).to_canon_date(timestamp)
