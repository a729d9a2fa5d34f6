"""Calendar kinds for canon date conversion."""

from __future__ import annotations

from typing import Any

from pysagacal.calendar._base import Calendar
from pysagacal.calendar.absolute import AbsoluteCalendar
from pysagacal.calendar.age_based import AgeBasedCalendar
from pysagacal.calendar.epoch_relative import EpochRelativeCalendar
from pysagacal.config import CalendarKind, NormalizedConfig, coerce_kind

__all__ = [
    "Calendar",
    "AbsoluteCalendar",
    "AgeBasedCalendar",
    "EpochRelativeCalendar",
    "get_calendar",
]

_REGISTRY: dict[CalendarKind, type[Calendar]] = {
    CalendarKind.ABSOLUTE: AbsoluteCalendar,
    CalendarKind.EPOCH_RELATIVE: EpochRelativeCalendar,
    CalendarKind.AGE_BASED: AgeBasedCalendar,
}


def get_calendar(kind: CalendarKind | str | Any, config: NormalizedConfig) -> Calendar:
    """Get a calendar instance for a kind and its validated config.

    Args:
        kind: Calendar kind (e.g., "absolute", "epoch_relative", "age_based").
        config: Config returned by :func:`~pysagacal.config.validate_config`.

    Returns:
        A Calendar instance.

    Raises:
        UnknownCalendarKindError: If the kind is unknown.
        ConfigKindMismatchError: If the config belongs to another kind.
    """
    return _REGISTRY[coerce_kind(kind)](config)
