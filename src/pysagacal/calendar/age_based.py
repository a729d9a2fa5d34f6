"""Calendar of named eras (``Third Age, Year 3019``)."""

from __future__ import annotations

import logging

from pysagacal._arithmetic import years_difference, years_to_seconds
from pysagacal._dates import format_date
from pysagacal._errors import ERR_MSG_UNKNOWN_AGE, UnknownAgeError
from pysagacal._grammar import parse_age_form
from pysagacal.calendar._base import Calendar
from pysagacal.config import AgeBasedConfig, CalendarKind

logger = logging.getLogger(__name__)


class AgeBasedCalendar(Calendar):
    kind = CalendarKind.AGE_BASED
    config_type = AgeBasedConfig

    _config: AgeBasedConfig

    def to_timestamp(self, date_text: str) -> int:
        parsed = parse_age_form(date_text)
        age = self._config.find_age(parsed.age_name)
        if age is None:
            raise UnknownAgeError(
                ERR_MSG_UNKNOWN_AGE,
                f"unknown age: {parsed.age_name!r}",
                name=parsed.age_name,
            )
        return age.start_timestamp + years_to_seconds(parsed.year)

    def to_canon_date(self, timestamp: int) -> str:
        """Render in the covering age, or as ``YYYY-MM-DD`` when none covers it."""
        age = self._config.age_at(timestamp)
        if age is None:
            logger.debug("no age covers timestamp %d; using generic date", timestamp)
            return format_date(timestamp)
        year_in_age = years_difference(age.start_timestamp, timestamp)
        return f"{age.name}, Year {year_in_age}"
