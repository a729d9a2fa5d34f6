"""CalendarConverter and calendar registry tests."""

import pytest

from pysagacal import CalendarConverter, CalendarKind, get_calendar, years_to_seconds
from pysagacal._errors import ConfigKindMismatchError, MissingFieldError, UnknownCalendarKindError
from pysagacal.calendar import (
    AbsoluteCalendar,
    AgeBasedCalendar,
    EpochRelativeCalendar,
)


class TestGetCalendar:
    def test_absolute(self, absolute_config):
        assert isinstance(get_calendar("absolute", absolute_config), AbsoluteCalendar)

    def test_epoch_relative(self, dune_config):
        calendar = get_calendar(CalendarKind.EPOCH_RELATIVE, dune_config)
        assert isinstance(calendar, EpochRelativeCalendar)
        assert calendar.config is dune_config

    def test_age_based(self, middle_earth_ages_config):
        assert isinstance(get_calendar("age_based", middle_earth_ages_config), AgeBasedCalendar)

    def test_unknown(self, absolute_config):
        with pytest.raises(UnknownCalendarKindError):
            get_calendar("julian", absolute_config)

    def test_mismatch(self, absolute_config):
        with pytest.raises(ConfigKindMismatchError):
            get_calendar("epoch_relative", absolute_config)

    def test_absolute_without_config(self):
        assert AbsoluteCalendar().to_canon_date(0) == "1970-01-01 00:00:00"


class TestCalendarConverter:
    def test_validates_raw_config(self):
        converter = CalendarConverter("epoch_relative", {"epoch": "AG", "epoch_timestamp": 0})
        assert converter.kind is CalendarKind.EPOCH_RELATIVE
        assert converter.to_canon_date(converter.to_timestamp("10,191 AG")) == "10191 AG"

    def test_age_round_trip(self):
        converter = CalendarConverter(
            "age_based",
            {"ages": [{"name": "Third Age", "start_timestamp": 0}]},
        )
        ts = converter.to_timestamp("Third Age, Year 3019")
        assert ts == years_to_seconds(3019)
        assert converter.to_canon_date(ts) == "Third Age, Year 3019"

    def test_absolute_default_config(self):
        converter = CalendarConverter("absolute")
        assert converter.to_timestamp("1970-01-02") == 86400

    def test_invalid_config(self):
        with pytest.raises(MissingFieldError):
            CalendarConverter("epoch_relative", {})

    def test_describe_time_span(self):
        converter = CalendarConverter("absolute")
        assert converter.describe_time_span(0, 400 * 86400) == "1 year, 1 month"

    def test_repr(self):
        assert "absolute" in repr(CalendarConverter("absolute"))
