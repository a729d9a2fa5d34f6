"""Timeline helper tests."""

from pysagacal import (
    SECONDS_PER_YEAR,
    DateRange,
    TimelineEvent,
    calculate_date_range,
    filter_by_range,
    get_calendar,
    normalize_event,
    sort_chronologically,
    time_span_years,
)
from tests.conftest import EPOCH


def _events():
    return [
        TimelineEvent("5 ABY", 300, "Hoth"),
        TimelineEvent("32 BBY", -100, "Naboo"),
        TimelineEvent("0 ABY", 0, "Yavin"),
    ]


class TestNormalizeEvent:
    def test_converts_canon_date(self, dune_config):
        calendar = get_calendar("epoch_relative", dune_config)
        event = normalize_event("10,191 AG", calendar, title="Arrakis")
        assert event == TimelineEvent("10,191 AG", EPOCH + 10191 * SECONDS_PER_YEAR, "Arrakis")


class TestOrdering:
    def test_sort(self):
        titles = [event.title for event in sort_chronologically(_events())]
        assert titles == ["Naboo", "Yavin", "Hoth"]


class TestFilterByRange:
    def test_inclusive_bounds(self):
        titles = [event.title for event in filter_by_range(_events(), start=-100, end=0)]
        assert titles == ["Naboo", "Yavin"]

    def test_open_start(self):
        assert [e.title for e in filter_by_range(_events(), end=-1)] == ["Naboo"]

    def test_open_end(self):
        assert [e.title for e in filter_by_range(_events(), start=1)] == ["Hoth"]

    def test_no_bounds(self):
        assert len(filter_by_range(_events())) == 3


class TestDateRange:
    def test_min_max(self):
        assert calculate_date_range(_events()) == DateRange(min=-100, max=300)

    def test_empty(self):
        assert calculate_date_range([]) == DateRange(min=None, max=None)


class TestTimeSpanYears:
    def test_span(self):
        events = [TimelineEvent("a", 0), TimelineEvent("b", 3 * SECONDS_PER_YEAR // 2)]
        assert time_span_years(events) == 1.5

    def test_single_event(self):
        assert time_span_years([TimelineEvent("a", 10)]) == 0.0

    def test_empty(self):
        assert time_span_years([]) == 0.0
