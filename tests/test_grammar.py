"""Native notation grammar tests."""

import pytest

from pysagacal._errors import UnparseableDateError
from pysagacal._grammar import (
    EPOCH_FORMS,
    AgeYear,
    BareYear,
    PrefixedFullDate,
    PrefixedYear,
    SignedEpochYear,
    SuffixedYear,
    parse_age_form,
    parse_epoch_form,
)


class TestEpochForms:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("32 BBY", SignedEpochYear(years=32, before=True)),
            ("5 ABY", SignedEpochYear(years=5, before=False)),
            ("0 bby", SignedEpochYear(years=0, before=True)),
            ("10,191 AG", SuffixedYear(year=10191, suffix="AG")),
            ("10191 ag", SuffixedYear(year=10191, suffix="AG")),
            ("TA 3019", PrefixedYear(prefix="TA", year=3019)),
            ("sa 3,441", PrefixedYear(prefix="SA", year=3441)),
            ("3019-03-25 TA", PrefixedFullDate(year=3019, month=3, day=25, prefix="TA")),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_epoch_form(text) == expected

    def test_surrounding_whitespace_ignored(self):
        assert parse_epoch_form("  32 BBY\n") == SignedEpochYear(years=32, before=True)

    def test_multiple_spaces_between(self):
        assert parse_epoch_form("32   BBY") == SignedEpochYear(years=32, before=True)

    def test_signed_years_win_over_suffix(self):
        assert isinstance(parse_epoch_form("22 BBY"), SignedEpochYear)

    def test_comma_grouped_bby_falls_to_suffix(self):
        assert parse_epoch_form("1,000 BBY") == SuffixedYear(year=1000, suffix="BBY")

    def test_year_keyword_matches_prefix_first(self):
        assert parse_epoch_form("Year 10191") == PrefixedYear(prefix="YEAR", year=10191)

    def test_bare_year_form(self):
        assert parse_epoch_form("Year 10,191", forms=("bare_year",)) == BareYear(year=10191)

    def test_precedence_order(self):
        assert EPOCH_FORMS == (
            "signed_epoch_year",
            "suffixed_year",
            "prefixed_year",
            "bare_year",
            "prefixed_full_date",
        )

    @pytest.mark.parametrize(
        "text",
        ["", "32BBY", "BBY", "32 BBY extra", "the year of the dragon", ", AG", "3019-3-25 TA"],
    )
    def test_unparseable(self, text):
        with pytest.raises(UnparseableDateError) as exc_info:
            parse_epoch_form(text)
        assert exc_info.value.text == text
        assert exc_info.value.wrapped is not None


class TestAgeForm:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Third Age, Year 3019", AgeYear(age_name="Third Age", year=3019)),
            ("Third Age Year 3019", AgeYear(age_name="Third Age", year=3019)),
            ("third age, year 3,019", AgeYear(age_name="third age", year=3019)),
            ("Age of the Sun, Year 1", AgeYear(age_name="Age of the Sun", year=1)),
            ("Years of the Trees, Year 12", AgeYear(age_name="Years of the Trees", year=12)),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_age_form(text) == expected

    @pytest.mark.parametrize("text", ["Third Age", "Year 3019", "Third Age, Year", "Third Age, Year three"])
    def test_unparseable(self, text):
        with pytest.raises(UnparseableDateError):
            parse_age_form(text)
