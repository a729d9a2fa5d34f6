"""Calendar counting years from a named epoch (``32 BBY``, ``10,191 AG``, ``TA 3019``)."""

from __future__ import annotations

from pysagacal._arithmetic import add_days, add_months, add_years, years_difference
from pysagacal._dates import breakdown
from pysagacal._grammar import (
    BareYear,
    ParsedEpochForm,
    PrefixedFullDate,
    PrefixedYear,
    SignedEpochYear,
    SuffixedYear,
    parse_epoch_form,
)
from pysagacal.calendar._base import Calendar
from pysagacal.config import CalendarKind, EpochRelativeConfig


class EpochRelativeCalendar(Calendar):
    kind = CalendarKind.EPOCH_RELATIVE
    config_type = EpochRelativeConfig

    _config: EpochRelativeConfig

    def to_timestamp(self, date_text: str) -> int:
        return self.resolve(parse_epoch_form(date_text))

    def resolve(self, form: ParsedEpochForm) -> int:
        """Convert a parsed notation into a timestamp."""
        cfg = self._config
        epoch = cfg.epoch_timestamp
        if isinstance(form, SignedEpochYear):
            return add_years(epoch, form.years_from_epoch)
        if isinstance(form, SuffixedYear):
            return add_years(epoch, form.year)
        if isinstance(form, PrefixedYear):
            return add_years(epoch, cfg.offset_for(form.prefix) + form.year)
        if isinstance(form, BareYear):
            return add_years(epoch, form.year)
        if isinstance(form, PrefixedFullDate):
            base = add_years(epoch, cfg.offset_for(form.prefix) + form.year)
            base = add_months(base, form.month - 1)
            return add_days(base, form.day - 1)
        raise TypeError(f"unsupported epoch form: {type(form).__name__}")

    def to_canon_date(self, timestamp: int) -> str:
        cfg = self._config
        years_diff = years_difference(cfg.epoch_timestamp, timestamp)

        if cfg.format is not None:
            return self._apply_format(cfg.format, years_diff, timestamp)

        if years_diff >= 0:
            return f"{years_diff} {cfg.epoch_name}"
        return f"{abs(years_diff)} B{cfg.epoch_name}"

    def _apply_format(self, template: str, years_diff: int, timestamp: int) -> str:
        civil = breakdown(timestamp)
        replacements = {
            "{year}": str(abs(years_diff)),
            "{epoch}": self._config.epoch_name,
            "{sign}": "" if years_diff >= 0 else "B",
            "{month}": f"{civil.month:02d}",
            "{day}": f"{civil.day:02d}",
            "{month_name}": civil.month_name,
        }
        result = template
        for placeholder, value in replacements.items():
            result = result.replace(placeholder, value)
        return result
