"""Lark grammar for native (epoch-relative and age-based) date notations.

Each notation is its own start rule. Epoch-relative text is tried against
``EPOCH_FORMS`` in order and the first notation that parses wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from pysagacal._errors import ERR_MSG_UNPARSEABLE_DATE, UnparseableDateError

logger = logging.getLogger(__name__)

_GRAMMAR = r"""
signed_epoch_year: INT _WS EPOCH_SIDE
suffixed_year: NUMBER _WS WORD
prefixed_year: WORD _WS NUMBER
bare_year: _YEAR _WS NUMBER
prefixed_full_date: YEAR4 "-" TWO_DIGITS "-" TWO_DIGITS _WS WORD
age_year: AGE_NAME ","? _WS _YEAR _WS NUMBER

EPOCH_SIDE: /[ab]by/i
INT: /\d+/
NUMBER: /\d[\d,]*/
YEAR4: /\d{4}/
TWO_DIGITS: /\d{2}/
WORD: /[a-z]+/i
AGE_NAME: /.+?(?=,?\s+year\s+\d[\d,]*$)/is
_YEAR: /year/i
_WS: /\s+/
"""


@dataclass(frozen=True)
class SignedEpochYear:
    """``32 BBY`` / ``5 ABY``."""

    years: int
    before: bool

    @property
    def years_from_epoch(self) -> int:
        return -self.years if self.before else self.years


@dataclass(frozen=True)
class SuffixedYear:
    """``10,191 AG``. The suffix is the epoch's own unit."""

    year: int
    suffix: str


@dataclass(frozen=True)
class PrefixedYear:
    """``TA 3019``. The prefix selects an age offset."""

    prefix: str
    year: int


@dataclass(frozen=True)
class BareYear:
    """``Year 10191``."""

    year: int


@dataclass(frozen=True)
class PrefixedFullDate:
    """``3019-03-25 TA``."""

    year: int
    month: int
    day: int
    prefix: str


@dataclass(frozen=True)
class AgeYear:
    """``Third Age, Year 3019``."""

    age_name: str
    year: int


ParsedEpochForm = Union[SignedEpochYear, SuffixedYear, PrefixedYear, BareYear, PrefixedFullDate]

EPOCH_FORMS: tuple[str, ...] = (
    "signed_epoch_year",
    "suffixed_year",
    "prefixed_year",
    "bare_year",
    "prefixed_full_date",
)
"""Precedence order of epoch-relative notations."""


def _number(token: Token) -> int:
    return int(str(token).replace(",", ""))


class _FormBuilder(Transformer):
    """Turns a notation parse tree into its dataclass."""

    def signed_epoch_year(self, items: list[Token]) -> SignedEpochYear:
        years, side = items
        return SignedEpochYear(years=int(years), before=side.upper() == "BBY")

    def suffixed_year(self, items: list[Token]) -> SuffixedYear:
        number, suffix = items
        return SuffixedYear(year=_number(number), suffix=suffix.upper())

    def prefixed_year(self, items: list[Token]) -> PrefixedYear:
        prefix, number = items
        return PrefixedYear(prefix=prefix.upper(), year=_number(number))

    def bare_year(self, items: list[Token]) -> BareYear:
        (number,) = items
        return BareYear(year=_number(number))

    def prefixed_full_date(self, items: list[Token]) -> PrefixedFullDate:
        year, month, day, prefix = items
        return PrefixedFullDate(
            year=int(year), month=int(month), day=int(day), prefix=prefix.upper()
        )

    def age_year(self, items: list[Token]) -> AgeYear:
        name, number = items
        return AgeYear(age_name=str(name).strip(), year=_number(number))


_parser = Lark(_GRAMMAR, parser="lalr", start=[*EPOCH_FORMS, "age_year"])
_builder = _FormBuilder()


def _unparseable(text: str, details: str, wrapped: Exception | None) -> UnparseableDateError:
    return UnparseableDateError(ERR_MSG_UNPARSEABLE_DATE, details, wrapped, text=text)


def parse_epoch_form(text: str, forms: tuple[str, ...] = EPOCH_FORMS) -> ParsedEpochForm:
    """Parse epoch-relative notation; the first matching form in ``forms`` wins.

    Raises:
        UnparseableDateError: If no form matches.
    """
    stripped = text.strip()
    last_error: UnexpectedInput | None = None
    for form in forms:
        try:
            tree = _parser.parse(stripped, start=form)
        except UnexpectedInput as exc:
            last_error = exc
            continue
        logger.debug("%r parsed as %s", text, form)
        return _builder.transform(tree)
    raise _unparseable(text, f"cannot parse epoch-relative date: {text!r}", last_error)


def parse_age_form(text: str) -> AgeYear:
    """Parse ``<Age Name>[,] Year <N>``.

    Raises:
        UnparseableDateError: If the text is not in that notation.
    """
    try:
        tree = _parser.parse(text.strip(), start="age_year")
    except UnexpectedInput as exc:
        raise _unparseable(text, f"cannot parse age-based date: {text!r}", exc) from exc
    return _builder.transform(tree)
