"""Calendar kinds and their typed, validated configurations."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from pysagacal._errors import (
    ERR_MSG_INVALID_FIELD,
    ERR_MSG_KIND_MISMATCH,
    ERR_MSG_MALFORMED_AGE,
    ERR_MSG_MISSING_FIELD,
    ERR_MSG_UNKNOWN_CALENDAR_KIND,
    ConfigKindMismatchError,
    InvalidFieldError,
    MalformedAgeError,
    MissingFieldError,
    UnknownCalendarKindError,
)

logger = logging.getLogger(__name__)


class CalendarKind(enum.StrEnum):
    ABSOLUTE = "absolute"
    EPOCH_RELATIVE = "epoch_relative"
    AGE_BASED = "age_based"


@dataclass(frozen=True)
class AbsoluteConfig:
    """Standard linear dates. Carries no settings."""

    kind: ClassVar[CalendarKind] = CalendarKind.ABSOLUTE

    def as_dict(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class EpochRelativeConfig:
    """Years counted from a named epoch, e.g. ``BBY/ABY`` or ``AG``."""

    kind: ClassVar[CalendarKind] = CalendarKind.EPOCH_RELATIVE

    epoch_name: str
    epoch_timestamp: int
    age_offsets: tuple[tuple[str, int], ...] = ()
    """Sorted ``(PREFIX, offset)`` pairs; prefixes are upper case."""
    format: str | None = None

    def offset_for(self, prefix: str) -> int:
        return dict(self.age_offsets).get(prefix.upper(), 0)

    def as_dict(self) -> dict[str, Any]:
        return {
            "epoch_name": self.epoch_name,
            "epoch_timestamp": self.epoch_timestamp,
            "age_offsets": dict(self.age_offsets),
            "format": self.format,
        }


@dataclass(frozen=True)
class Age:
    """A named era. ``end_timestamp`` of ``None`` means open-ended."""

    name: str
    start_timestamp: int
    end_timestamp: int | None = None

    def contains(self, timestamp: int) -> bool:
        if timestamp < self.start_timestamp:
            return False
        return self.end_timestamp is None or timestamp < self.end_timestamp

    def overlaps(self, other: Age) -> bool:
        starts_before_other_ends = (
            other.end_timestamp is None or self.start_timestamp < other.end_timestamp
        )
        other_starts_before_end = (
            self.end_timestamp is None or other.start_timestamp < self.end_timestamp
        )
        return starts_before_other_ends and other_starts_before_end

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "start_timestamp": self.start_timestamp,
            "end_timestamp": self.end_timestamp,
        }


@dataclass(frozen=True)
class AgeBasedConfig:
    """A sequence of named eras, scanned in declaration order."""

    kind: ClassVar[CalendarKind] = CalendarKind.AGE_BASED

    ages: tuple[Age, ...] = ()

    def find_age(self, name: str) -> Age | None:
        """Look up an age by name, case-insensitively."""
        wanted = name.strip().casefold()
        for age in self.ages:
            if age.name.casefold() == wanted:
                return age
        return None

    def age_at(self, timestamp: int) -> Age | None:
        """Return the first age whose range contains the timestamp."""
        for age in self.ages:
            if age.contains(timestamp):
                return age
        return None

    def as_dict(self) -> dict[str, Any]:
        return {"ages": [age.as_dict() for age in self.ages]}


NormalizedConfig = Union[AbsoluteConfig, EpochRelativeConfig, AgeBasedConfig]

_NORMALIZED_TYPES = (AbsoluteConfig, EpochRelativeConfig, AgeBasedConfig)


def coerce_kind(kind: Any) -> CalendarKind:
    """Turn a stored calendar tag into a :class:`CalendarKind`.

    Raises:
        UnknownCalendarKindError: If the tag is not one of the supported kinds.
    """
    if isinstance(kind, CalendarKind):
        return kind
    if isinstance(kind, str):
        try:
            return CalendarKind(kind.strip().lower())
        except ValueError as exc:
            raise UnknownCalendarKindError(
                ERR_MSG_UNKNOWN_CALENDAR_KIND,
                f"unknown calendar kind: {kind!r}. "
                f"Available: {', '.join(k.value for k in CalendarKind)}",
                exc,
                kind=kind,
            ) from exc
    raise UnknownCalendarKindError(
        ERR_MSG_UNKNOWN_CALENDAR_KIND,
        f"calendar kind must be a string, got {type(kind).__name__}",
        kind=kind,
    )


def _coerce_int(value: Any, field_name: str) -> int:
    """Coerce an integer-like stored value. Floats are truncated."""
    if isinstance(value, bool):
        raise InvalidFieldError(
            ERR_MSG_INVALID_FIELD,
            f"{field_name} must be an integer, got a boolean",
            field=field_name,
        )
    if isinstance(value, int):
        return value
    try:
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                return int(float(text))
    except (ValueError, OverflowError) as exc:
        raise InvalidFieldError(
            ERR_MSG_INVALID_FIELD,
            f"{field_name} must be an integer, got {value!r}",
            exc,
            field=field_name,
        ) from exc
    raise InvalidFieldError(
        ERR_MSG_INVALID_FIELD,
        f"{field_name} must be an integer, got {type(value).__name__}",
        field=field_name,
    )


def _require(config: Mapping[str, Any], *keys: str) -> Any:
    """Return the first present, non-null value among ``keys``."""
    for key in keys:
        value = config.get(key)
        if value is not None:
            return value
    raise MissingFieldError(
        ERR_MSG_MISSING_FIELD,
        f"calendar configuration requires {keys[0]!r}",
        field=keys[0],
    )


def _validate_absolute(config: Mapping[str, Any]) -> AbsoluteConfig:
    return AbsoluteConfig()


def _validate_epoch_relative(config: Mapping[str, Any]) -> EpochRelativeConfig:
    # "epoch" is the legacy stored name of the epoch_name key.
    epoch_name = str(_require(config, "epoch_name", "epoch"))
    epoch_timestamp = _coerce_int(_require(config, "epoch_timestamp"), "epoch_timestamp")

    raw_offsets = config.get("age_offsets") or {}
    if not isinstance(raw_offsets, Mapping):
        raise InvalidFieldError(
            ERR_MSG_INVALID_FIELD,
            f"age_offsets must be a mapping, got {type(raw_offsets).__name__}",
            field="age_offsets",
        )
    age_offsets = tuple(sorted(
        (str(prefix).strip().upper(), _coerce_int(offset, f"age_offsets.{prefix}"))
        for prefix, offset in raw_offsets.items()
    ))

    fmt = config.get("format")
    return EpochRelativeConfig(
        epoch_name=epoch_name,
        epoch_timestamp=epoch_timestamp,
        age_offsets=age_offsets,
        format=None if fmt is None else str(fmt),
    )


def _validate_age(index: int, entry: Any) -> Age:
    if isinstance(entry, Age):
        entry = entry.as_dict()
    if not isinstance(entry, Mapping):
        raise MalformedAgeError(
            ERR_MSG_MALFORMED_AGE,
            f"age #{index} must be a mapping, got {type(entry).__name__}",
            index=index,
        )
    name = entry.get("name")
    start = entry.get("start_timestamp")
    if name is None or start is None:
        raise MalformedAgeError(
            ERR_MSG_MALFORMED_AGE,
            f"age #{index} requires name and start_timestamp",
            index=index,
        )
    end = entry.get("end_timestamp")
    return Age(
        name=str(name),
        start_timestamp=_coerce_int(start, f"ages[{index}].start_timestamp"),
        end_timestamp=None if end is None else _coerce_int(end, f"ages[{index}].end_timestamp"),
    )


def find_overlapping_ages(ages: Sequence[Age]) -> list[tuple[int, int]]:
    """Return index pairs ``(i, j)``, ``i < j``, of ages whose ranges intersect."""
    overlaps: list[tuple[int, int]] = []
    for i, first in enumerate(ages):
        for j in range(i + 1, len(ages)):
            if first.overlaps(ages[j]):
                overlaps.append((i, j))
    return overlaps


def _validate_age_based(config: Mapping[str, Any]) -> AgeBasedConfig:
    raw_ages = config.get("ages")
    if not isinstance(raw_ages, Sequence) or isinstance(raw_ages, (str, bytes)):
        raise MissingFieldError(
            ERR_MSG_MISSING_FIELD,
            "age-based calendar requires an ages list",
            field="ages",
        )

    ages = tuple(_validate_age(index, entry) for index, entry in enumerate(raw_ages))

    # Lookups keep first-match semantics, so overlaps are reported, not rejected.
    for i, j in find_overlapping_ages(ages):
        logger.warning(
            "ages %r (#%d) and %r (#%d) overlap; the earlier entry wins lookups",
            ages[i].name, i, ages[j].name, j,
        )

    return AgeBasedConfig(ages=ages)


_VALIDATORS: dict[CalendarKind, Callable[[Mapping[str, Any]], NormalizedConfig]] = {
    CalendarKind.ABSOLUTE: _validate_absolute,
    CalendarKind.EPOCH_RELATIVE: _validate_epoch_relative,
    CalendarKind.AGE_BASED: _validate_age_based,
}


def validate_config(
    config: Mapping[str, Any] | NormalizedConfig | None,
    kind: CalendarKind | str,
) -> NormalizedConfig:
    """Validate and normalize a stored calendar configuration.

    Args:
        config: The JSON-like record stored for a saga, or an already
            normalized config (which yields an equal value).
        kind: Calendar kind tag (``"absolute"``, ``"epoch_relative"``,
            ``"age_based"``).

    Returns:
        The typed configuration for the kind.

    Raises:
        UnknownCalendarKindError: If the kind is not supported.
        MissingFieldError: If a required key is absent.
        MalformedAgeError: If an age lacks a name or start timestamp.
        InvalidFieldError: If a value cannot be coerced.
        ConfigKindMismatchError: If a normalized config of another kind is given.
    """
    calendar_kind = coerce_kind(kind)

    if isinstance(config, _NORMALIZED_TYPES):
        if config.kind is not calendar_kind:
            raise ConfigKindMismatchError(
                ERR_MSG_KIND_MISMATCH,
                f"{type(config).__name__} cannot be used as a {calendar_kind.value} calendar",
            )
        config = config.as_dict()
    elif config is None:
        config = {}
    elif not isinstance(config, Mapping):
        raise InvalidFieldError(
            ERR_MSG_INVALID_FIELD,
            f"calendar configuration must be a mapping, got {type(config).__name__}",
            field="calendar_config",
        )

    return _VALIDATORS[calendar_kind](config)
