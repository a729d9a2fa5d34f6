"""Exception hierarchy for calendar conversion."""

from __future__ import annotations

from typing import Any


class CalendarError(Exception):
    """Base exception for calendar conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details (including the offending input) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ConfigError(CalendarError):
    """Raised when a calendar configuration is invalid."""


class ParseError(CalendarError):
    """Raised when a canon date cannot be converted to a timestamp."""


class UnknownCalendarKindError(ConfigError):
    """Raised when a calendar kind is outside the supported set."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        kind: Any = None,
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.kind = kind


class MissingFieldError(ConfigError):
    """Raised when a required configuration key is absent."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        field: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.field = field


class InvalidFieldError(ConfigError):
    """Raised when a configuration value has the wrong shape or type."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        field: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.field = field


class MalformedAgeError(ConfigError):
    """Raised when an age entry lacks a name or start timestamp."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        index: int = -1,
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.index = index


class ConfigKindMismatchError(ConfigError):
    """Raised when a normalized config is used with a different calendar kind."""


class UnparseableDateError(ParseError):
    """Raised when no notation matches a canon date."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        text: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.text = text


class UnknownAgeError(ParseError):
    """Raised when a canon date names an age that is not configured."""

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        name: str = "",
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.name = name


# Sanitized user-facing error message constants
ERR_MSG_UNKNOWN_CALENDAR_KIND = "unknown calendar kind"
ERR_MSG_MISSING_FIELD = "calendar configuration is missing a required field"
ERR_MSG_INVALID_FIELD = "calendar configuration field has an invalid value"
ERR_MSG_MALFORMED_AGE = "each age requires a name and start_timestamp"
ERR_MSG_KIND_MISMATCH = "calendar configuration does not match calendar kind"
ERR_MSG_UNPARSEABLE_DATE = "date cannot be parsed"
ERR_MSG_UNKNOWN_AGE = "unknown age"
