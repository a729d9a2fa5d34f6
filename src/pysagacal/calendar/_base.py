"""Abstract base class for calendar kinds."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from pysagacal._errors import ERR_MSG_KIND_MISMATCH, ConfigKindMismatchError
from pysagacal.config import CalendarKind, NormalizedConfig


class Calendar(ABC):
    """Converts between one calendar kind's canon dates and timestamps.

    Subclasses are bound to their validated config type and never mutate it.
    """

    kind: ClassVar[CalendarKind]
    config_type: ClassVar[type]

    def __init__(self, config: NormalizedConfig) -> None:
        if not isinstance(config, self.config_type):
            raise ConfigKindMismatchError(
                ERR_MSG_KIND_MISMATCH,
                f"{type(config).__name__} cannot be used as a {self.kind.value} calendar",
            )
        self._config = config

    @property
    def config(self) -> NormalizedConfig:
        return self._config

    @abstractmethod
    def to_timestamp(self, date_text: str) -> int: ...

    @abstractmethod
    def to_canon_date(self, timestamp: int) -> str: ...
