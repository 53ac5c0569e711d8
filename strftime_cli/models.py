"""Domain models and constants for the strftime CLI."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

ISO_8601_FORMAT = "%Y-%m-%dT%H:%M:%S"
AMERICAN_FORMAT = "%m-%d-%Y"
EUROPEAN_FORMAT = "%d-%m-%Y"
RFC_2822_FORMAT = "%a, %d %b %Y %H:%M:%S %z"


class FormatId(str, Enum):
    ISO_8601 = "1"
    AMERICAN = "2"
    EUROPEAN = "3"
    RFC_2822 = "4"
    UNIX = "5"
    CUSTOM = "6"


class OutputMode(str, Enum):
    JSON = "json"
    START = "start"
    END = "end"

    @classmethod
    def list(cls) -> list[str]:
        return [mode.value for mode in cls]


class TimeUnit(str, Enum):
    MINUTE = "m"
    HOUR = "h"
    DAY = "d"
    WEEK = "w"
    MONTH = "M"


FIXED_TEMPLATES = {
    FormatId.ISO_8601: ISO_8601_FORMAT,
    FormatId.AMERICAN: AMERICAN_FORMAT,
    FormatId.EUROPEAN: EUROPEAN_FORMAT,
    FormatId.RFC_2822: RFC_2822_FORMAT,
}


@dataclass(slots=True, frozen=True)
class FormatSpec:
    format_id: FormatId
    template: str | None = None

    @property
    def is_timestamp(self) -> bool:
        return self.format_id is FormatId.UNIX

    @property
    def takes_template_argument(self) -> bool:
        return self.format_id is FormatId.CUSTOM


@dataclass(slots=True, frozen=True)
class TextPair:
    start: str
    end: str


@dataclass(slots=True, frozen=True)
class TimestampPair:
    start: int
    end: int


FormattedPair = Union[TextPair, TimestampPair]
