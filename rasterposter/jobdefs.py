"""Basic definitions shared by the print job layer: result codes, seek origins,
page attributes and the local time record handed to the job library."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import IntEnum

JOB_NAME_BUFFER_SIZE = 32
"""Size of the job name buffer, terminator included."""

_UINT8_MAX = 255
_UINT16_MAX = 65535


class ErrorCode(IntEnum):
    """Result codes reported by the print job library."""

    NONE = 0
    ERROR = -1
    OPR_FAIL = -1000
    MEMORY_ALLOCATION = -1001
    INVALID_CALL = -1012
    LIB_INITIALIZED = -1050
    INV_ARGUMENT = -1200
    INV_FUNCPTR = -1300


class SeekOrigin(IntEnum):
    """Reference point for seeking within a resource."""

    SET = 0
    CUR = 1
    END = 2


class PageAttribute(IntEnum):
    """Page attributes that can be queried from the job library."""

    PRINTABLEAREA_WIDTH = 0
    PRINTABLEAREA_HEIGHT = 1
    FLIP_VERTICAL = 2
    FLIP_HORIZONTAL = 3


class LibraryError(Exception):
    """Raised when a library call reports a failure code."""

    def __init__(self, code: int) -> None:
        try:
            self.code: int = ErrorCode(code)
            label = self.code.name
        except ValueError:
            self.code = code
            label = "UNKNOWN"
        super().__init__(f"library call failed: {label} ({code})")


def check(code: int) -> ErrorCode:
    """Return ErrorCode.NONE for a success code, raise LibraryError otherwise."""
    if code == ErrorCode.NONE:
        return ErrorCode.NONE
    raise LibraryError(code)


@dataclass(frozen=True)
class LocalTime:
    """Calendar time with a 16-bit year and 8-bit remaining fields."""

    year: int
    mon: int
    day: int
    hour: int
    min: int
    sec: int

    def __post_init__(self) -> None:
        if not 0 <= self.year <= _UINT16_MAX:
            raise ValueError(f"year out of range: {self.year}")
        for name in ("mon", "day", "hour", "min", "sec"):
            value = getattr(self, name)
            if not 0 <= value <= _UINT8_MAX:
                raise ValueError(f"{name} out of range: {value}")

    @classmethod
    def from_datetime(cls, moment: _dt.datetime) -> LocalTime:
        """Build a record from a datetime, dropping sub-second precision."""
        return cls(
            moment.year,
            moment.month,
            moment.day,
            moment.hour,
            moment.minute,
            moment.second,
        )

    @classmethod
    def now(cls) -> LocalTime:
        """The current local time."""
        return cls.from_datetime(_dt.datetime.now())

    def to_datetime(self) -> _dt.datetime:
        """Convert to a naive datetime; raises ValueError for impossible dates."""
        return _dt.datetime(self.year, self.mon, self.day, self.hour, self.min, self.sec)