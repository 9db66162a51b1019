"""Maintenance command kinds, their outcomes and the languages of their labels."""

from __future__ import annotations

from enum import IntEnum


class CommandType(IntEnum):
    """Kind of maintenance command a printer offers."""

    UNKNOWN = 0
    NOZZLECHECK = 1
    HEADCLEANING = 2
    PRINTHEADALIGNMENT = 3


class Status(IntEnum):
    """State reported after performing a maintenance command."""

    UNKNOWN = 0
    PROCESSING = 1
    COMPLETED = 2
    CANCELED = 3
    ERROR = 4
    NEED_NOZZLECHECK = 5
    NEED_HEADCLEANING = 6


class Locale(IntEnum):
    """Language used for maintenance messages and labels."""

    EN = 0
    JA = 1
    FR = 2
    DE = 3
    IT = 4
    PT = 5
    ES = 6
    NL = 7
    RU = 8
    ZH = 9
    KO = 10
    ZH_TW = 11

    @classmethod
    def from_code(cls, code: str) -> Locale:
        """Look a locale up by its name, ignoring case and accepting '-' for '_'."""
        key = code.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"unknown maintenance locale: {code!r}") from None