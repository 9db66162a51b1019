"""Diagnostic messages written to the standard error stream."""

from __future__ import annotations

import os
import sys
from enum import IntEnum
from typing import NoReturn, TextIO

_MAX_PROGRAM_NAME = 256


class MessageType(IntEnum):
    """Severity of a diagnostic message."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    MESSAGE = 3


_PREFIXES = {
    MessageType.ERROR: "**** ERROR **** : ",
    MessageType.WARNING: "**** WARNING **** : ",
    MessageType.INFO: "**** INFO **** : ",
}


def format_message(
    program_name: str,
    kind: MessageType,
    text: str,
    error_number: int = 0,
) -> str:
    """Build one diagnostic line, without the trailing newline.

    The line starts with the program name when there is one, then a marker
    for errors, warnings and notes (plain messages carry none), then the
    text, and, for a non-zero error number, the system's description of it.
    """
    parts = []
    if program_name:
        parts.append(f"{program_name} : ")
    parts.append(_PREFIXES.get(MessageType(kind), ""))
    parts.append(text)
    if error_number:
        parts.append(f" : {os.strerror(error_number)}")
    return "".join(parts)


class Reporter:
    """Writes diagnostics tagged with a program name to a text stream.

    A name of 256 characters or more is ignored, leaving the name empty.
    When no stream is given, the current standard error stream is used.
    """

    def __init__(self, program_name: str | None = None, stream: TextIO | None = None) -> None:
        self.program_name = ""
        if program_name and len(program_name) < _MAX_PROGRAM_NAME:
            self.program_name = program_name
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def _write(self, kind: MessageType, text: str, error_number: int = 0) -> None:
        out = self.stream
        out.write(format_message(self.program_name, kind, text, error_number) + "\n")
        out.flush()

    def message(self, kind: MessageType, text: str) -> None:
        """Write a diagnostic of the given severity."""
        self._write(kind, text)

    def fatal(self, text: str) -> NoReturn:
        """Write an error and end the program with status 1."""
        self._write(MessageType.ERROR, text)
        raise SystemExit(1)

    def system_error(self, text: str, error_number: int) -> NoReturn:
        """Write an error with the description of an OS error number, then exit with status 1."""
        self._write(MessageType.ERROR, text, error_number)
        raise SystemExit(1)