"""Records describing the user interface of a printer maintenance command.

A maintenance command carries a parameter record: a message to show, pickers
to choose values with, buttons to press and bitmaps to display. Labels are
UTF-8 text; raw bytes are decoded on construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .maintenance import CommandType


def _text(value: str | bytes | None) -> str | None:
    """Return a label as text, decoding UTF-8 bytes."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return value


@dataclass
class Picker:
    """A selector offering a number of choices, with a default and the user's pick."""

    label: str | None
    choice_number: int
    default_choice: int
    user_choice: int

    def __post_init__(self) -> None:
        self.label = _text(self.label)


@dataclass
class Button:
    """A button with a label and opaque data owned by the maintenance library."""

    label: str | None
    reserved_data: Any = None

    def __post_init__(self) -> None:
        self.label = _text(self.label)


@dataclass
class Bitmap:
    """An image to display, given by the path of a bitmap file."""

    label: str | None
    bmp_path: str | None

    def __post_init__(self) -> None:
        self.label = _text(self.label)
        self.bmp_path = _text(self.bmp_path)


@dataclass
class CommandParameter:
    """What to present for one step of a maintenance command."""

    message: str | None = None
    pickers: list[Picker] = field(default_factory=list)
    buttons: list[Button] = field(default_factory=list)
    button_selected: int = 0
    bitmaps: list[Bitmap] = field(default_factory=list)
    reserved_data: Any = None

    def __post_init__(self) -> None:
        self.message = _text(self.message)
        self.pickers = list(self.pickers)
        self.buttons = list(self.buttons)
        self.bitmaps = list(self.bitmaps)

    @property
    def picker_count(self) -> int:
        return len(self.pickers)

    @property
    def button_count(self) -> int:
        return len(self.buttons)

    @property
    def bmp_count(self) -> int:
        return len(self.bitmaps)


@dataclass
class Command:
    """A maintenance command offered by a printer, with its first parameter record."""

    command_type: CommandType
    name: str | None
    init_parameter: CommandParameter | None = None

    def __post_init__(self) -> None:
        self.command_type = CommandType(self.command_type)
        self.name = _text(self.name)