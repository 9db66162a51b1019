"""Filter print options: poster layout, rotation, mirroring and watermarks.

Each option is looked up first among the options given to the job and then
among the defaults of the printer's PPD description. Choices that are not
recognised leave the option at its default.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

WATERMARK_OPTION_NAME = "Watermark"
WATERMARK_ATTRIBUTE_NAME = "epcgWatermarkData"
WATERMARK_PATH_LIMIT = 512


class PageLayout(IntEnum):
    """How one page is spread over several sheets."""

    LAYOUT_1x1 = 0
    LAYOUT_2x1 = 1
    LAYOUT_2x2 = 2
    LAYOUT_3x3 = 3
    LAYOUT_4x4 = 4


class Rotate180(IntEnum):
    OFF = 0
    ON = 1


class MirrorImage(IntEnum):
    OFF = 0
    ON = 1


class WatermarkPosition(IntEnum):
    CENTER = 0
    TOPLEFT = 1
    TOP = 2
    TOPRIGHT = 3
    LEFT = 4
    RIGHT = 5
    BOTTOMLEFT = 6
    BOTTOM = 7
    BOTTOMRIGHT = 8


class WatermarkDensity(IntEnum):
    """Watermark density, from LEVEL1 (light) to LEVEL6 (dark)."""

    LEVEL1 = 0
    LEVEL2 = 1
    LEVEL3 = 2
    LEVEL4 = 3
    LEVEL5 = 4
    LEVEL6 = 5


class WatermarkColor(IntEnum):
    BLACK = 0
    BLUE = 1
    LIME = 2
    AQUA = 3
    RED = 4
    FUCHSIA = 5
    YELLOW = 6


_DEFAULT_WATERMARK_SIZE = 70


@dataclass
class FilterPrintOption:
    """The options that shape how pages are laid out and decorated."""

    page_layout: PageLayout = PageLayout.LAYOUT_1x1
    rotate180: Rotate180 = Rotate180.OFF
    mirror_image: MirrorImage = MirrorImage.OFF
    use_watermark: bool = False
    watermark_file_path: str = ""
    size_ratio: float = _DEFAULT_WATERMARK_SIZE / 10.0
    watermark_position: WatermarkPosition = WatermarkPosition.CENTER
    watermark_density: WatermarkDensity = WatermarkDensity.LEVEL4
    watermark_color: WatermarkColor = WatermarkColor.RED


@dataclass(frozen=True)
class PpdAttribute:
    """A main keyword line of a PPD file: name, option keyword and value."""

    name: str
    spec: str
    value: str


@dataclass
class PpdOption:
    """A user-selectable PPD option with its default and its choices."""

    keyword: str
    default: str | None = None
    choices: list[str] = field(default_factory=list)


class PpdFile:
    """The parts of a PPD description that filter options are read from."""

    def __init__(
        self,
        options: list[PpdOption] | None = None,
        attributes: list[PpdAttribute] | None = None,
    ) -> None:
        self.options: list[PpdOption] = list(options or [])
        self.attributes: list[PpdAttribute] = list(attributes or [])

    @classmethod
    def parse(cls, text: str) -> PpdFile:
        """Read options, defaults and attributes from PPD text."""
        options: dict[str, PpdOption] = {}
        defaults: dict[str, str] = {}
        attributes: list[PpdAttribute] = []
        current: PpdOption | None = None

        for name, spec, value in _ppd_entries(text):
            if name in ("OpenUI", "JCLOpenUI"):
                keyword = spec.lstrip("*")
                current = options.setdefault(keyword.casefold(), PpdOption(keyword))
                continue
            if name in ("CloseUI", "JCLCloseUI"):
                current = None
                continue
            if current is not None and spec and name.casefold() == current.keyword.casefold():
                current.choices.append(spec)
                continue
            if name.startswith("Default") and len(name) > len("Default"):
                defaults[name[len("Default"):].casefold()] = value
            attributes.append(PpdAttribute(name, spec, value))

        for key, default in defaults.items():
            if key in options:
                options[key].default = default
        return cls(list(options.values()), attributes)

    @classmethod
    def read(cls, path: str | Path) -> PpdFile:
        """Parse the PPD file at the given path."""
        return cls.parse(Path(path).read_text(encoding="utf-8", errors="replace"))

    def find_attributes(self, name: str) -> Iterator[PpdAttribute]:
        """Yield the attributes with the given name, in file order."""
        folded = name.casefold()
        return (attr for attr in self.attributes if attr.name.casefold() == folded)

    def default_choice(self, key: str) -> str | None:
        """Return the default choice of an option, or None if there is none."""
        folded = key.casefold()
        option = next((opt for opt in self.options if opt.keyword.casefold() == folded), None)
        if option is None or option.default is None:
            return None
        default = option.default.casefold()
        return next((choice for choice in option.choices if choice.casefold() == default), None)


def _ppd_entries(text: str) -> Iterator[tuple[str, str, str]]:
    """Yield (name, spec, value) for each main keyword line, joining quoted values."""
    lines = iter(text.splitlines())
    for line in lines:
        if not line.startswith("*") or line.startswith("*%") or line.startswith("*End"):
            continue
        head, sep, value = line[1:].partition(":")
        head = head.strip()
        if not head:
            continue
        value = value.strip() if sep else ""
        if value.startswith('"'):
            body = value[1:]
            collected = [body]
            while '"' not in body:
                try:
                    body = next(lines)
                except StopIteration:
                    break
                collected.append(body)
            value = "\n".join(collected)
            end = value.find('"')
            if end >= 0:
                value = value[:end]
        parts = head.split(None, 1)
        name = parts[0]
        spec = parts[1].split("/", 1)[0].strip() if len(parts) > 1 else ""
        yield name, spec, value


def _store_option(result: dict[str, str], name: str, value: str) -> None:
    folded = name.casefold()
    for existing in [key for key in result if key.casefold() == folded]:
        del result[existing]
    result[name] = value


def _read_quoted(text: str, pos: int, quote: str) -> tuple[str, int]:
    """Read a quoted run starting after the opening quote; return its content and the next position."""
    chars: list[str] = []
    n = len(text)
    while pos < n and text[pos] != quote:
        if text[pos] == "\\" and pos + 1 < n:
            pos += 1
        chars.append(text[pos])
        pos += 1
    return "".join(chars), min(pos + 1, n)


def _read_value(text: str, pos: int) -> tuple[str, int]:
    chars: list[str] = []
    depth = 0
    n = len(text)
    while pos < n:
        ch = text[pos]
        if ch.isspace() and depth == 0:
            break
        if ch == "\\" and pos + 1 < n:
            chars.append(text[pos + 1])
            pos += 2
        elif ch in "'\"":
            content, pos = _read_quoted(text, pos + 1, ch)
            chars.append(f"{ch}{content}{ch}" if depth else content)
        elif ch == "{":
            depth += 1
            chars.append(ch)
            pos += 1
        elif ch == "}" and depth:
            depth -= 1
            chars.append(ch)
            pos += 1
        else:
            chars.append(ch)
            pos += 1
    return "".join(chars), pos


def parse_job_options(text: str | None) -> dict[str, str]:
    """Parse a job option string of space separated name=value pairs.

    A bare name means "true"; a bare name starting with "no" sets the rest
    of the name to "false". Values may be quoted with ' or ", and a
    backslash takes the next character literally. A later option replaces
    an earlier one of the same name, regardless of case.
    """
    result: dict[str, str] = {}
    if not text:
        return result
    pos, n = 0, len(text)
    while pos < n:
        while pos < n and text[pos].isspace():
            pos += 1
        if pos >= n:
            break
        start = pos
        while pos < n and not text[pos].isspace() and text[pos] != "=":
            pos += 1
        name = text[start:pos]
        if pos < n and text[pos] == "=":
            value, pos = _read_value(text, pos + 1)
        elif len(name) > 2 and name[:2].casefold() == "no":
            name, value = name[2:], "false"
        else:
            value = "true"
        if name:
            _store_option(result, name, value)
    return result


def lookup_choice(
    key: str,
    job_options: str | Mapping[str, str] | None,
    ppd: PpdFile | None,
) -> str | None:
    """Return the choice for an option: the job's own, else the PPD default."""
    options = parse_job_options(job_options) if isinstance(job_options, str) else job_options
    if options:
        folded = key.casefold()
        for name, value in options.items():
            if name.casefold() == folded:
                return value
    if ppd is not None:
        return ppd.default_choice(key)
    return None


_PAGE_LAYOUT_CHOICES = {
    "Off": PageLayout.LAYOUT_1x1,
    "2x1": PageLayout.LAYOUT_2x1,
    "2x2": PageLayout.LAYOUT_2x2,
    "3x3": PageLayout.LAYOUT_3x3,
    "4x4": PageLayout.LAYOUT_4x4,
}
_ROTATE_CHOICES = {"Off": Rotate180.OFF, "On": Rotate180.ON}
_MIRROR_CHOICES = {"Off": MirrorImage.OFF, "On": MirrorImage.ON}
_POSITION_CHOICES = {
    "Center": WatermarkPosition.CENTER,
    "TopLeft": WatermarkPosition.TOPLEFT,
    "Top": WatermarkPosition.TOP,
    "TopRight": WatermarkPosition.TOPRIGHT,
    "Left": WatermarkPosition.LEFT,
    "Right": WatermarkPosition.RIGHT,
    "BottomLeft": WatermarkPosition.BOTTOMLEFT,
    "Bottom": WatermarkPosition.BOTTOM,
    "BottomRight": WatermarkPosition.BOTTOMRIGHT,
    "Middle": WatermarkPosition.CENTER,
}
_DENSITY_CHOICES = {f"Level{level.value + 1}": level for level in WatermarkDensity}
_COLOR_CHOICES = {
    "Black": WatermarkColor.BLACK,
    "Blue": WatermarkColor.BLUE,
    "Lime": WatermarkColor.LIME,
    "Aqua": WatermarkColor.AQUA,
    "Red": WatermarkColor.RED,
    "Fuchsia": WatermarkColor.FUCHSIA,
    "Yellow": WatermarkColor.YELLOW,
}
_SIZE_CHOICES = {str(size): size for size in range(10, 101, 10)}

# Field of FilterPrintOption, option keyword, table of choices.
_TABLE_OPTIONS = (
    ("page_layout", "PosterPrinting", _PAGE_LAYOUT_CHOICES),
    ("rotate180", "Rotate180", _ROTATE_CHOICES),
    ("mirror_image", "MirrorImage", _MIRROR_CHOICES),
)
_WATERMARK_TABLE_OPTIONS = (
    ("watermark_position", "PositionWatermark", _POSITION_CHOICES),
    ("watermark_density", "DensityWatermark", _DENSITY_CHOICES),
    ("watermark_color", "ColorWatermark", _COLOR_CHOICES),
)


def setup_filter_option(
    ppd: PpdFile | None,
    job_options: str | Mapping[str, str] | None,
) -> FilterPrintOption:
    """Work out the filter print options for a job."""
    options = parse_job_options(job_options) if isinstance(job_options, str) else job_options
    result = FilterPrintOption()

    def apply(table_options: tuple) -> None:
        for attr, keyword, table in table_options:
            choice = lookup_choice(keyword, options, ppd)
            if choice in table:
                setattr(result, attr, table[choice])

    apply(_TABLE_OPTIONS)

    choice = lookup_choice(WATERMARK_OPTION_NAME, options, ppd)
    if choice is not None and ppd is not None:
        for attr in ppd.find_attributes(WATERMARK_ATTRIBUTE_NAME):
            if attr.spec == choice:
                result.use_watermark = True
                result.watermark_file_path = attr.value[:WATERMARK_PATH_LIMIT]
                break

    apply(_WATERMARK_TABLE_OPTIONS)

    size = lookup_choice("SizeWatermark", options, ppd)
    if size in _SIZE_CHOICES:
        result.size_ratio = _SIZE_CHOICES[size] / 10.0
    return result