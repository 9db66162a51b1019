# rasterposter

Building blocks for a raster print filter. It is written in plain Python and
has no third-party dependencies.

## What it provides

### Job options — `rasterposter.options`

- `PpdFile` holds the options, their default choices and the keyword
  attributes of a PPD description. `PpdFile.parse(text)` and
  `PpdFile.read(path)` build one from PPD text. `default_choice(key)` returns
  an option's default choice, or `None`. `find_attributes(name)` yields the
  attributes with a given name, in file order.
- `parse_job_options(text)` turns a job option string into a dict. The string
  is made of space-separated `name=value` pairs. A bare `name` means `"true"`
  and a bare `noname` means `name` = `"false"`. Values may be quoted, and a
  backslash escapes the next character. Names are matched without regard to
  case.
- `lookup_choice(key, job_options, ppd)` returns the job's own choice for an
  option if it has one, and otherwise the PPD default.
- `setup_filter_option(ppd, job_options)` returns a `FilterPrintOption` with
  these settings:
  - poster layout (`PosterPrinting`: `Off`, `2x1`, `2x2`, `3x3`, `4x4`)
  - `Rotate180`
  - `MirrorImage`
  - watermark file (`Watermark`, matched against `epcgWatermarkData`
    attributes)
  - watermark position (`PositionWatermark`)
  - watermark density (`DensityWatermark`)
  - watermark colour (`ColorWatermark`)
  - watermark size (`SizeWatermark`, `10`–`100`, stored as `size_ratio`)

  A choice that is not recognised leaves the setting at its default.

The enums for these settings are `PageLayout`, `Rotate180`, `MirrorImage`,
`WatermarkPosition`, `WatermarkDensity` and `WatermarkColor`.

### Poster splitting — `rasterposter.subpagemanager`, `rasterposter.subpage`

`SubPageManager(page_region, page_layout)` takes the lines of a page described
by a `PageRegion` and cuts them into sub-pages for the 1x1, 2x1, 2x2, 3x3 and
4x4 layouts. The 2x1 layout is turned a quarter turn. `manager.region` gives
the size of one output sheet.

- `set_raster(line)` feeds one source line.
- `get_raster(size)` returns the next ready output line, or `None` if no line
  is ready.
- `has_next_page()` says whether any output line is ready.
- `flush()` releases partly filled sub-pages.

`SubPage` is the single band buffer behind the manager. Its misuse raises
`SubPageError`.

### Messages — `rasterposter.messages`

`Reporter(program_name, stream)` writes lines to standard error, or to the
given stream. Each line is tagged `**** ERROR ****`, `**** WARNING ****` or
`**** INFO ****` and carries an optional program-name prefix.

- `message(kind, text)` writes one line.
- `fatal(text)` writes an error and raises `SystemExit(1)`.
- `system_error(text, error_number)` does the same and adds the OS description
  of the error number.

`format_message(...)` builds a single line without writing it.

### Definitions

- `rasterposter.jobdefs`:
  - the result codes `ErrorCode`
  - `check(code)`, which raises `LibraryError` for any code other than
    success
  - `SeekOrigin` and `PageAttribute`
  - `LocalTime`, which converts to and from `datetime`
- `rasterposter.maintenance`:
  - `CommandType` and `Status`
  - `Locale`, with `Locale.from_code("zh-tw")`
- `rasterposter.maintenance_ui`: the records for a maintenance dialogue, which
  are `Picker`, `Button`, `Bitmap`, `CommandParameter` and `Command`.

## Example

```python
from rasterposter.options import PageLayout, setup_filter_option
from rasterposter.subpagemanager import PageRegion, SubPageManager

options = setup_filter_option(None, "PosterPrinting=2x2 Rotate180=On")
assert options.page_layout is PageLayout.LAYOUT_2x2

region = PageRegion(width=8, height=4, bytes_per_line=24, bits_per_pixel=24)
manager = SubPageManager(region, options.page_layout)

output = []
for line in page_lines:          # each line is a bytes object of 24 bytes
    manager.set_raster(line)
    while manager.has_next_page():
        output.append(manager.get_raster(manager.region.bytes_per_line))
manager.flush()
while manager.has_next_page():
    output.append(manager.get_raster(manager.region.bytes_per_line))
```

## What it does not do

This is a library. It has no command to run as a print filter. It does not
read raster input files, does not apply rotation, mirroring or watermarks to
pixel data, and does not produce printer commands. It does not talk to a
printer. Those steps are left to the program that uses these pieces.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```