"""Splits the lines of one page across the sub-pages of a poster layout."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .options import PageLayout
from .subpage import SubPage, SubPageError


@dataclass(frozen=True)
class PageRegion:
    """Size of a raster page."""

    width: int
    height: int
    bytes_per_line: int
    bits_per_pixel: int


_GRID_SIZES = {
    PageLayout.LAYOUT_2x2: 2,
    PageLayout.LAYOUT_3x3: 3,
    PageLayout.LAYOUT_4x4: 4,
}


class SubPageManager:
    """Feeds source lines to the sub-pages of a layout and collects their output.

    ``region`` holds the size of one output sheet, worked out from the source
    page region and the layout.
    """

    def __init__(self, page_region: PageRegion, page_layout: PageLayout) -> None:
        self.page_layout = PageLayout(page_layout)
        bytes_per_pixel = page_region.bits_per_pixel // 8
        region = page_region
        rotate = False

        if self.page_layout == PageLayout.LAYOUT_1x1:
            count = 1
        elif self.page_layout == PageLayout.LAYOUT_2x1:
            count = 1
            width = (page_region.height + 1) // 2
            region = replace(
                page_region,
                width=width,
                height=page_region.width,
                bytes_per_line=(width * bytes_per_pixel + 3) // 4 * 4,
            )
            rotate = True
        else:
            count = _GRID_SIZES[self.page_layout]
            width = page_region.width // count
            region = replace(
                page_region,
                width=width,
                height=(page_region.height + count - 1) // count,
                bytes_per_line=width * page_region.bits_per_pixel // 8,
            )

        self.region = region
        self._rotate90 = rotate
        self.subpages: list[SubPage] = []
        for index in range(count):
            if self.page_layout != PageLayout.LAYOUT_2x1 and index == 0:
                height = 1
            else:
                height = region.height
            self.subpages.append(
                SubPage(region.bytes_per_line * index, region.bytes_per_line, height, bytes_per_pixel)
            )

    @property
    def vertical_num(self) -> int:
        return len(self.subpages)

    def get_raster(self, size: int) -> bytes | None:
        """Return the next ready line from the first sub-page that has one, else None."""
        for subpage in self.subpages:
            if subpage.has_next_line():
                return subpage.get_raster(size)
        return None

    def set_raster(self, raster: bytes) -> None:
        """Hand one source line to every sub-page; sub-pages not accepting it skip it."""
        for subpage in self.subpages:
            try:
                if self._rotate90:
                    subpage.set_raster_rotate90(raster)
                else:
                    subpage.set_raster_rotate0(raster)
            except SubPageError:
                continue

    def flush(self) -> bool:
        """Flush every sub-page; return whether the last one had lines to flush."""
        flushed = True
        for subpage in self.subpages:
            try:
                subpage.flush()
                flushed = True
            except SubPageError:
                flushed = False
        return flushed

    def has_next_page(self) -> bool:
        """True when any sub-page has a line ready."""
        return any(subpage.has_next_line() for subpage in self.subpages)