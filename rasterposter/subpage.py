"""A band of raster lines buffered for one sheet of a poster layout."""

from __future__ import annotations

from enum import IntEnum

_PIXEL_COPY_BYTES = 3


class SubPageStatus(IntEnum):
    """Whether a sub-page is still collecting lines or ready to hand them out."""

    BUFFERING = 0
    BUFFERING_COMPLETE = 1


class SubPageError(Exception):
    """Raised when a sub-page is used in a state that does not allow it."""


class SubPage:
    """Collects raster lines cut from a wider source line, then yields them.

    Lines are taken from the source starting at byte ``raster_start``. Once
    ``height`` lines are buffered (or the buffer is flushed) the sub-page hands
    them out one at a time, after which it is cleared to white (0xFF) and
    starts buffering again.
    """

    def __init__(self, raster_start: int, bytes_per_line: int, height: int, bytes_per_pixel: int) -> None:
        self.raster_start = raster_start
        self.bytes_per_line = bytes_per_line
        self.height = height
        self.bytes_per_pixel = bytes_per_pixel
        self.buffered_line = 0
        self.fetched_line = 0
        self.status = SubPageStatus.BUFFERING
        self.raster = bytearray(bytes_per_line * height)

    def get_raster(self, size: int) -> bytes:
        """Return the next buffered line, ``size`` bytes long at most."""
        if self.status != SubPageStatus.BUFFERING_COMPLETE:
            raise SubPageError("sub-page is still buffering")
        if self.fetched_line >= self.height:
            raise SubPageError("no buffered line left")

        offset = self.fetched_line * self.bytes_per_line
        line = bytes(self.raster[offset:offset + size])
        self.fetched_line += 1

        if self.fetched_line >= self.height:
            self.buffered_line = 0
            # The buffer is reused for the next band; clear it so no stale line shows.
            self.raster[:] = b"\xff" * len(self.raster)
            self.status = SubPageStatus.BUFFERING
        return line

    def flush(self) -> None:
        """Make the lines buffered so far available, even if the band is not full."""
        if self.buffered_line <= 0:
            raise SubPageError("nothing buffered to flush")
        self.fetched_line = 0
        self.status = SubPageStatus.BUFFERING_COMPLETE

    def has_next_line(self) -> bool:
        """True when a buffered line is ready to be fetched."""
        return (
            self.status == SubPageStatus.BUFFERING_COMPLETE
            and self.fetched_line < self.height
        )

    def _require_buffering(self) -> None:
        if self.status != SubPageStatus.BUFFERING:
            raise SubPageError("sub-page is not accepting lines")

    def set_raster_rotate0(self, raster: bytes) -> None:
        """Append this sub-page's slice of a source line unrotated."""
        self._require_buffering()
        if self.bytes_per_line > len(raster):
            raise SubPageError("source line is shorter than a sub-page line")

        chunk = bytes(raster[self.raster_start:self.raster_start + self.bytes_per_line])
        offset = self.bytes_per_line * self.buffered_line
        self.raster[offset:offset + len(chunk)] = chunk
        self.buffered_line += 1

        if self.buffered_line >= self.height:
            self.fetched_line = 0
            self.status = SubPageStatus.BUFFERING_COMPLETE

    def set_raster_rotate90(self, raster: bytes) -> None:
        """Store a source line as a column, turning the page a quarter turn.

        The first source line fills the rightmost pixel column, each later
        one the column to its left.
        """
        self._require_buffering()
        rows = min(self.height, len(raster))
        pixels_per_line = self.bytes_per_line // self.bytes_per_pixel
        column = (pixels_per_line - 1) - self.buffered_line

        if column >= 0:
            for y in range(rows):
                src_start = self.raster_start + self.bytes_per_pixel * y
                pixel = bytes(raster[src_start:src_start + _PIXEL_COPY_BYTES])
                dest = y * self.bytes_per_line + self.bytes_per_pixel * column
                count = min(len(pixel), len(self.raster) - dest)
                if count > 0:
                    self.raster[dest:dest + count] = pixel[:count]
            self.buffered_line += 1

        if self.buffered_line >= pixels_per_line:
            self.fetched_line = 0
            self.status = SubPageStatus.BUFFERING_COMPLETE