"""
playimage.extract - Per-column extent extraction.

Pipeline Stage 2: treat dark pixels as the drawn waveform and record, for
every column, the topmost and bottommost dark row.
"""

from __future__ import annotations

from playimage.exceptions import ImageLoadError
from playimage.logging import logger
from playimage.raster import BrightnessSource


class ExtentExtractor:
    """Collects (min, max) dark-row pairs column by column.

    A column without any dark pixel yields the sentinel pair (height, 0).
    The pair is kept as-is so it still pulls on the global min/max during
    normalization.
    """

    def __init__(self, threshold: float = 0.5) -> None:
        self.threshold = threshold

    def is_dark(self, source: BrightnessSource, x: int, y: int) -> bool:
        return source.brightness(x, y) < self.threshold

    def column_extent(self, source: BrightnessSource, x: int) -> tuple[int, int]:
        """Return (min_row, max_row) of dark pixels in column x."""
        low = source.height
        high = 0
        for y in range(source.height):
            if self.is_dark(source, x, y):
                low = min(y, low)
                high = max(high, y)
        return low, high

    def extract(self, source: BrightnessSource) -> list[int]:
        """Build the flat extent sequence [min0, max0, min1, max1, ...].

        Args:
            source: Raster or any other brightness source

        Returns:
            List of length 2 * width

        Raises:
            ImageLoadError: If the source has no pixels
        """
        if source.width < 1 or source.height < 1:
            raise ImageLoadError(f"Cannot extract extents from a {source.width}x{source.height} image")

        values: list[int] = []
        empty_columns = 0
        for x in range(source.width):
            low, high = self.column_extent(source, x)
            if low == source.height and high == 0:
                empty_columns += 1
            values.append(low)
            values.append(high)

        if empty_columns:
            logger.debug(f"{empty_columns} column(s) had no dark pixels")
        return values
