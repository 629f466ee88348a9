"""
playimage.stretch - Normalization and time-stretching.

Pipeline Stage 4: rescale the smoothed row coordinates to 0-255 and
expand every value into `rate` bytes by linear interpolation from the
previous value.
"""

from __future__ import annotations

from collections.abc import Sequence

from playimage.exceptions import DegenerateWaveformError, SampleRangeError

BYTE_MAX = 255


def normalize(values: Sequence[int]) -> list[float]:
    """Map values onto [0, 255] using the global min and max.

    Args:
        values: Smoothed samples

    Returns:
        List of floats, same length as values

    Raises:
        DegenerateWaveformError: If values is empty or every value is equal
    """
    if not values:
        raise DegenerateWaveformError()

    min_value = min(values)
    max_value = max(values)
    if min_value == max_value:
        raise DegenerateWaveformError(min_value)

    span = max_value - min_value
    return [(v - min_value) / span * BYTE_MAX for v in values]


def to_byte(value: float, index: int) -> int:
    """Truncate an interpolated sample to an unsigned byte.

    Raises:
        SampleRangeError: If the truncated value falls outside 0-255
    """
    truncated = int(value)
    if not 0 <= truncated <= BYTE_MAX:
        raise SampleRangeError(index, value)
    return truncated


class TimeStretcher:
    """Linear-interpolation upsampler from normalized samples to PCM bytes."""

    def __init__(self, rate: int = 9) -> None:
        if rate < 1:
            raise ValueError(f"Stretch rate must be at least 1, got {rate}")
        self.rate = rate

    def interpolate(self, previous: float, target: float) -> list[float]:
        """Return `rate` points stepping from previous toward target.

        The last point stops one step short of target.
        """
        points = []
        for x in range(self.rate):
            t = x / self.rate
            points.append(t * target + (1 - t) * previous)
        return points

    def stretch(self, normalized: Sequence[float]) -> bytes:
        """Expand normalized samples into an unsigned 8-bit PCM buffer.

        The baseline for each group is the previous target truncated to an
        integer, starting from 0.

        Args:
            normalized: Values in [0, 255]

        Returns:
            bytes of length len(normalized) * rate
        """
        buffer = bytearray()
        last = 0
        for value in normalized:
            for point in self.interpolate(last, value):
                buffer.append(to_byte(point, len(buffer)))
            last = int(value)
        return bytes(buffer)

    def render(self, values: Sequence[int]) -> bytes:
        """Normalize then stretch smoothed samples."""
        return self.stretch(normalize(values))
