"""
playimage.exceptions - Custom exception classes.

All playimage-specific exceptions inherit from PlayImageError.
"""


class PlayImageError(Exception):
    """Base exception for all playimage errors."""

    pass


class ConfigError(PlayImageError):
    """Configuration loading or validation error."""

    pass


class ImageLoadError(PlayImageError):
    """Input image missing, undecodable or empty."""

    pass


class DegenerateWaveformError(PlayImageError, ZeroDivisionError):
    """Waveform has no amplitude range (all samples equal)."""

    def __init__(self, value: int | None = None):
        self.value = value
        if value is None:
            message = "Cannot normalize an empty waveform"
        else:
            message = f"Waveform is flat (every sample equals {value}); nothing to normalize"
        super().__init__(message)


class SampleRangeError(PlayImageError, ValueError):
    """Interpolated sample does not fit in an unsigned 8-bit byte."""

    def __init__(self, index: int, value: float):
        self.index = index
        self.value = value
        super().__init__(f"Sample {index} out of byte range: {value!r}")


class WavFormatError(PlayImageError):
    """WAV header could not be parsed."""

    pass
