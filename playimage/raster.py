"""
playimage.raster - Image loading and pixel brightness.

Pipeline Stage 1: decode an image file with Pillow into an immutable
luminance grid. Downstream stages only see the BrightnessSource protocol,
so they never depend on Pillow directly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image, UnidentifiedImageError

from playimage.exceptions import ImageLoadError

# sRGB relative luminance coefficients
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)


class BrightnessSource(Protocol):
    """Anything that can report the brightness of a pixel."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def brightness(self, x: int, y: int) -> float: ...


class Raster:
    """Immutable W x H grid of brightness values in [0.0, 1.0]."""

    def __init__(self, luminance: np.ndarray):
        if luminance.ndim != 2:
            raise ImageLoadError(f"Expected a 2D luminance grid, got shape {luminance.shape}")
        self._luminance = luminance.astype(np.float64, copy=True)
        self._luminance.setflags(write=False)

    @classmethod
    def from_rgb(cls, rgb: np.ndarray) -> Raster:
        """Build a raster from an (H, W, 3) array of 0-255 channel values."""
        if rgb.ndim != 3 or rgb.shape[2] < 3:
            raise ImageLoadError(f"Expected an RGB array, got shape {rgb.shape}")
        channels = rgb[:, :, :3].astype(np.float64)
        red, green, blue = channels[:, :, 0], channels[:, :, 1], channels[:, :, 2]
        luminance = (
            red * LUMA_WEIGHTS[0] + green * LUMA_WEIGHTS[1] + blue * LUMA_WEIGHTS[2]
        ) / 255
        return cls(luminance)

    @classmethod
    def from_image(cls, image: Image.Image) -> Raster:
        return cls.from_rgb(np.asarray(image.convert("RGB")))

    @property
    def width(self) -> int:
        return int(self._luminance.shape[1])

    @property
    def height(self) -> int:
        return int(self._luminance.shape[0])

    def brightness(self, x: int, y: int) -> float:
        return float(self._luminance[y, x])

    def __repr__(self) -> str:
        return f"Raster(width={self.width}, height={self.height})"


def load_raster(path: Path) -> Raster:
    """Decode an image file into a Raster.

    Args:
        path: Path to a bitmap (any format Pillow can read)

    Returns:
        Raster of the decoded image

    Raises:
        ImageLoadError: If the file is missing or cannot be decoded
    """
    if not path.exists():
        raise ImageLoadError(f"Image not found: {path}")

    try:
        with Image.open(path) as image:
            raster = Raster.from_image(image)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f"Could not decode image {path}: {e}") from e

    if raster.width < 1 or raster.height < 1:
        raise ImageLoadError(f"Image {path} has no pixels")

    return raster
