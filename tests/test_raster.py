"""Tests for playimage.raster module."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from playimage.exceptions import ImageLoadError
from playimage.raster import Raster, load_raster


class TestRaster:
    def test_from_rgb_uses_srgb_luminance(self) -> None:
        rgb = np.array([[[255, 0, 0], [0, 255, 0], [0, 0, 255]]], dtype=np.uint8)
        raster = Raster.from_rgb(rgb)
        assert raster.brightness(0, 0) == pytest.approx(0.2126)
        assert raster.brightness(1, 0) == pytest.approx(0.7152)
        assert raster.brightness(2, 0) == pytest.approx(0.0722)

    def test_black_and_white(self) -> None:
        rgb = np.array([[[0, 0, 0]], [[255, 255, 255]]], dtype=np.uint8)
        raster = Raster.from_rgb(rgb)
        assert raster.brightness(0, 0) == 0.0
        assert raster.brightness(0, 1) == pytest.approx(1.0)

    def test_dimensions(self) -> None:
        raster = Raster(np.zeros((10, 3)))
        assert raster.width == 3
        assert raster.height == 10

    def test_brightness_is_addressed_x_then_y(self) -> None:
        luminance = np.ones((4, 2))
        luminance[3, 1] = 0.25
        raster = Raster(luminance)
        assert raster.brightness(1, 3) == 0.25

    def test_raster_is_immutable_copy(self) -> None:
        luminance = np.ones((2, 2))
        raster = Raster(luminance)
        luminance[0, 0] = 0.0
        assert raster.brightness(0, 0) == 1.0

    def test_rejects_non_rgb_array(self) -> None:
        with pytest.raises(ImageLoadError):
            Raster.from_rgb(np.zeros((2, 2)))


class TestLoadRaster:
    def test_load_bitmap(self, make_image) -> None:
        path = make_image(4, 6, [(2, 5)])
        raster = load_raster(path)
        assert raster.width == 4
        assert raster.height == 6
        assert raster.brightness(2, 5) < 0.5
        assert raster.brightness(0, 0) > 0.5

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ImageLoadError, match="not found"):
            load_raster(tmp_path / "missing.bmp")

    def test_load_garbage_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.bmp"
        path.write_bytes(b"definitely not an image")
        with pytest.raises(ImageLoadError) as exc_info:
            load_raster(path)
        assert exc_info.value.__cause__ is not None
