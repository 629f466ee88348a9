"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest
from PIL import Image

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


class GridSource:
    """In-memory brightness source for extractor tests."""

    def __init__(self, rows: list[list[float]]):
        self.rows = rows

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def brightness(self, x: int, y: int) -> float:
        return self.rows[y][x]


@pytest.fixture
def grid_source() -> Callable[[int, int, Iterable[tuple[int, int]]], GridSource]:
    """Build a white grid with the given (x, y) pixels set to black."""

    def _build(width: int, height: int, dark: Iterable[tuple[int, int]] = ()) -> GridSource:
        rows = [[1.0] * width for _ in range(height)]
        for x, y in dark:
            rows[y][x] = 0.0
        return GridSource(rows)

    return _build


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Write a white RGB bitmap with black pixels at the given coordinates."""

    def _make(
        width: int,
        height: int,
        dark: Iterable[tuple[int, int]] = (),
        name: str = "waveform.bmp",
    ) -> Path:
        image = Image.new("RGB", (width, height), WHITE)
        for x, y in dark:
            image.putpixel((x, y), BLACK)
        path = tmp_path / name
        image.save(path)
        return path

    return _make


@pytest.fixture
def golden_image(make_image) -> Path:
    """2x10 image with one dark pixel per column, at rows 3 and 7."""
    return make_image(2, 10, [(0, 3), (1, 7)])


@pytest.fixture
def golden_pcm() -> bytes:
    """Expected PCM payload for golden_image with the default constants."""
    return bytes(
        [0] * 9
        + [0] * 9
        + [0, 28, 56, 85, 113, 141, 170, 198, 226]
        + [255] * 9
    )
