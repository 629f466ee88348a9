"""Tests for playimage.extract module."""

from __future__ import annotations

import pytest

from playimage.exceptions import ImageLoadError
from playimage.extract import ExtentExtractor


class TestColumnExtent:
    def test_min_and_max_of_dark_rows(self, grid_source) -> None:
        source = grid_source(1, 10, [(0, 2), (0, 5), (0, 7)])
        assert ExtentExtractor().column_extent(source, 0) == (2, 7)

    def test_single_dark_pixel(self, grid_source) -> None:
        source = grid_source(1, 10, [(0, 4)])
        assert ExtentExtractor().column_extent(source, 0) == (4, 4)

    def test_empty_column_gives_sentinel_pair(self, grid_source) -> None:
        source = grid_source(1, 10)
        assert ExtentExtractor().column_extent(source, 0) == (10, 0)

    def test_threshold_is_strict(self, grid_source) -> None:
        source = grid_source(1, 3)
        source.rows[1][0] = 0.5
        assert ExtentExtractor(threshold=0.5).column_extent(source, 0) == (3, 0)
        assert ExtentExtractor(threshold=0.51).column_extent(source, 0) == (1, 1)


class TestExtract:
    def test_sequence_interleaves_min_and_max(self, grid_source) -> None:
        source = grid_source(3, 8, [(0, 1), (0, 6), (1, 3), (2, 0), (2, 7)])
        assert ExtentExtractor().extract(source) == [1, 6, 3, 3, 0, 7]

    def test_length_is_twice_width(self, grid_source) -> None:
        source = grid_source(5, 4, [(0, 0)])
        assert len(ExtentExtractor().extract(source)) == 10

    def test_sentinels_for_every_empty_column(self, grid_source) -> None:
        source = grid_source(3, 6, [(1, 2)])
        assert ExtentExtractor().extract(source) == [6, 0, 2, 2, 6, 0]

    def test_raster_source(self, make_image) -> None:
        from playimage.raster import load_raster

        raster = load_raster(make_image(2, 10, [(0, 3), (1, 7)]))
        assert ExtentExtractor().extract(raster) == [3, 3, 7, 7]

    def test_empty_source_raises(self, grid_source) -> None:
        with pytest.raises(ImageLoadError):
            ExtentExtractor().extract(grid_source(0, 0))
