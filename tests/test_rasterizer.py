"""Tests for rasterizing images into cell grids."""

import numpy as np
import pytest
from PIL import Image

from termgallery.core.errors import RegionTooSmall
from termgallery.core.rasterizer import (
    Cell,
    CellGrid,
    Resample,
    SharpenSettings,
    cells_from_pixels,
    rasterize,
    resample,
)
from termgallery.core.reader import SourceImage


def _source(width=20, height=10, color=(128, 64, 32, 255)):
    return SourceImage.from_pil(Image.new("RGBA", (width, height), color))


def _step_edge(width=20, height=10):
    """Left half dark gray, right half light gray."""
    arr = np.full((height, width, 4), 255, dtype=np.uint8)
    arr[:, : width // 2, :3] = 64
    arr[:, width // 2 :, :3] = 192
    return SourceImage.from_pil(Image.fromarray(arr))


class RecordingPainter:
    def __init__(self):
        self.calls = []

    def paint(self, row, col, rgb):
        self.calls.append((row, col, rgb))


class TestCell:
    def test_blank(self):
        assert Cell.blank().is_blank
        assert Cell.blank().rgb is None

    def test_filled(self):
        cell = Cell.filled(1, 2, 3)
        assert not cell.is_blank
        assert cell.rgb == (1, 2, 3)


class TestAlphaThreshold:
    def test_zero_alpha_is_blank_regardless_of_rgb(self):
        pixels = np.array([[[255, 10, 20, 0], [0, 0, 0, 0]]], dtype=np.uint8)
        grid = cells_from_pixels(pixels)
        assert all(cell.is_blank for cell in grid.rows[0])

    def test_alpha_one_keeps_exact_rgb(self):
        pixels = np.array([[[40, 50, 60, 1]]], dtype=np.uint8)
        grid = cells_from_pixels(pixels)
        assert grid.cell(0, 0) == Cell.filled(40, 50, 60)

    def test_partial_alpha_is_not_blended(self):
        pixels = np.array([[[200, 100, 50, 128]]], dtype=np.uint8)
        grid = cells_from_pixels(pixels)
        assert grid.cell(0, 0).rgb == (200, 100, 50)

    def test_rasterize_same_size_nearest(self):
        img = Image.new("RGBA", (2, 1))
        img.putpixel((0, 0), (10, 20, 30, 0))
        img.putpixel((1, 0), (40, 50, 60, 1))
        grid = rasterize(SourceImage.from_pil(img), 2, 1, method=Resample.NEAREST)
        assert grid.cell(0, 0).is_blank
        assert grid.cell(0, 1).rgb == (40, 50, 60)

    def test_bilinear_downscale_keeps_faint_rgb(self):
        grid = rasterize(_source(4, 4, (40, 50, 60, 1)), 2, 2)
        assert all(cell.rgb == (40, 50, 60) for row in grid for cell in row)

    def test_bilinear_upscale_keeps_partial_alpha_rgb(self):
        grid = rasterize(_source(2, 2, (200, 100, 50, 20)), 4, 4)
        assert all(cell.rgb == (200, 100, 50) for row in grid for cell in row)

    @pytest.mark.parametrize("method", list(Resample))
    def test_resized_alpha_never_blends(self, method):
        grid = rasterize(_source(8, 6, (90, 180, 30, 128)), 3, 5, method=method)
        assert all(cell.rgb == (90, 180, 30) for row in grid for cell in row)

    def test_resample_keeps_alpha_band(self):
        resized = np.asarray(resample(_source(6, 6, (1, 2, 3, 7)), 3, 3))
        assert (resized[:, :, 3] == 7).all()
        assert (resized[:, :, :3] == (1, 2, 3)).all()

    def test_fully_transparent_image(self):
        grid = rasterize(_source(color=(255, 255, 255, 0)), 5, 3)
        assert all(cell.is_blank for row in grid for cell in row)

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            cells_from_pixels(np.zeros((2, 2, 3), dtype=np.uint8))


class TestGridShape:
    @pytest.mark.parametrize(
        "width,height",
        [(1, 1), (5, 3), (20, 10), (40, 30), (3, 17)],
    )
    def test_exact_dimensions(self, width, height):
        grid = rasterize(_source(), width, height)
        assert isinstance(grid, CellGrid)
        assert grid.width == width
        assert grid.height == height
        assert len(grid.rows) == height
        assert all(len(row) == width for row in grid.rows)

    def test_solid_colour_preserved(self):
        grid = rasterize(_source(color=(128, 64, 32, 255)), 4, 2)
        assert all(cell.rgb == (128, 64, 32) for row in grid for cell in row)

    @pytest.mark.parametrize("method", list(Resample))
    def test_all_resample_methods(self, method):
        grid = rasterize(_source(), 7, 4, method=method)
        assert grid.height == 4
        assert grid.width == 7

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0)])
    def test_empty_target_rejected(self, width, height):
        with pytest.raises(RegionTooSmall):
            rasterize(_source(), width, height)


class TestSharpen:
    def test_sharpen_changes_edges(self):
        src = _step_edge()
        plain = np.asarray(resample(src, 10, 5))
        sharp = np.asarray(resample(src, 10, 5, sharpen=SharpenSettings(percent=150)))
        assert plain.shape == sharp.shape
        assert not np.array_equal(plain[:, :, :3], sharp[:, :, :3])

    def test_sharpen_leaves_alpha_alone(self):
        img = Image.new("RGBA", (8, 8), (100, 100, 100, 255))
        img.putpixel((0, 0), (100, 100, 100, 0))
        src = SourceImage.from_pil(img)
        sharp = np.asarray(resample(src, 8, 8, sharpen=SharpenSettings()))
        assert sharp[0, 0, 3] == 0
        assert sharp[4, 4, 3] == 255

    def test_sharpen_keeps_grid_shape(self):
        grid = rasterize(_step_edge(), 6, 3, sharpen=SharpenSettings())
        assert grid.height == 3
        assert all(len(row) == 6 for row in grid)


class TestPaintOrder:
    def test_row_major(self):
        pixels = np.zeros((2, 3, 4), dtype=np.uint8)
        pixels[0, 1] = (1, 2, 3, 255)
        grid = cells_from_pixels(pixels)
        painter = RecordingPainter()
        grid.paint(painter)
        assert [(r, c) for r, c, _ in painter.calls] == [
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
        ]
        assert painter.calls[1][2] == (1, 2, 3)
        assert painter.calls[0][2] is None
