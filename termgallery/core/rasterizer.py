"""Image to cell-grid rasterization.

Resize → optional unsharp mask → per-pixel alpha threshold → row-major grid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator

import numpy as np
from PIL import Image, ImageFilter

from termgallery.core.errors import RegionTooSmall
from termgallery.core.reader import SourceImage

if TYPE_CHECKING:
    from termgallery.core.painter import CellPainter

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


class Resample(str, Enum):
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"
    LANCZOS = "lanczos"
    NEAREST = "nearest"  # Low-fidelity fallback

    @property
    def pil_filter(self) -> Image.Resampling:
        return _PIL_FILTERS[self]


_PIL_FILTERS = {
    Resample.BILINEAR: Image.Resampling.BILINEAR,
    Resample.BICUBIC: Image.Resampling.BICUBIC,
    Resample.LANCZOS: Image.Resampling.LANCZOS,
    Resample.NEAREST: Image.Resampling.NEAREST,
}


@dataclass(frozen=True)
class SharpenSettings:
    """Unsharp mask parameters (see ``PIL.ImageFilter.UnsharpMask``)."""

    radius: float = 1.0
    percent: int = 80
    threshold: int = 2

    def to_filter(self) -> ImageFilter.UnsharpMask:
        return ImageFilter.UnsharpMask(
            radius=self.radius, percent=self.percent, threshold=self.threshold
        )


@dataclass(frozen=True)
class Cell:
    """One terminal cell: blank (transparent) or filled with an RGB colour."""

    rgb: RGB | None = None

    @classmethod
    def blank(cls) -> Cell:
        return _BLANK

    @classmethod
    def filled(cls, r: int, g: int, b: int) -> Cell:
        return cls((r, g, b))

    @property
    def is_blank(self) -> bool:
        return self.rgb is None


_BLANK = Cell()


@dataclass
class CellGrid:
    """Row-major grid of cells, top-to-bottom, left-to-right."""

    rows: list[list[Cell]]
    width: int
    height: int

    def __iter__(self) -> Iterator[list[Cell]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return self.height

    def cell(self, row: int, col: int) -> Cell:
        return self.rows[row][col]

    def paint(self, painter: CellPainter) -> None:
        """Hand every cell to ``painter`` in display order."""
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                painter.paint(y, x, cell.rgb)


def _sharpen(img: Image.Image, sharpen: SharpenSettings) -> Image.Image:
    """Sharpen the colour channels, leaving alpha untouched."""
    r, g, b, a = img.split()
    rgb = Image.merge("RGB", (r, g, b)).filter(sharpen.to_filter())
    return Image.merge("RGBA", (*rgb.split(), a))


def resample(
    image: SourceImage,
    width: int,
    height: int,
    method: Resample = Resample.BILINEAR,
    sharpen: SharpenSettings | None = None,
) -> Image.Image:
    """Resize the source to exactly ``width`` x ``height`` RGBA pixels.

    Bands are resized one at a time so colour is never premultiplied by
    alpha; a faint pixel keeps its full RGB.
    """
    bands = [
        band.resize((width, height), method.pil_filter) for band in image.image.split()
    ]
    resized = Image.merge("RGBA", bands)
    if sharpen is not None:
        resized = _sharpen(resized, sharpen)
    return resized


def cells_from_pixels(pixels: np.ndarray) -> CellGrid:
    """Map an ``(height, width, 4)`` uint8 RGBA array to a CellGrid.

    Alpha is binary: exactly 0 gives a blank cell, anything else keeps the
    pixel's RGB unchanged.
    """
    if pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError(f"Expected an (h, w, 4) array, got shape {pixels.shape}")

    height, width = pixels.shape[:2]
    opaque = pixels[:, :, 3] != 0
    rows: list[list[Cell]] = []
    for y in range(height):
        row: list[Cell] = []
        for x in range(width):
            if opaque[y, x]:
                r, g, b = (int(c) for c in pixels[y, x, :3])
                row.append(Cell.filled(r, g, b))
            else:
                row.append(_BLANK)
        rows.append(row)
    return CellGrid(rows=rows, width=width, height=height)


def rasterize(
    image: SourceImage,
    width: int,
    height: int,
    method: Resample = Resample.BILINEAR,
    sharpen: SharpenSettings | None = None,
) -> CellGrid:
    """Convert a decoded image into a ``height`` x ``width`` cell grid."""
    if width <= 0 or height <= 0:
        raise RegionTooSmall(width, height)

    resized = resample(image, width, height, method, sharpen)
    grid = cells_from_pixels(np.asarray(resized, dtype=np.uint8))
    logger.debug(
        "rasterized %dx%d -> %dx%d cells (%s, sharpen=%s)",
        image.width, image.height, width, height, method.value, sharpen is not None,
    )
    return grid
