"""Render pipeline for a single frame.

Validate region → decode → fit → resize (+ optional sharpen) → cell grid.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass

from termgallery.core.fitter import CellRegion, TargetSize, fit_region
from termgallery.core.gallery import ImageEntry
from termgallery.core.rasterizer import CellGrid, Resample, SharpenSettings, rasterize
from termgallery.core.reader import SourceImage, open_image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Rendering settings that affect output."""

    resample: Resample = Resample.BILINEAR
    sharpen: bool = False
    sharpen_radius: float = 1.0
    sharpen_percent: int = 80
    sharpen_threshold: int = 2

    @property
    def sharpen_settings(self) -> SharpenSettings | None:
        if not self.sharpen:
            return None
        return SharpenSettings(
            radius=self.sharpen_radius,
            percent=self.sharpen_percent,
            threshold=self.sharpen_threshold,
        )

    def hash(self) -> str:
        """Deterministic hash for cache keying."""
        data = (
            f"{self.resample}:{self.sharpen}:{self.sharpen_radius}:"
            f"{self.sharpen_percent}:{self.sharpen_threshold}"
        )
        return hashlib.md5(data.encode()).hexdigest()[:12]


@dataclass
class RenderedImage:
    """Result of rendering one image into a region."""

    name: str
    grid: CellGrid
    size: TargetSize
    source_size: tuple[int, int]


def render_source(
    name: str, source: SourceImage, region: CellRegion, settings: Settings
) -> RenderedImage:
    """Fit and rasterize an already decoded image."""
    region.validate()
    size = fit_region(source.size, region)
    grid = rasterize(
        source,
        size.width,
        size.height,
        method=settings.resample,
        sharpen=settings.sharpen_settings,
    )
    return RenderedImage(name=name, grid=grid, size=size, source_size=source.size)


def render_image(
    entry: ImageEntry, region: CellRegion, settings: Settings
) -> RenderedImage:
    """Decode, fit and rasterize one gallery entry."""
    region.validate()
    source = open_image(entry.path)
    rendered = render_source(entry.name, source, region, settings)
    logger.debug(
        "rendered %s into %dx%d region as %dx%d",
        entry.name, region.columns, region.rows, rendered.size.width, rendered.size.height,
    )
    return rendered
