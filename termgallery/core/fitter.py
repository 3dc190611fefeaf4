"""Fit an image into a region of terminal cells.

A terminal cell is roughly twice as tall as it is wide. The fit is solved in
a space where the vertical budget is doubled, then the chosen height is
halved back into cell rows. Everything is integer arithmetic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from termgallery.core.errors import MalformedImage, RegionTooSmall

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellRegion:
    """Destination area measured in character cells."""

    columns: int
    rows: int

    def validate(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise RegionTooSmall(self.columns, self.rows)


@dataclass(frozen=True)
class TargetSize:
    """Output grid size: one pixel per cell."""

    width: int
    height: int


def fit(src_w: int, src_h: int, bound_cols: int, bound_rows: int) -> TargetSize:
    """Calculate the cell grid size for an image inside a cell region.

    Args:
        src_w: source width in pixels.
        src_h: source height in pixels.
        bound_cols: available cell columns.
        bound_rows: available cell rows.

    Returns:
        TargetSize with ``width <= bound_cols`` and ``height <= bound_rows``.
        One row is kept free for the pane border whenever the image would
        otherwise fill every row.

    Raises:
        MalformedImage: a source dimension is not positive.
        RegionTooSmall: a bound is not positive.
    """
    if src_w <= 0 or src_h <= 0:
        raise MalformedImage(None, f"invalid dimensions {src_w}x{src_h}")
    if bound_cols <= 0 or bound_rows <= 0:
        raise RegionTooSmall(bound_cols, bound_rows)

    bound_h2 = 2 * bound_rows

    if src_w <= bound_cols and src_h <= bound_h2:
        # Already fits, only the half-height compression applies
        out_w = src_w
        out_h = max(1, (src_h + 1) // 2)
    elif bound_cols * src_h <= src_w * bound_h2:
        # Width-bound
        out_w = bound_cols
        out_h = max(1, (src_h * bound_cols // src_w) // 2)
    else:
        # Height-bound
        out_w = max(1, src_w * bound_h2 // src_h)
        out_h = max(1, bound_h2 // 2)

    if out_h == bound_rows and bound_rows > 1:
        out_h -= 1

    logger.debug(
        "fit %dx%d into %dx%d cells -> %dx%d",
        src_w, src_h, bound_cols, bound_rows, out_w, out_h,
    )
    return TargetSize(out_w, out_h)


def fit_region(size: tuple[int, int], region: CellRegion) -> TargetSize:
    """Fit a ``(width, height)`` pixel size into ``region``."""
    return fit(size[0], size[1], region.columns, region.rows)
