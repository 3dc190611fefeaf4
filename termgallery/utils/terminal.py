"""Terminal size detection utilities."""

from __future__ import annotations

import shutil

from termgallery.core.fitter import CellRegion


def get_terminal_size(
    fallback_width: int = 80,
    fallback_height: int = 24,
) -> tuple[int, int]:
    """Get current terminal size in columns and rows.

    Returns (width, height). Falls back to provided defaults
    if terminal size cannot be determined.
    """
    try:
        size = shutil.get_terminal_size(fallback=(fallback_width, fallback_height))
        return size.columns, size.lines
    except (ValueError, OSError):
        return fallback_width, fallback_height


def terminal_region(
    columns: int | None = None,
    rows: int | None = None,
    reserve_rows: int = 1,
) -> CellRegion:
    """Build a CellRegion, filling unset sides from the terminal size.

    ``reserve_rows`` keeps rows free below the image for the shell prompt.
    """
    tw, th = get_terminal_size()
    if columns is None:
        columns = tw
    if rows is None:
        rows = th - reserve_rows
    return CellRegion(columns=columns, rows=rows)
