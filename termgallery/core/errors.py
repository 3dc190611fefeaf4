"""Error kinds raised by the render pipeline and asset discovery."""

from __future__ import annotations

from pathlib import Path


class GalleryError(Exception):
    """Base class for all gallery failures."""


class MalformedImage(GalleryError):
    """The image could not be decoded (missing, corrupt or unsupported)."""

    def __init__(self, path: Path | str | None, reason: str) -> None:
        self.path = Path(path) if path is not None else None
        self.reason = reason
        where = f"{self.path}: " if self.path is not None else ""
        super().__init__(f"Malformed image {where}{reason}")


class RegionTooSmall(GalleryError):
    """The display region has no room for a single cell."""

    def __init__(self, columns: int, rows: int) -> None:
        self.columns = columns
        self.rows = rows
        super().__init__(
            f"Display region too small: {columns}x{rows} (need at least 1x1)"
        )


class NoImagesFound(GalleryError):
    """The gallery was started without any images."""

    def __init__(self, directory: Path | str | None = None) -> None:
        self.directory = Path(directory) if directory is not None else None
        if self.directory is not None:
            message = f"No images found in {self.directory}"
        else:
            message = "No images found"
        super().__init__(message)
