"""Image discovery in an explicitly configured directory."""

from __future__ import annotations

import logging
from pathlib import Path

from termgallery.core.errors import NoImagesFound
from termgallery.core.gallery import ImageEntry
from termgallery.core.reader import IMAGE_EXTENSIONS, is_image_file

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = "_preview"


def display_name(path: Path, suffix: str = DEFAULT_SUFFIX) -> str:
    """File stem with the preview suffix removed, when present."""
    stem = path.stem
    if suffix and stem.endswith(suffix) and len(stem) > len(suffix):
        return stem[: -len(suffix)]
    return stem


def discover_images(base_dir: str | Path, suffix: str = DEFAULT_SUFFIX) -> list[ImageEntry]:
    """List the images in ``base_dir`` sorted by display name.

    Raises:
        NoImagesFound: the directory is missing or holds no images.
    """
    base = Path(base_dir)
    if not base.is_dir():
        raise NoImagesFound(base)

    entries = [
        ImageEntry(name=display_name(p, suffix), path=p)
        for p in base.iterdir()
        if is_image_file(p)
    ]
    if not entries:
        raise NoImagesFound(base)

    entries.sort(key=lambda e: (e.name.lower(), e.path.name))
    logger.info("discovered %d images in %s", len(entries), base)
    return entries


def resolve_image(
    base_dir: str | Path, name: str, suffix: str = DEFAULT_SUFFIX
) -> Path:
    """Resolve a display name (or a file name) to an image path.

    Raises:
        FileNotFoundError: nothing in ``base_dir`` matches ``name``.
    """
    base = Path(base_dir)
    direct = base / name
    if is_image_file(direct):
        return direct
    for ext in IMAGE_EXTENSIONS:
        for stem in (f"{name}{suffix}", name):
            candidate = base / f"{stem}{ext}"
            if is_image_file(candidate):
                return candidate
    raise FileNotFoundError(f"No image named {name!r} in {base}")
