"""Still-image decoding.

Every image is decoded eagerly and converted to RGBA so the rasterizer can
threshold on alpha regardless of the file format.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from termgallery.core.errors import MalformedImage

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".bmp",
    ".webp",
    ".tif",
    ".tiff",
)


@dataclass(frozen=True)
class SourceImage:
    """A decoded RGBA bitmap."""

    image: Image.Image  # RGBA PIL image
    path: Path | None = None

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the (R, G, B, A) channels at ``(x, y)``."""
        return self.image.getpixel((x, y))

    @classmethod
    def from_pil(cls, image: Image.Image, path: Path | None = None) -> SourceImage:
        if image.width <= 0 or image.height <= 0:
            raise MalformedImage(path, f"invalid dimensions {image.width}x{image.height}")
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(image=image, path=path)


def is_image_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS


def open_image(path: str | Path) -> SourceImage:
    """Decode an image file into a SourceImage.

    Raises:
        MalformedImage: if the file is missing, corrupt or not an image.
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            img.load()
            rgba = img.convert("RGBA")
    except FileNotFoundError as e:
        raise MalformedImage(path, "file not found") from e
    except UnidentifiedImageError as e:
        raise MalformedImage(path, "unsupported or corrupt image data") from e
    except (OSError, ValueError) as e:
        raise MalformedImage(path, str(e)) from e

    logger.debug("decoded %s (%dx%d)", path, rgba.width, rgba.height)
    return SourceImage.from_pil(rgba, path)
