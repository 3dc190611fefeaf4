"""Runtime configuration assembled from command-line arguments."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path

from termgallery.core.assets import DEFAULT_SUFFIX
from termgallery.core.color import ColorMode
from termgallery.core.processor import Settings
from termgallery.core.rasterizer import Resample

DEFAULT_IMAGE_DIR = Path("images")
DEFAULT_CACHE_SIZE = 0


@dataclass(frozen=True)
class GalleryConfig:
    """Everything the gallery needs, injected explicitly."""

    image_dir: Path = DEFAULT_IMAGE_DIR
    suffix: str = DEFAULT_SUFFIX
    settings: Settings = field(default_factory=Settings)
    cache_size: int = DEFAULT_CACHE_SIZE
    color_mode: ColorMode = ColorMode.TRUECOLOR
    log_level: int = logging.WARNING
    log_file: Path | None = None
    debug: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> GalleryConfig:
        settings = Settings(
            resample=Resample(args.resample),
            sharpen=args.sharpen,
            sharpen_radius=args.sharpen_radius,
            sharpen_percent=args.sharpen_percent,
            sharpen_threshold=args.sharpen_threshold,
        )
        if args.verbose >= 2:
            level = logging.DEBUG
        elif args.verbose == 1:
            level = logging.INFO
        else:
            level = logging.WARNING
        return cls(
            image_dir=Path(args.image_dir).expanduser(),
            suffix=args.suffix,
            settings=settings,
            cache_size=max(0, args.cache_size),
            color_mode=ColorMode(getattr(args, "color", ColorMode.TRUECOLOR.value)),
            log_level=level,
            log_file=Path(args.log_file) if args.log_file else None,
            debug=args.debug,
        )
