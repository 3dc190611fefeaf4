"""Command-line interface for termgallery.

Supports the interactive TUI and headless/JSON subcommands for scripting.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from termgallery.config import DEFAULT_CACHE_SIZE, DEFAULT_IMAGE_DIR, GalleryConfig
from termgallery.core.assets import DEFAULT_SUFFIX
from termgallery.core.color import ColorMode, hex_color
from termgallery.core.errors import (
    GalleryError,
    MalformedImage,
    NoImagesFound,
    RegionTooSmall,
)
from termgallery.core.rasterizer import Resample

SUBCOMMANDS = ("view", "list", "show")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d", "--image-dir",
        default=str(DEFAULT_IMAGE_DIR),
        help=f"Directory holding the gallery images (default: {DEFAULT_IMAGE_DIR}).",
    )
    parser.add_argument(
        "--suffix",
        default=DEFAULT_SUFFIX,
        help=f"File-name suffix stripped from display names (default: {DEFAULT_SUFFIX}).",
    )
    parser.add_argument(
        "--resample",
        choices=[r.value for r in Resample],
        default=Resample.BILINEAR.value,
        help="Resampling filter (default: bilinear).",
    )
    parser.add_argument(
        "--sharpen",
        action="store_true",
        help="Apply an unsharp mask after resizing.",
    )
    parser.add_argument(
        "--sharpen-radius",
        type=float,
        default=1.0,
        help="Unsharp mask radius in pixels (default: 1.0).",
    )
    parser.add_argument(
        "--sharpen-percent",
        type=int,
        default=80,
        help="Unsharp mask strength in percent (default: 80).",
    )
    parser.add_argument(
        "--sharpen-threshold",
        type=int,
        default=2,
        help="Unsharp mask threshold (default: 2).",
    )
    parser.add_argument(
        "--cache-size",
        type=int,
        default=DEFAULT_CACHE_SIZE,
        help=f"Rendered grids kept in memory, 0 disables (default: {DEFAULT_CACHE_SIZE}).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    parser.add_argument(
        "--log-file",
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show stack traces on error (with --json).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termgallery",
        description="Browse a directory of images rendered as coloured terminal cells.",
    )
    subparsers = parser.add_subparsers(dest="command")

    view = subparsers.add_parser("view", help="Open the interactive gallery (default).")
    _add_common_options(view)

    list_cmd = subparsers.add_parser("list", help="List the images in the gallery.")
    _add_common_options(list_cmd)
    list_cmd.add_argument(
        "--json",
        action="store_true",
        help="Output structured JSON.",
    )

    show = subparsers.add_parser("show", help="Render a single image to stdout.")
    _add_common_options(show)
    show.add_argument("name", help="Display name or file name of the image.")
    show.add_argument(
        "--columns",
        type=int,
        default=None,
        help="Available columns (default: terminal width).",
    )
    show.add_argument(
        "--rows",
        type=int,
        default=None,
        help="Available rows (default: terminal height - 1).",
    )
    show.add_argument(
        "--color",
        choices=[c.value for c in ColorMode],
        default=ColorMode.TRUECOLOR.value,
        help="Color mode (default: truecolor).",
    )
    show.add_argument(
        "--json",
        action="store_true",
        help="Output the cell grid as JSON instead of painting it.",
    )

    return parser


def _configure_logging(config: GalleryConfig, tui: bool) -> None:
    if tui:
        from textual.logging import TextualHandler

        handlers: list[logging.Handler] = [TextualHandler()]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.log_level, format=LOG_FORMAT, handlers=handlers, force=True
    )


def _json_error(message: str, code: str, debug: bool = False) -> None:
    """Print JSON error to stderr and exit with code 1."""
    if debug:
        import traceback
        traceback.print_exc(file=sys.stderr)
    err = {"status": "error", "error": message, "code": code}
    print(json.dumps(err), file=sys.stderr)
    sys.exit(1)


def _fail(args: argparse.Namespace, message: str, code: str) -> None:
    if getattr(args, "json", False):
        _json_error(message, code, debug=args.debug)
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _error_code(error: GalleryError) -> str:
    if isinstance(error, MalformedImage):
        return "MALFORMED_IMAGE"
    if isinstance(error, RegionTooSmall):
        return "REGION_TOO_SMALL"
    if isinstance(error, NoImagesFound):
        return "NO_IMAGES_FOUND"
    return "GALLERY_ERROR"


def _run_list(args: argparse.Namespace, config: GalleryConfig) -> None:
    from termgallery.core.assets import discover_images

    entries = discover_images(config.image_dir, config.suffix)
    if args.json:
        result = {
            "status": "success",
            "image_dir": str(config.image_dir),
            "images": [{"name": e.name, "path": str(e.path)} for e in entries],
        }
        print(json.dumps(result, indent=2))
    else:
        for entry in entries:
            print(entry.name)


def _run_show(args: argparse.Namespace, config: GalleryConfig) -> None:
    """Render one image headless and print it."""
    from termgallery.core.assets import resolve_image
    from termgallery.core.gallery import ImageEntry
    from termgallery.core.painter import AnsiPainter
    from termgallery.core.processor import render_image
    from termgallery.utils.terminal import terminal_region

    try:
        path = resolve_image(config.image_dir, args.name, config.suffix)
    except FileNotFoundError as e:
        _fail(args, str(e), "NOT_FOUND")
        return

    region = terminal_region(args.columns, args.rows)
    rendered = render_image(ImageEntry(args.name, path), region, config.settings)

    if args.json:
        cells = [
            [hex_color(*cell.rgb) if cell.rgb is not None else None for cell in row]
            for row in rendered.grid
        ]
        result = {
            "status": "success",
            "name": rendered.name,
            "path": str(path),
            "source": {"width": rendered.source_size[0], "height": rendered.source_size[1]},
            "width": rendered.size.width,
            "height": rendered.size.height,
            "settings": {
                "resample": config.settings.resample.value,
                "sharpen": config.settings.sharpen,
            },
            "cells": cells,
        }
        print(json.dumps(result))
        return

    painter = AnsiPainter(config.color_mode)
    rendered.grid.paint(painter)
    print("\n".join(painter.lines))


def main(argv: list[str] | None = None) -> None:
    """Main entry point.

    Routing:
      termgallery list [opts]          → print image names
      termgallery show <name> [opts]   → render one image to stdout
      termgallery [view] [opts]        → launch the TUI
    """
    raw_args = list(sys.argv[1:] if argv is None else argv)
    # Anything that isn't a subcommand is a TUI launch
    if not raw_args or raw_args[0] not in SUBCOMMANDS + ("-h", "--help"):
        raw_args.insert(0, "view")

    parser = _build_parser()
    args = parser.parse_args(raw_args)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    config = GalleryConfig.from_args(args)
    tui = args.command == "view"
    _configure_logging(config, tui=tui)
    logger = logging.getLogger(__name__)

    try:
        if args.command == "list":
            _run_list(args, config)
        elif args.command == "show":
            _run_show(args, config)
        else:
            from termgallery.app import run_app

            code = run_app(config)
            if code:
                logger.error("session ended with exit code %d", code)
            sys.exit(code)
    except GalleryError as e:
        logger.debug("aborting on %s", type(e).__name__)
        _fail(args, str(e), _error_code(e))
