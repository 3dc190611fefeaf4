"""Main Textual application for the termgallery TUI."""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header

from termgallery.config import GalleryConfig
from termgallery.core.assets import discover_images
from termgallery.core.commands import KEYMAP, NOOP_COMMANDS, Command, command_for_key
from termgallery.core.errors import GalleryError
from termgallery.core.gallery import GallerySelection, ImageEntry
from termgallery.core.processor import RenderedImage, render_image
from termgallery.tui.image_list import ImageList
from termgallery.tui.preview import ImagePreview
from termgallery.utils.cache import GridCache

logger = logging.getLogger(__name__)

_LABELS = {
    Command.QUIT: "Quit",
    Command.SELECT_NEXT: "Next",
    Command.SELECT_PREV: "Prev",
    Command.PAN_LEFT: "Pan Left",
    Command.PAN_RIGHT: "Pan Right",
    Command.ZOOM: "Zoom",
}


def _build_bindings() -> list[Binding]:
    """One binding per key in KEYMAP; only the first key per command is shown."""
    bindings = []
    shown: set[Command] = set()
    for key, command in KEYMAP.items():
        bindings.append(
            Binding(
                key,
                f"dispatch('{key}')",
                _LABELS[command],
                show=command not in shown and command not in NOOP_COMMANDS,
                priority=command == Command.QUIT,
            )
        )
        shown.add(command)
    return bindings


class GalleryApp(App):
    """Gallery viewer: image pane on the left, name list on the right."""

    TITLE = "termgallery"
    CSS = """
    #main-area {
        height: 1fr;
        width: 1fr;
        margin: 1 2;
    }
    """

    BINDINGS = _build_bindings()

    def __init__(
        self,
        entries: list[ImageEntry],
        config: GalleryConfig | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config or GalleryConfig()
        self._selection = GallerySelection(entries)
        self._cache: GridCache[RenderedImage] = GridCache(self._config.cache_size)

    @property
    def selection(self) -> GallerySelection[ImageEntry]:
        return self._selection

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-area"):
            yield ImagePreview(id="preview")
            yield ImageList(
                [e.name for e in self._selection.items],
                selected=self._selection.index,
                id="image-list",
            )
        yield Footer()

    def on_mount(self) -> None:
        logger.info("gallery started with %d images", self._selection.count)
        self.call_after_refresh(self._render_selected)

    def on_resize(self, event: events.Resize) -> None:
        self._cache.clear()
        self.call_after_refresh(self._render_selected)

    def _render_selected(self) -> None:
        """Render the selected image into the preview pane (one full frame)."""
        preview = self.query_one(ImagePreview)
        entry = self._selection.current
        region = preview.cell_region
        settings = self._config.settings
        key = GridCache.key(
            self._selection.index, settings.hash(), region.columns, region.rows
        )

        rendered = self._cache.get(key) if self._cache.enabled else None
        try:
            if rendered is None:
                rendered = render_image(entry, region, settings)
                self._cache.put(key, rendered)
        except GalleryError as e:
            logger.error("render of %s failed: %s", entry.name, e)
            self.exit(return_code=1, message=str(e))
            return

        preview.show(rendered)
        self.query_one(ImageList).set_selected(self._selection.index)

    def handle_command(self, command: Command) -> None:
        """Apply one normalized input command."""
        if command == Command.QUIT:
            logger.info("quit requested")
            self.exit(return_code=0)
        elif command == Command.SELECT_NEXT:
            self._selection.next()
            self._render_selected()
        elif command == Command.SELECT_PREV:
            self._selection.prev()
            self._render_selected()
        else:
            logger.debug("ignoring reserved command %s", command.value)

    # --- Actions ---

    def action_dispatch(self, key: str) -> None:
        command = command_for_key(key)
        if command is None:
            logger.debug("unbound key %s", key)
            return
        self.handle_command(command)


def run_app(config: GalleryConfig) -> int:
    """Launch the TUI application and return its exit code."""
    entries = discover_images(config.image_dir, config.suffix)
    app = GalleryApp(entries, config=config)
    app.run()
    return app.return_code or 0
