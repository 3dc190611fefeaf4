"""Image preview widget for the TUI."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from termgallery.core.fitter import CellRegion
from termgallery.core.painter import RichPainter
from termgallery.core.processor import RenderedImage


class ImagePreview(Widget):
    """Bordered pane that paints a rendered cell grid.

    Each cell becomes one space with a background colour; transparent cells
    stay unstyled so the pane background shows through.
    """

    DEFAULT_CSS = """
    ImagePreview {
        width: 2fr;
        height: 1fr;
        border: solid white;
        align: center middle;
        overflow: hidden;
    }

    ImagePreview #preview-content {
        width: auto;
        height: auto;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._current: RenderedImage | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="preview-content")

    @property
    def cell_region(self) -> CellRegion:
        """Cell region available inside the border."""
        size = self.content_size
        return CellRegion(columns=size.width, rows=size.height)

    def show(self, rendered: RenderedImage) -> None:
        """Paint a rendered image into the pane."""
        self._current = rendered
        painter = RichPainter()
        rendered.grid.paint(painter)
        self.query_one("#preview-content", Static).update(painter.text)
        self.border_title = rendered.name
        self.border_subtitle = f"{rendered.size.width}x{rendered.size.height}"

    @property
    def current(self) -> RenderedImage | None:
        return self._current
