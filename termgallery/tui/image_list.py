"""Image name list with the current selection highlighted."""

from __future__ import annotations

from typing import Sequence

from rich.text import Text
from textual.widgets import Static


def build_list_text(names: Sequence[str], selected: int) -> Text:
    """One name per line, the selected one in reverse video."""
    text = Text(no_wrap=True, overflow="ellipsis")
    for i, name in enumerate(names):
        if i > 0:
            text.append("\n")
        text.append(name, style="reverse" if i == selected else "")
    return text


class ImageList(Static):
    """Static list of image names."""

    DEFAULT_CSS = """
    ImageList {
        width: 1fr;
        height: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }
    """

    def __init__(self, names: Sequence[str], selected: int = 0, **kwargs) -> None:
        super().__init__(build_list_text(names, selected), **kwargs)
        self._names = tuple(names)
        self._selected = selected

    def set_selected(self, index: int) -> None:
        self._selected = index
        self.update(build_list_text(self._names, index))

    @property
    def selected(self) -> int:
        return self._selected
