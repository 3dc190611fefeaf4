"""Gallery selection state."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Sequence, TypeVar

from termgallery.core.errors import NoImagesFound

T = TypeVar("T")


@dataclass(frozen=True)
class ImageEntry:
    """A named image in the gallery."""

    name: str
    path: Path


class GallerySelection(Generic[T]):
    """Wrapping index over a fixed, non-empty sequence of items."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = tuple(items)
        if not self._items:
            raise NoImagesFound()
        self._index = 0

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> T:
        return self._items[self._index]

    def next(self) -> int:
        self._index = (self._index + 1) % self.count
        return self._index

    def prev(self) -> int:
        self._index = (self._index - 1 + self.count) % self.count
        return self._index

    def select(self, index: int) -> int:
        """Jump to ``index``; raises IndexError when out of range."""
        if not 0 <= index < self.count:
            raise IndexError(f"Selection {index} out of range [0, {self.count})")
        self._index = index
        return self._index
