"""Painting backends for cell grids.

A painter receives one call per cell, in row-major order, with either an RGB
triple or ``None`` for a transparent cell. Each cell is drawn as a single
space glyph with a background colour.
"""

from __future__ import annotations

from typing import Protocol

from rich.color import Color
from rich.style import Style
from rich.text import Text

from termgallery.core.color import RESET, ColorMode, background_escape

CELL_GLYPH = " "


class CellPainter(Protocol):
    def paint(self, row: int, col: int, rgb: tuple[int, int, int] | None) -> None:
        """Paint the cell at ``(row, col)`` with ``rgb``, or leave it blank."""
        ...


class AnsiPainter:
    """Builds plain ANSI-escaped lines for printing to a terminal."""

    def __init__(self, mode: ColorMode = ColorMode.TRUECOLOR) -> None:
        self._mode = mode
        self._rows: list[list[str]] = []
        self._prev_escape: list[str] = []

    def paint(self, row: int, col: int, rgb: tuple[int, int, int] | None) -> None:
        while len(self._rows) <= row:
            self._rows.append([])
            self._prev_escape.append("")
        parts = self._rows[row]
        prev = self._prev_escape[row]
        if rgb is None:
            if prev:
                parts.append(RESET)
                self._prev_escape[row] = ""
        else:
            esc = background_escape(*rgb, self._mode)
            # Avoid repeating the same escape code
            if esc != prev:
                parts.append(esc)
                self._prev_escape[row] = esc
        parts.append(CELL_GLYPH)

    @property
    def lines(self) -> list[str]:
        out = []
        for parts, prev in zip(self._rows, self._prev_escape):
            line = "".join(parts)
            if prev:
                line += RESET
            out.append(line)
        return out


class RichPainter:
    """Builds a Rich ``Text`` renderable, one styled space per cell."""

    def __init__(self) -> None:
        self._text = Text(no_wrap=True, overflow="crop")
        self._row = 0

    def paint(self, row: int, col: int, rgb: tuple[int, int, int] | None) -> None:
        if row > self._row:
            self._text.append("\n" * (row - self._row))
            self._row = row
        if rgb is None:
            self._text.append(CELL_GLYPH)
        else:
            self._text.append(CELL_GLYPH, style=Style(bgcolor=Color.from_rgb(*rgb)))

    @property
    def text(self) -> Text:
        return self._text
