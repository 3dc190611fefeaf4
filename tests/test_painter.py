"""Tests for the ANSI and Rich cell painters."""

import numpy as np

from termgallery.core.color import RESET, ColorMode, truecolor_bg
from termgallery.core.painter import AnsiPainter, RichPainter
from termgallery.core.rasterizer import cells_from_pixels


def _grid():
    # Row 0: red, red, transparent. Row 1: transparent, blue, blue.
    pixels = np.zeros((2, 3, 4), dtype=np.uint8)
    pixels[0, 0] = pixels[0, 1] = (255, 0, 0, 255)
    pixels[1, 1] = pixels[1, 2] = (0, 0, 255, 255)
    return cells_from_pixels(pixels)


class TestAnsiPainter:
    def test_one_line_per_row(self):
        painter = AnsiPainter()
        _grid().paint(painter)
        assert len(painter.lines) == 2

    def test_escape_deduplicated_and_reset_before_blank(self):
        painter = AnsiPainter(ColorMode.TRUECOLOR)
        _grid().paint(painter)
        red = truecolor_bg(255, 0, 0)
        assert painter.lines[0] == f"{red}  {RESET} "

    def test_line_reset_at_end(self):
        painter = AnsiPainter()
        _grid().paint(painter)
        blue = truecolor_bg(0, 0, 255)
        assert painter.lines[1] == f" {blue}  {RESET}"

    def test_ansi256(self):
        painter = AnsiPainter(ColorMode.ANSI256)
        _grid().paint(painter)
        assert "\033[48;5;196m" in painter.lines[0]

    def test_blank_only_row_has_no_escapes(self):
        painter = AnsiPainter()
        painter.paint(0, 0, None)
        painter.paint(0, 1, None)
        assert painter.lines == ["  "]


class TestRichPainter:
    def test_plain_text_shape(self):
        painter = RichPainter()
        _grid().paint(painter)
        assert painter.text.plain == "   \n   "

    def test_styles_only_on_filled_cells(self):
        painter = RichPainter()
        _grid().paint(painter)
        styled = [span for span in painter.text.spans]
        assert len(styled) == 4
        assert styled[0].style.bgcolor.get_truecolor() == (255, 0, 0)
