"""Tests for colour mapping functions."""

from termgallery.core.color import (
    ColorMode,
    ansi256_bg,
    background_escape,
    hex_color,
    rgb_to_ansi256,
    truecolor_bg,
)


class TestRgbToAnsi256:
    def test_black(self):
        assert rgb_to_ansi256(0, 0, 0) == 16  # Darkest in 6x6x6 cube

    def test_white(self):
        assert rgb_to_ansi256(255, 255, 255) == 231

    def test_gray(self):
        assert 232 <= rgb_to_ansi256(128, 128, 128) <= 255

    def test_pure_red(self):
        assert rgb_to_ansi256(255, 0, 0) == 196


class TestEscapes:
    def test_truecolor_format(self):
        assert truecolor_bg(255, 128, 0) == "\033[48;2;255;128;0m"

    def test_ansi256_format(self):
        assert ansi256_bg(196) == "\033[48;5;196m"

    def test_background_escape_modes(self):
        assert background_escape(255, 0, 0, ColorMode.TRUECOLOR) == truecolor_bg(255, 0, 0)
        assert background_escape(255, 0, 0, ColorMode.ANSI256) == ansi256_bg(196)

    def test_hex_color(self):
        assert hex_color(255, 8, 0) == "#ff0800"
