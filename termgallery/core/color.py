"""RGB to ANSI background colour mapping for terminal output."""

from __future__ import annotations

from enum import Enum


class ColorMode(str, Enum):
    ANSI256 = "256"
    TRUECOLOR = "truecolor"


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Map an RGB color to the nearest ANSI 256-color index.

    Uses the 6x6x6 color cube (indices 16-231) and grayscale ramp (232-255).
    """
    # Check if close to grayscale
    if abs(r - g) < 10 and abs(g - b) < 10:
        gray = (r + g + b) // 3
        if gray < 8:
            return 16
        if gray > 248:
            return 231
        return 232 + round((gray - 8) / 247 * 23)

    # Map to 6x6x6 cube
    ri = round(r / 255 * 5)
    gi = round(g / 255 * 5)
    bi = round(b / 255 * 5)
    return 16 + 36 * ri + 6 * gi + bi


def ansi256_bg(color_idx: int) -> str:
    """Return ANSI escape for 256-color background."""
    return f"\033[48;5;{color_idx}m"


def truecolor_bg(r: int, g: int, b: int) -> str:
    """Return ANSI escape for truecolor (24-bit) background."""
    return f"\033[48;2;{r};{g};{b}m"


RESET = "\033[0m"


def background_escape(r: int, g: int, b: int, mode: ColorMode) -> str:
    if mode == ColorMode.ANSI256:
        return ansi256_bg(rgb_to_ansi256(r, g, b))
    return truecolor_bg(r, g, b)


def hex_color(r: int, g: int, b: int) -> str:
    """Format an RGB triple as ``#rrggbb``."""
    return f"#{r:02x}{g:02x}{b:02x}"
