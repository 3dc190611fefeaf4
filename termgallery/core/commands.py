"""Normalized input commands and their key bindings."""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    QUIT = "quit"
    SELECT_NEXT = "select-next"
    SELECT_PREV = "select-prev"
    # Reserved for horizontal pan / zoom, currently no-ops
    PAN_LEFT = "pan-left"
    PAN_RIGHT = "pan-right"
    ZOOM = "zoom"


KEYMAP: dict[str, Command] = {
    "q": Command.QUIT,
    "down": Command.SELECT_NEXT,
    "j": Command.SELECT_NEXT,
    "up": Command.SELECT_PREV,
    "k": Command.SELECT_PREV,
    "left": Command.PAN_LEFT,
    "h": Command.PAN_LEFT,
    "right": Command.PAN_RIGHT,
    "l": Command.PAN_RIGHT,
    "z": Command.ZOOM,
}

NOOP_COMMANDS = frozenset({Command.PAN_LEFT, Command.PAN_RIGHT, Command.ZOOM})


def command_for_key(key: str) -> Command | None:
    """Return the command bound to ``key``, or None if unbound."""
    return KEYMAP.get(key)
