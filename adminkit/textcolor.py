"""ANSI colour escapes for terminal text."""

from __future__ import annotations

from enum import IntEnum


class TextColor(IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


def set_color(msg: str, conf: int, bg: int, text: int) -> str:
    """Wrap msg in an escape sequence with display mode, background and foreground."""
    return f"\x1b[{int(conf)};{int(bg)};{int(text)}m{msg}\x1b[0m"


def black(msg: str) -> str:
    return set_color(msg, 0, 0, TextColor.BLACK)


def red(msg: str) -> str:
    return set_color(msg, 0, 0, TextColor.RED)


def green(msg: str) -> str:
    return set_color(msg, 0, 0, TextColor.GREEN)


def yellow(msg: str) -> str:
    return set_color(msg, 0, 0, TextColor.YELLOW)


def blue(msg: str) -> str:
    return set_color(msg, 0, 0, TextColor.BLUE)


def magenta(msg: str) -> str:
    return set_color(msg, 0, 0, TextColor.MAGENTA)


def cyan(msg: str) -> str:
    return set_color(msg, 0, 0, TextColor.CYAN)


def white(msg: str) -> str:
    return set_color(msg, 0, 0, TextColor.WHITE)