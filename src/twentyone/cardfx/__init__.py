# cardfx/__init__.py

from .terminal import TerminalRenderer, Position, Sprite, Style
from .keyboard import Keyboard
from .display import Display, Layout, Region, DEFAULT_LAYOUT

__all__ = [
    "TerminalRenderer",
    "Position",
    "Sprite",
    "Style",
    "Keyboard",
    "Display",
    "Layout",
    "Region",
    "DEFAULT_LAYOUT",
]
