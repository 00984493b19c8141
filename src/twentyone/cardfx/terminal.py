# src/twentyone/cardfx/terminal.py
from __future__ import annotations
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple

CSI = "\033["

@dataclass
class Style:
    prefix: str = ""
    suffix: str = CSI + "0m"

# Basic styles (extend as needed)
RESET = Style(prefix=CSI + "0m")
BOLD = Style(prefix=CSI + "1m")

RED_BOLD = Style(prefix=CSI + "31m" + CSI + "1m")  # hearts/diamonds
CYAN = Style(prefix=CSI + "36m")                   # warnings, money


@dataclass(frozen=True)
class Position:
    """1-based (row, col) screen coordinate. Moving returns a new Position."""
    row: int
    col: int

    def right(self, cols: int) -> "Position":
        return Position(self.row, self.col + cols)

    def down(self, rows: int) -> "Position":
        return Position(self.row + rows, self.col)


@dataclass
class Sprite:
    lines: List[str]

    @property
    def w(self) -> int:
        return max((len(s) for s in self.lines), default=0)

    @property
    def h(self) -> int:
        return len(self.lines)


class TerminalRenderer:
    """
    Thin ANSI writer. Every call targets an explicit position;
    nothing here scrolls or relies on where the last write ended.
    """

    def __init__(self, out: Optional[TextIO] = None, *, size: Optional[Tuple[int, int]] = None):
        self.out = out if out is not None else sys.stdout
        self._size = size
        self._hidden_cursor = False

    def write(self, text: str) -> None:
        self.out.write(text)

    def hide_cursor(self) -> None:
        if not self._hidden_cursor:
            self.write(CSI + "?25l")
            self._hidden_cursor = True

    def show_cursor(self) -> None:
        if self._hidden_cursor:
            self.write(CSI + "?25h")
            self._hidden_cursor = False

    def clear(self) -> None:
        # home + clear
        self.write(CSI + "H" + CSI + "2J")

    def move(self, row_1: int, col_1: int) -> None:
        self.write(f"{CSI}{row_1};{col_1}H")

    def clear_to_eol(self) -> None:
        self.write(CSI + "0K")

    def flush(self) -> None:
        self.out.flush()

    def get_size(self) -> Tuple[int, int]:
        if self._size is not None:
            return self._size
        # Lazy import to keep module small
        import shutil
        s = shutil.get_terminal_size(fallback=(80, 24))
        return s.columns, s.lines

    def begin(self) -> None:
        self.write(CSI + "0m")
        self.hide_cursor()
        self.clear()
        self.flush()

    def end(self) -> None:
        self.show_cursor()
        self.write(CSI + "0m")
        self.clear()
        self.flush()

    def write_at(self, pos: Position, text: str, style: Style = RESET) -> None:
        self.move(pos.row, pos.col)
        self.write(style.prefix + text + style.suffix)

    def erase_line_from(self, pos: Position) -> None:
        self.move(pos.row, pos.col)
        self.clear_to_eol()

    def draw_sprite_line(self, sprite: Sprite, row: int, pos: Position, style: Style = RESET) -> None:
        """Draw one line of a sprite, clipped to the right edge of the terminal."""
        term_w, term_h = self.get_size()
        yy = pos.row + row
        if yy < 1 or yy > term_h or pos.col > term_w:
            return
        line = sprite.lines[row][: term_w - pos.col + 1]
        if line:
            self.write_at(Position(yy, pos.col), line, style)

    def draw_sprite(self, sprite: Sprite, pos: Position, style: Style = RESET) -> None:
        for row in range(sprite.h):
            self.draw_sprite_line(sprite, row, pos, style)
