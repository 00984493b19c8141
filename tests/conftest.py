import io
import re
from collections import deque
from typing import List

import pytest

from twentyone.cardfx.display import Display
from twentyone.cardfx.terminal import TerminalRenderer
from twentyone.common.cards import Card, Deck
from twentyone.common.config import GameConfig

ROWS, COLS = 24, 80

_CSI_RE = re.compile(r"\x1b\[([?0-9;]*)([A-Za-z])")


class FakeKeyboard:
    """Scripted keys and lines; running out behaves like a closed terminal (EOFError)."""

    def __init__(self, keys="", lines=()):
        self.keys = deque(keys)
        self.lines = deque(lines)
        self.opened = False

    def open(self):
        self.opened = True

    def close(self):
        self.opened = False

    def read_key(self):
        if not self.keys:
            raise EOFError("no more scripted keys")
        return self.keys.popleft()

    def read_line(self):
        if not self.lines:
            raise EOFError("no more scripted lines")
        return self.lines.popleft()


class VirtualScreen:
    """Replays the ANSI subset the renderer emits onto a ROWS x COLS grid."""

    def __init__(self, rows=ROWS, cols=COLS):
        self.rows = rows
        self.cols = cols
        self.grid = [[" "] * cols for _ in range(rows)]
        self.row, self.col = 1, 1

    def feed(self, data: str) -> "VirtualScreen":
        pos = 0
        for m in _CSI_RE.finditer(data):
            self._text(data[pos:m.start()])
            self._command(m.group(1), m.group(2))
            pos = m.end()
        self._text(data[pos:])
        return self

    def _text(self, text):
        for ch in text:
            if ch == "\n":
                self.row, self.col = self.row + 1, 1
                continue
            if 1 <= self.row <= self.rows and 1 <= self.col <= self.cols:
                self.grid[self.row - 1][self.col - 1] = ch
            self.col += 1

    def _command(self, params, cmd):
        if params.startswith("?"):
            return
        nums = [int(p) if p else 0 for p in params.split(";")] if params else []
        if cmd == "H":
            row = nums[0] if nums else 1
            col = nums[1] if len(nums) > 1 else 1
            self.row, self.col = max(row, 1), max(col, 1)
        elif cmd == "J" and nums and nums[0] == 2:
            self.grid = [[" "] * self.cols for _ in range(self.rows)]
        elif cmd == "K":
            mode = nums[0] if nums else 0
            line = self.grid[self.row - 1]
            start = 0 if mode == 2 else self.col - 1
            for c in range(start, self.cols):
                line[c] = " "

    def line(self, row: int) -> str:
        return "".join(self.grid[row - 1]).rstrip()

    def lines(self) -> List[str]:
        return ["".join(r) for r in self.grid]

    def text(self) -> str:
        return "\n".join(self.line(r) for r in range(1, self.rows + 1))


def screen_of(out: io.StringIO) -> VirtualScreen:
    return VirtualScreen().feed(out.getvalue())


def stacked(deck: Deck, *cards: Card) -> Deck:
    """Arrange `deck` so draw() hands out `cards` in the given order."""
    deck.cards = list(reversed(cards))
    return deck


def c(rank: str, suit: str = "spades") -> Card:
    return Card(suit, rank)


@pytest.fixture
def config():
    return GameConfig(deal_delay=0, card_line_delay=0, warning_delay=0, message_delay=0)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def keyboard():
    return FakeKeyboard()


@pytest.fixture
def display(out, keyboard, config):
    return Display(TerminalRenderer(out, size=(COLS, ROWS)), keyboard, config)
