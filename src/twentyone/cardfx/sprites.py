# src/twentyone/cardfx/sprites.py
from __future__ import annotations
from typing import List, Tuple

from .terminal import Sprite

CARD_W = 11
CARD_H = 9

# Interior coordinates (line, column) on the card art
SUIT_COORDS: Tuple[Tuple[int, int], ...] = ((2, 1), (4, 5), (6, 9))
RANK_COORDS: Tuple[Tuple[int, int], ...] = ((1, 1), (7, 9))

MEDIUM_SHADE = "▒"


def blank_card() -> Sprite:
    inner_w = CARD_W - 2
    top = "┌" + "─" * inner_w + "┐"
    bot = "└" + "─" * inner_w + "┘"
    lines = [top] + ["│" + " " * inner_w + "│" for _ in range(CARD_H - 2)] + [bot]
    return Sprite(lines)


def _put(line: str, col: int, text: str) -> str:
    return line[:col] + text + line[col + 1:]


def card_face(rank: str, symbol: str) -> Sprite:
    """
    Face-up card: suit symbol on a diagonal, rank top-left and bottom-right.
    A two-character rank ("10") eats one blank on its line so the border stays put.
    """
    lines: List[str] = list(blank_card().lines)
    for row, col in SUIT_COORDS:
        lines[row] = _put(lines[row], col, symbol)
    for row, col in RANK_COORDS:
        lines[row] = _put(lines[row], col, rank)
        if len(rank) == 2:
            lines[row] = lines[row].replace("  ", " ", 1)
    return Sprite(lines)


def card_back() -> Sprite:
    lines = [line.replace(" ", MEDIUM_SHADE) for line in blank_card().lines]
    return Sprite(lines)

