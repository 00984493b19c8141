# src/twentyone/common/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .constants import (
    SUITS, RANKS,
    TARGET, DEALER_STANDS_ON, STARTING_MONEY,
    DEAL_DELAY, CARD_LINE_DELAY, WARNING_DELAY, MESSAGE_DELAY,
    NAME_PATTERN, BET_PATTERN,
)


@dataclass(frozen=True)
class GameConfig:
    """
    Everything a session needs to know about the table.
    Built once at start-up and handed to the deck, round and display.
    """
    suits: Tuple[str, ...] = SUITS
    ranks: Tuple[str, ...] = RANKS

    target: int = TARGET
    dealer_stands_on: int = DEALER_STANDS_ON
    starting_money: int = STARTING_MONEY

    # cosmetic pauses (seconds); tests set these to 0
    deal_delay: float = DEAL_DELAY
    card_line_delay: float = CARD_LINE_DELAY
    warning_delay: float = WARNING_DELAY
    message_delay: float = MESSAGE_DELAY

    name_pattern: str = NAME_PATTERN
    bet_pattern: str = BET_PATTERN


DEFAULT_CONFIG = GameConfig()
