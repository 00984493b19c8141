# src/twentyone/common/cards.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from .config import GameConfig, DEFAULT_CONFIG
from .constants import ACE, ACE_SOFT_VALUE, FACE_RANKS, FACE_VALUE, SUIT_SYMBOLS, RED_SUITS
from .logging_utils import get_logger

_log = get_logger("cards")


class DeckExhaustedError(RuntimeError):
    """Raised when a card is drawn from an empty deck."""
    pass


@dataclass(frozen=True)
class Card:
    suit: str  # "spades","hearts","clubs","diamonds"
    rank: str  # "2".."10","J","Q","K","A"

    @property
    def soft_value(self) -> int:
        # Ace counts 11 until the scorer degrades it
        if self.rank == ACE:
            return ACE_SOFT_VALUE
        if self.rank in FACE_RANKS:
            return FACE_VALUE
        return int(self.rank)

    @property
    def is_ace(self) -> bool:
        return self.rank == ACE

    @property
    def is_red(self) -> bool:
        return self.suit in RED_SUITS

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self.suit]

    def __str__(self) -> str:
        return f"{self.rank}{self.symbol}"


class Deck:
    """
    A single 52-card deck. The top of the deck is the END of `cards`,
    so draw() is a pop.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, *, rng: Optional[random.Random] = None):
        self.config = config
        self._rng = rng if rng is not None else random.Random()
        self.cards: List[Card] = []
        self.reshuffle()

    def reshuffle(self) -> None:
        """Throw away whatever is left and start again from a full shuffled deck."""
        self.cards = [Card(s, r) for s in self.config.suits for r in self.config.ranks]
        self._rng.shuffle(self.cards)
        _log.debug(f"Deck rebuilt and shuffled ({len(self.cards)} cards)")

    def draw(self) -> Card:
        if not self.cards:
            _log.error("Draw requested from an empty deck")
            raise DeckExhaustedError("Out of cards")
        return self.cards.pop()

    def __len__(self) -> int:
        return len(self.cards)
