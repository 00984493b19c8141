# src/twentyone/game/participants.py
from __future__ import annotations

from typing import List, Optional

from ..common.cards import Card, Deck
from ..common.config import GameConfig, DEFAULT_CONFIG
from ..common.constants import DEALER_NAME
from ..common.rules import hand_value, is_bust, dealer_should_hit


class Participant:
    """
    Hand + running total. Cards only come in through add(), which rescores
    straight away, so `total` always matches `hand`.
    """

    def __init__(self, name: str, config: GameConfig = DEFAULT_CONFIG):
        self.name = name
        self.config = config
        self.hand: List[Card] = []
        self.total = 0

    def add(self, card: Card) -> None:
        self.hand.append(card)
        self.total = hand_value(self.hand, self.config.target)

    def clear_hand(self) -> None:
        self.hand = []
        self.total = 0

    @property
    def busted(self) -> bool:
        return is_bust(self.hand, self.config.target)

    @property
    def has_twenty_one(self) -> bool:
        return self.total == self.config.target

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, hand={self.hand}, total={self.total})"


class Player(Participant):
    def __init__(self, name: str, config: GameConfig = DEFAULT_CONFIG, *, money: Optional[int] = None):
        super().__init__(name, config)
        self.money = config.starting_money if money is None else money
        self.bet = 0

    @property
    def can_hit(self) -> bool:
        # 21 on the nose ends the turn, no question asked
        return self.total < self.config.target


class Dealer(Participant):
    def __init__(self, deck: Deck, config: GameConfig = DEFAULT_CONFIG):
        super().__init__(DEALER_NAME, config)
        self.deck = deck

    def deal(self, recipient: Participant) -> Card:
        """Top card of the deck into `recipient`'s hand."""
        card = self.deck.draw()
        recipient.add(card)
        return card

    @property
    def should_hit(self) -> bool:
        return dealer_should_hit(self.hand, self.config.dealer_stands_on, self.config.target)
