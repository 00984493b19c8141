# src/twentyone/common/rules.py
from __future__ import annotations

from typing import List, Literal, Sequence

from .cards import Card
from .constants import ACE_SOFT_VALUE, ACE_HARD_VALUE, TARGET, DEALER_STANDS_ON

Winner = Literal["player", "dealer", "tie"]


def card_value(card: Card) -> int:
    # Soft value: 2-10 = face value, J/Q/K = 10, Ace = 11
    return card.soft_value


def hand_value(hand: Sequence[Card], target: int = TARGET) -> int:
    """
    Best total for a hand.

    Every ace starts at 11. While the hand is over `target`, the first ace
    still counted as 11 (in hand order) drops to 1, one at a time.
    """
    values: List[int] = [card_value(c) for c in hand]
    total = sum(values)
    index = 0
    while total > target and index < len(values):
        if hand[index].is_ace and values[index] == ACE_SOFT_VALUE:
            values[index] = ACE_HARD_VALUE
            total = sum(values)
        index += 1
    return total


def is_bust(hand: Sequence[Card], target: int = TARGET) -> bool:
    return hand_value(hand, target) > target


def dealer_should_hit(hand: Sequence[Card], stands_on: int = DEALER_STANDS_ON, target: int = TARGET) -> bool:
    return hand_value(hand, target) < stands_on


def decide_winner(
    player_total: int,
    dealer_total: int,
    *,
    player_busted: bool,
    dealer_busted: bool,
) -> Winner:
    # A player bust loses even if the dealer would also have busted
    if player_busted:
        return "dealer"
    if dealer_busted:
        return "player"
    if player_total > dealer_total:
        return "player"
    if dealer_total > player_total:
        return "dealer"
    return "tie"


def settle(money: int, bet: int, winner: Winner) -> int:
    """Money after the round: even money on a win, bet lost on a loss, push on a tie."""
    if winner == "player":
        return money + bet
    if winner == "dealer":
        return money - bet
    return money
