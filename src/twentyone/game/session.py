# src/twentyone/game/session.py
from __future__ import annotations

import random
from typing import List, Optional

from ..cardfx.display import Display
from ..common.cards import Deck
from ..common.config import GameConfig, DEFAULT_CONFIG
from ..common.logging_utils import get_logger
from .participants import Player, Dealer
from .round import Round, RoundResult

log = get_logger("game.session")


class Session:
    """
    Rounds back to back until the player is broke or says no.

    One deck per session; it is rebuilt as a fresh shuffled 52 before every
    round after the first, so no round ever starts short of cards.
    """

    def __init__(self, display: Display, config: GameConfig = DEFAULT_CONFIG, *, rng: Optional[random.Random] = None):
        self.display = display
        self.config = config
        self.deck = Deck(config, rng=rng)
        self.dealer = Dealer(self.deck, config)
        self.player: Player | None = None
        self.results: List[RoundResult] = []

    def _next_round(self) -> None:
        self.player.clear_hand()
        self.dealer.clear_hand()
        self.deck.reshuffle()
        self.display.clear_table()

    def play(self) -> int:
        """Play the whole sitting. Returns the money the player walks away with."""
        self.display.welcome()
        name = self.display.prompt_name()
        self.player = Player(name, self.config)
        log.info(f"Session started: player={name} money={self.player.money}")

        while True:
            result = Round(self.player, self.dealer, self.display, self.config).play()
            self.results.append(result)
            log.info(f"--- Round {len(self.results)} done: {result.winner}, money={result.money} ---")

            if self.player.money == 0:
                break
            if not self.display.ask_continue():
                break
            self._next_round()

        log.info(f"===== SESSION OVER ===== rounds={len(self.results)} money={self.player.money}")
        self.display.goodbye(self.player.money)
        return self.player.money
