# src/twentyone/game/round.py
from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto

from ..cardfx.display import Display, Who
from ..common.config import GameConfig, DEFAULT_CONFIG
from ..common.logging_utils import get_logger, log_hand
from ..common.rules import Winner, decide_winner, settle
from .participants import Participant, Player, Dealer

log = get_logger("game.round")


class RoundState(Enum):
    BETTING = auto()
    DEALING_INITIAL = auto()
    PLAYER_TURN = auto()
    REVEAL = auto()
    DEALER_TURN = auto()
    SETTLEMENT = auto()
    DONE = auto()


@dataclass(frozen=True)
class RoundResult:
    winner: Winner
    bet: int
    player_total: int
    dealer_total: int
    player_busted: bool
    dealer_busted: bool
    money: int


class Round:
    """
    One hand of twenty-one, start to finish:

      BETTING -> DEALING_INITIAL -> PLAYER_TURN -> REVEAL
              -> DEALER_TURN (skipped if the player busted) -> SETTLEMENT -> DONE

    The round decides which cards go face-down; the display just draws what
    it is told.
    """

    def __init__(self, player: Player, dealer: Dealer, display: Display, config: GameConfig = DEFAULT_CONFIG):
        self.player = player
        self.dealer = dealer
        self.display = display
        self.config = config
        self.state = RoundState.BETTING
        self.result: RoundResult | None = None

    def _enter(self, state: RoundState) -> None:
        log.debug(f"state {self.state.name} -> {state.name}")
        self.state = state

    # ---------- dealing ----------
    def _deal(self, recipient: Participant, who: Who, *, face_down: bool = False) -> None:
        self.display.show_dealing()
        if self.config.deal_delay > 0:
            time.sleep(self.config.deal_delay)

        card = self.dealer.deal(recipient)
        index = len(recipient.hand) - 1
        self.display.render_card_at(self.display.card_slot(who, index), card, face_down=face_down)
        log_hand(log, recipient.name, recipient.hand, recipient.total,
                 note=f"dealt {card}{' face-down' if face_down else ''}")

    # ---------- phases ----------
    def _betting(self) -> None:
        self.player.clear_hand()
        self.dealer.clear_hand()
        self.display.show_money(self.player.money)
        self.player.bet = self.display.prompt_bet(self.player.money)
        log.info(f"{self.player.name} bets {self.player.bet} (money={self.player.money})")
        self.display.prepare_table(self.player.name)

    def _deal_initial(self) -> None:
        self._enter(RoundState.DEALING_INITIAL)
        self._deal(self.player, "player")
        self._deal(self.dealer, "dealer", face_down=True)  # hole card
        self._deal(self.player, "player")
        self._deal(self.dealer, "dealer")
        self.display.clear_message()

    def _player_turn(self) -> None:
        self._enter(RoundState.PLAYER_TURN)
        while self.player.can_hit:
            if not self.display.ask_hit():
                break
            self._deal(self.player, "player")
            self.display.clear_message()

        if self.player.busted:
            log.info(f"{self.player.name} busts with {self.player.total}")
        else:
            if self.player.has_twenty_one:
                log.info(f"{self.player.name} has twenty-one")
            self.display.show_player_total(self.player.total)

    def _reveal(self) -> None:
        self._enter(RoundState.REVEAL)
        hole = self.dealer.hand[0]
        self.display.render_card_at(self.display.card_slot("dealer", 0), hole)
        log_hand(log, self.dealer.name, self.dealer.hand, self.dealer.total, note="hole card revealed")

    def _dealer_turn(self) -> None:
        self._enter(RoundState.DEALER_TURN)
        while self.dealer.should_hit:
            self._deal(self.dealer, "dealer")
        self.display.clear_message()
        if self.dealer.busted:
            log.info(f"Dealer busts with {self.dealer.total}")

    def _settle(self) -> RoundResult:
        self._enter(RoundState.SETTLEMENT)
        player_busted = self.player.busted
        dealer_busted = self.dealer.busted
        winner = decide_winner(
            self.player.total,
            self.dealer.total,
            player_busted=player_busted,
            dealer_busted=dealer_busted,
        )
        self.player.money = settle(self.player.money, self.player.bet, winner)

        self.display.show_outcome(
            winner,
            self.player.total,
            self.dealer.total,
            player_busted=player_busted,
            dealer_busted=dealer_busted,
        )
        self.display.show_money(self.player.money)
        log.info(f"Result: {winner.upper()} player={self.player.total} dealer={self.dealer.total} "
                 f"money={self.player.money}")

        return RoundResult(
            winner=winner,
            bet=self.player.bet,
            player_total=self.player.total,
            dealer_total=self.dealer.total,
            player_busted=player_busted,
            dealer_busted=dealer_busted,
            money=self.player.money,
        )

    def play(self) -> RoundResult:
        """Run every phase once and return how it ended."""
        self._betting()
        self._deal_initial()
        self._player_turn()
        self._reveal()
        if not self.player.busted:
            self._dealer_turn()
        self.result = self._settle()
        self._enter(RoundState.DONE)
        return self.result
