# src/twentyone/cardfx/display.py
from __future__ import annotations

import re
import sys
import time
from dataclasses import dataclass
from typing import Literal, Optional, Sequence

from ..common.cards import Card
from ..common.config import GameConfig, DEFAULT_CONFIG
from ..common.constants import CTRL_C, INTERRUPT_EXIT_CODE, TITLE, DEALER_NAME
from ..common.logging_utils import get_logger
from ..common.rules import Winner
from .keyboard import Keyboard
from .sprites import CARD_W, CARD_H, card_back, card_face
from .terminal import TerminalRenderer, Position, Style, RESET, BOLD, RED_BOLD, CYAN

_log = get_logger("cardfx.display")

Who = Literal["player", "dealer"]


def suit_style(card: Card) -> Style:
    # Hearts/diamonds red; spades/clubs default
    return RED_BOLD if card.is_red else RESET


def joiner(options: Sequence[str]) -> str:
    """['h', 's'] -> 'h or s', ['a', 'b', 'c'] -> 'a, b or c'. A space key reads as 'space'."""
    names = ["space" if o == " " else o for o in options]
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " or " + names[-1]


# ---------- layout ----------
@dataclass(frozen=True)
class Region:
    anchor: Position
    height: int = 1
    # None: the region runs to the end of the line
    width: Optional[int] = None


@dataclass(frozen=True)
class Layout:
    """
    Fixed screen map (1-based rows/cols):

      row 1        title, chips
      row 2        message line
      row 3        warning line
      row 4        player heading
      rows 5-13    player cards
      row 15       dealer heading
      rows 16-24   dealer cards
    """
    title: Region = Region(Position(1, 1), width=len(TITLE))
    chips: Region = Region(Position(1, 15))
    message: Region = Region(Position(2, 1))
    warning: Region = Region(Position(3, 1))
    player_heading: Region = Region(Position(4, 5))
    player_cards: Region = Region(Position(5, 5), CARD_H)
    dealer_heading: Region = Region(Position(15, 5))
    dealer_cards: Region = Region(Position(16, 5), CARD_H)

    # blank columns between two cards of the same hand
    card_gutter: int = 3

    def cards(self, who: Who) -> Region:
        return self.dealer_cards if who == "dealer" else self.player_cards

    def card_slot(self, who: Who, index: int) -> Position:
        return self.cards(who).anchor.right(index * (CARD_W + self.card_gutter))


DEFAULT_LAYOUT = Layout()


class Display:
    """
    Owns the terminal for the whole session.

    Every write goes to an explicit region anchor, so redrawing one part of
    the table never disturbs another. It is also the only place input comes
    from: prompt_char() for single keys, prompt_line() for typed lines.
    """

    def __init__(
        self,
        renderer: Optional[TerminalRenderer] = None,
        keyboard: Optional[Keyboard] = None,
        config: GameConfig = DEFAULT_CONFIG,
        layout: Layout = DEFAULT_LAYOUT,
    ):
        self.r = renderer if renderer is not None else TerminalRenderer()
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.config = config
        self.layout = layout
        self._message = ""
        self._warning_visible = False

    # ---------- lifecycle ----------
    def open(self) -> None:
        self.keyboard.open()
        self.r.begin()

    def close(self) -> None:
        self.keyboard.close()
        self.r.end()

    def _pause(self, seconds: float) -> None:
        if seconds > 0:
            self.r.flush()
            time.sleep(seconds)

    # ---------- regions ----------
    def clear_region(self, region: Region) -> None:
        for row in range(region.height):
            pos = region.anchor.down(row)
            if region.width is None:
                self.r.erase_line_from(pos)
            else:
                self.r.write_at(pos, " " * region.width)
        self.r.flush()

    def _print(self, region: Region, text: str, style: Style = RESET) -> None:
        self.clear_region(region)
        self.r.write_at(region.anchor, text, style)
        self.r.flush()

    def show_title(self) -> None:
        self._print(self.layout.title, TITLE, BOLD)

    def clear_table(self) -> None:
        self.r.clear()
        self._message = ""
        self._warning_visible = False
        self.show_title()

    def prepare_table(self, player_name: str) -> None:
        self.clear_message()
        self._print(self.layout.player_heading, f"{player_name}:", BOLD)
        self._print(self.layout.dealer_heading, f"{DEALER_NAME}:", BOLD)

    def show_money(self, money: int) -> None:
        label = "You have: $"
        anchor = self.layout.chips.anchor
        self.clear_region(self.layout.chips)
        self.r.write_at(anchor, label)
        self.r.write_at(anchor.right(len(label)), str(money), CYAN)
        self.r.flush()

    # ---------- message line ----------
    def show_message(self, text: str, *, append: bool = False) -> None:
        self._message = self._message + text if append else text
        self._print(self.layout.message, self._message)

    def clear_message(self) -> None:
        self._message = ""
        self.clear_region(self.layout.message)

    def show_dealing(self) -> None:
        self.show_message("Dealing...")

    def show_player_total(self, total: int) -> None:
        self.show_message(f"Your hand total is {total}. ")
        self._pause(self.config.message_delay)

    def show_outcome(
        self,
        winner: Winner,
        player_total: int,
        dealer_total: int,
        *,
        player_busted: bool,
        dealer_busted: bool,
    ) -> None:
        if player_busted:
            text = "You bust! "
        elif dealer_busted:
            text = "Dealer busts. "
        else:
            text = f"You have {player_total} and the dealer has {dealer_total}. "

        if winner == "dealer":
            text += "Dealer wins the hand. "
        elif winner == "player":
            text += "You win the hand! "
        else:
            text += "The hand is a tie! "
        self.show_message(text)

    # ---------- warning line ----------
    def print_warning(self, text: str) -> None:
        _log.debug(f"warning: {text}")
        if self._warning_visible:
            self.clear_region(self.layout.warning)
        self._pause(self.config.warning_delay)
        self._print(self.layout.warning, text, CYAN)
        self._warning_visible = True

    def _clear_warning(self) -> None:
        if self._warning_visible:
            self.clear_region(self.layout.warning)
            self._warning_visible = False

    # ---------- cards ----------
    def card_slot(self, who: Who, index: int) -> Position:
        return self.layout.card_slot(who, index)

    def render_card_at(self, pos: Position, card: Card, face_down: bool = False) -> Position:
        """
        Draw one card with its top-left corner at `pos`, a line at a time.
        Returns where the next card of the same hand goes.
        """
        if face_down:
            sprite, style = card_back(), RESET
        else:
            sprite, style = card_face(card.rank, card.symbol), suit_style(card)

        if self.config.card_line_delay > 0:
            for row in range(sprite.h):
                self.r.draw_sprite_line(sprite, row, pos, style)
                self._pause(self.config.card_line_delay)
        else:
            self.r.draw_sprite(sprite, pos, style)
        self.r.flush()
        return pos.right(sprite.w + self.layout.card_gutter)

    # ---------- input ----------
    def prompt_char(self, message: str, allowed: Optional[Sequence[str]] = None, *, append: bool = False) -> str:
        """
        Show `message` and wait for one keystroke (lower-cased).
        Keys outside `allowed` get a warning and another wait.
        Ctrl-C ends the program on the spot.
        """
        self.show_message(message, append=append)
        while True:
            key = self.keyboard.read_key().lower()
            if key == CTRL_C:
                _log.info("Interrupt key pressed, exiting")
                sys.exit(INTERRUPT_EXIT_CODE)

            if allowed is None or key in allowed:
                self._clear_warning()
                return key

            self.print_warning(f"Please enter {joiner(allowed)}")

    def prompt_line(self, message: str, pattern: str, warning: str = "Invalid input") -> str:
        """Show `message`, read one echoed line, repeat until it fully matches `pattern`."""
        check = re.compile(pattern)
        while True:
            self.show_message(message)
            self.r.show_cursor()
            self.r.flush()
            try:
                raw = self.keyboard.read_line()
            finally:
                self.r.hide_cursor()

            if check.fullmatch(raw):
                self._clear_warning()
                return raw

            self.print_warning(warning)

    def any_key(self, message: str = "Press any key to continue.", *, append: bool = True) -> str:
        return self.prompt_char(message, append=append)

    def welcome(self) -> None:
        self.show_title()
        self.show_message("Welcome to Twenty-one. ")
        self.any_key("Press any key to start.")

    def prompt_name(self) -> str:
        message = ("Please enter your name (only word characters "
                   "allowed, up to 10 characters): ")
        return self.prompt_line(message, self.config.name_pattern)

    def prompt_bet(self, max_bet: int) -> int:
        """Whole-dollar bet in 1..max_bet."""
        while True:
            raw = self.prompt_line(
                "Enter your bet (dollar amount, without cents): $",
                self.config.bet_pattern,
                warning="Invalid bet",
            )
            try:
                bet = int(raw)
            except ValueError:
                # digit strings past the int conversion limit
                self.print_warning("Invalid bet")
                continue
            if 0 < bet <= max_bet:
                return bet
            self.print_warning(f"Bet must be between 1 and {max_bet}")

    def ask_hit(self) -> bool:
        return self.prompt_char("Press h to hit or s to stand", ("h", "s")) == "h"

    def ask_continue(self) -> bool:
        return self.prompt_char("Continue playing? (y/n)", ("y", "n"), append=True) == "y"

    def goodbye(self, money: int) -> None:
        if money == 0:
            self.show_message("You're out of money. ")
            self.any_key()
        self.show_message(f"Thanks for playing! You're walking away with ${money}. ")
        self.any_key("Press any key to exit.")
