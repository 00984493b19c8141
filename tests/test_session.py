from dataclasses import replace

from twentyone.game.session import Session
from conftest import c, stacked, screen_of


def test_session_ends_when_money_runs_out(display, keyboard, config, out):
    session = Session(display, config)
    # player 10,7 stands on 17; dealer 10,9 wins
    stacked(session.deck, c("10"), c("10", "hearts"), c("7"), c("9"))
    keyboard.lines.extend(["Guy", "20"])
    keyboard.keys.extend(["x", "s", "a", "b"])  # start, stand, out-of-money ack, exit

    assert session.play() == 0
    assert not keyboard.keys
    assert len(session.results) == 1
    text = out.getvalue()
    assert "You're out of money. " in text
    assert screen_of(out).line(2) == "Thanks for playing! You're walking away with $0. Press any key to exit."


def test_tie_with_all_money_offers_to_continue(display, keyboard, config, out):
    session = Session(display, replace(config, starting_money=5))
    stacked(session.deck, c("10"), c("10", "hearts"), c("9"), c("9", "hearts"))
    keyboard.lines.extend(["Guy", "5"])
    keyboard.keys.extend(["x", "s", "n", "q"])

    # all 5 on the table; a push leaves 5, so the player is asked to go on
    assert session.play() == 5
    assert session.results[0].bet == 5
    assert session.results[0].winner == "tie"
    assert "Continue playing? (y/n)" in out.getvalue()


def test_declining_ends_session(display, keyboard, config, out):
    session = Session(display, config)
    stacked(session.deck, c("10"), c("6"), c("9"), c("10", "hearts"), c("K"))
    keyboard.lines.extend(["Guy", "5"])
    keyboard.keys.extend(["x", "s", "n", "q"])

    assert session.play() == 25
    assert session.player.name == "Guy"
    assert screen_of(out).line(2) == "Thanks for playing! You're walking away with $25. Press any key to exit."


def test_next_round_gets_a_fresh_deck_and_clean_table(display, keyboard, config, out):
    session = Session(display, config)
    stacked(session.deck, c("10"), c("6"), c("9"), c("10", "hearts"), c("K"))

    reshuffles = []

    def reshuffle():
        reshuffles.append(len(session.deck))
        stacked(session.deck, c("10"), c("10", "hearts"), c("7"), c("9"))

    session.deck.reshuffle = reshuffle
    keyboard.lines.extend(["Guy", "5", "25"])
    keyboard.keys.extend(["x", "s", "y", "s", "a", "b"])

    assert session.play() == 0
    assert reshuffles == [0]
    assert [r.winner for r in session.results] == ["player", "dealer"]
    assert session.dealer.deck is session.deck
    screen = screen_of(out)
    # second round's cards only; first round's third dealer card is gone
    assert screen.line(17) == "    │10       │   │9        │"
