from twentyone.common.cards import Deck
from twentyone.common.rules import hand_value
from twentyone.game.participants import Player, Dealer
from conftest import c, stacked


def test_total_tracks_hand_after_every_add():
    p = Player("Guy")
    for card in (c("A"), c("6"), c("10"), c("A")):
        p.add(card)
        assert p.total == hand_value(p.hand)
    assert p.total == 18


def test_clear_hand():
    p = Player("Guy")
    p.add(c("K"))
    p.clear_hand()
    assert p.hand == []
    assert p.total == 0


def test_player_defaults(config):
    p = Player("Guy", config)
    assert p.money == 20
    assert p.bet == 0
    assert Player("Guy", config, money=7).money == 7


def test_player_can_hit_below_21_only():
    p = Player("Guy")
    p.add(c("10"))
    p.add(c("9"))
    assert p.can_hit
    p.add(c("2"))
    assert p.has_twenty_one
    assert not p.can_hit
    assert not p.busted


def test_dealer_deals_from_its_deck():
    deck = stacked(Deck(), c("5"), c("K"))
    dealer = Dealer(deck)
    player = Player("Guy")
    assert dealer.deal(player) == c("5")
    assert dealer.deal(dealer) == c("K")
    assert player.hand == [c("5")]
    assert dealer.hand == [c("K")]
    assert dealer.name == "Dealer"


def test_dealer_should_hit():
    dealer = Dealer(Deck())
    dealer.add(c("10"))
    dealer.add(c("6"))
    assert dealer.should_hit
    dealer.add(c("A"))
    assert not dealer.should_hit


def test_busted_follows_scored_total():
    p = Player("Guy")
    for card in (c("A"), c("A", "hearts"), c("10")):
        p.add(card)
    assert p.total == 12
    assert not p.busted
    p.add(c("K"))
    assert p.total == 22
    assert p.busted
