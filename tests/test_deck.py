import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummikub.deck import Deck, deal_hand
from rummikub.rules import Ruleset


def _keys(tiles):
    return [tile.sort_key() for tile in tiles]


def test_deck_starts_full():
    deck = Deck()
    assert len(deck) == Ruleset().deck_size()


def test_seeded_shuffle_is_reproducible():
    a = Deck.shuffled(rng_seed=5)
    b = Deck.shuffled(rng_seed=5)
    assert _keys(a.tiles) == _keys(b.tiles)
    assert _keys(a.tiles) != _keys(Deck().tiles)


def test_deal_draws_from_the_end():
    deck = Deck.shuffled(rng_seed=9)
    last = deck.tiles[-1]
    hand = deck.deal(14)
    assert hand[0] is last
    assert len(hand) == 14
    assert len(deck) == 106 - 14


def test_deal_stops_when_empty():
    deck = Deck(Ruleset(colors=1, values=3, copies_per_tiletype=1, num_wildcards=0))
    assert len(deck.deal(10)) == 3
    assert deck.draw() is None
    assert deck.deal(2) == []
    with pytest.raises(ValueError):
        deck.deal(-1)


def test_deal_hand_uses_hand_size():
    assert len(deal_hand(rng_seed=1)) == 14
    assert len(deal_hand(Ruleset(hand_size=20), rng_seed=1)) == 20
    assert _keys(deal_hand(rng_seed=3)) == _keys(deal_hand(rng_seed=3))


@pytest.mark.parametrize(
    "kwargs",
    [{"values": 14}, {"values": 0}, {"colors": 5}, {"min_set_size": 1}, {"max_group_size": 2}, {"num_wildcards": -1}],
)
def test_invalid_ruleset_rejected(kwargs):
    with pytest.raises(ValueError):
        Ruleset(**kwargs)
