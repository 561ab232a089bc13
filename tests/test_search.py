import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from rummikub.deck import deal_hand
from rummikub.meld import MeldKind
from rummikub.rules import Ruleset
from rummikub.search import valid_sets
from rummikub.tiles import Color, Tile, iter_full_deck
from rummikub.wildcards import wildcard_pool

R, B, K, Y = Color.RED, Color.BLUE, Color.BLACK, Color.YELLOW
W = Tile.wildcard


def test_groups_and_runs_are_merged():
    hand = [Tile.numbered(1, R), Tile.numbered(2, R), Tile.numbered(1, B), Tile.numbered(2, B), W()]
    sets = valid_sets(hand)
    kinds = [meld.kind for meld in sets]
    assert kinds == [MeldKind.GROUP, MeldKind.GROUP, MeldKind.RUN, MeldKind.RUN]


def test_shared_content_kept_once_as_group():
    hand = [Tile.numbered(3, B), W(), W()]
    sets = valid_sets(hand)
    assert len(sets) == 1
    assert sets[0].kind == MeldKind.GROUP


def test_empty_and_hopeless_hands():
    assert valid_sets([]) == []
    assert valid_sets([Tile.numbered(1, R), Tile.numbered(5, B), Tile.numbered(9, Y)]) == []


def test_full_deck_counts():
    sets = valid_sets(list(iter_full_deck()))
    groups = [meld for meld in sets if meld.kind == MeldKind.GROUP]
    runs = [meld for meld in sets if meld.kind == MeldKind.RUN]
    assert len(groups) == 13 * 25
    assert len(runs) == 4 * 66
    assert len(sets) == 589


@pytest.mark.parametrize("seed", range(40))
def test_dealt_hand_properties(seed):
    hand = deal_hand(ruleset=Ruleset(hand_size=20), rng_seed=seed)
    snapshot = list(hand)
    wildcards = len(wildcard_pool(hand))

    sets = valid_sets(hand)

    assert hand == snapshot
    assert all(a is b for a, b in zip(hand, snapshot))
    keys = [meld.canonical_key() for meld in sets]
    assert len(keys) == len(set(keys))
    for meld in sets:
        valid, reason = meld.is_valid()
        assert valid, reason
        assert meld.wildcard_count() <= wildcards
        assert all(any(tile is owned for owned in hand) for tile in meld)
        if meld.kind == MeldKind.GROUP:
            assert 3 <= len(meld) <= 4
        else:
            assert 3 <= len(meld) <= 13

    assert {meld.canonical_key() for meld in valid_sets(hand)} == set(keys)
