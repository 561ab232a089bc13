"""Rummikub set search: every group and run a hand of tiles can form."""

from .rules import Ruleset
from .tiles import Color, Tile, iter_full_deck
from .meld import Meld, MeldKind
from .wildcards import wildcard_pool
from .groups import find_groups
from .runs import find_runs
from .canonical import dedupe_melds
from .search import valid_sets
from .deck import Deck, deal_hand

__all__ = [
    "Ruleset",
    "Color",
    "Tile",
    "iter_full_deck",
    "Meld",
    "MeldKind",
    "wildcard_pool",
    "find_groups",
    "find_runs",
    "dedupe_melds",
    "valid_sets",
    "Deck",
    "deal_hand",
]
