from __future__ import annotations

import logging
from itertools import combinations, groupby
from typing import Iterable, List, Sequence

from .canonical import dedupe_melds
from .meld import Meld, MeldKind
from .rules import Ruleset
from .tiles import Tile
from .wildcards import numbered_tiles, wildcard_pool

logger = logging.getLogger(__name__)


def _distinct_colors(tiles: Iterable[Tile]) -> List[Tile]:
    # first tile per color; extra copies cannot extend a group
    picked: List[Tile] = []
    seen = set()
    for tile in tiles:
        if tile.color in seen:
            continue
        seen.add(tile.color)
        picked.append(tile)
    return picked


def _group_candidates(pool: Sequence[Tile], min_size: int, max_size: int) -> Iterable[Meld]:
    for size in range(min_size, min(max_size, len(pool)) + 1):
        for combo in combinations(pool, size):
            if all(tile.is_wildcard() for tile in combo):
                continue
            yield Meld(MeldKind.GROUP, combo)


def find_groups(hand: Sequence[Tile], ruleset: Ruleset | None = None) -> List[Meld]:
    """Every same-number, distinct-color set in ``hand``, wildcards included."""
    ruleset = ruleset or Ruleset()
    wildcards = wildcard_pool(hand)
    max_size = min(ruleset.max_group_size, ruleset.colors)
    groups: List[Meld] = []

    sorted_tiles = sorted(tile for tile in numbered_tiles(hand) if tile.effective_number() <= ruleset.values)
    for number, same_number in groupby(sorted_tiles, key=lambda t: t.number):
        distinct = _distinct_colors(same_number)
        if len(distinct) + len(wildcards) < ruleset.min_set_size:
            logger.debug("number %s: %d colors, %d wildcards, skipped", number, len(distinct), len(wildcards))
            continue
        pool = distinct + wildcards
        groups.extend(_group_candidates(pool, ruleset.min_set_size, max_size))

    groups = dedupe_melds(groups)
    logger.debug("found %d groups", len(groups))
    return groups
