from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .canonical import dedupe_melds
from .meld import Meld, MeldKind
from .rules import Ruleset
from .tiles import Color, Tile
from .wildcards import numbered_tiles, wildcard_pool

logger = logging.getLogger(__name__)


def _slots_for_color(tiles: Iterable[Tile], color: Color, values: int) -> List[Optional[Tile]]:
    # slots[n - 1] holds the first tile of number n, None when the hand has none
    slots: List[Optional[Tile]] = [None] * values
    for tile in tiles:
        if tile.color != color or tile.effective_number() > values:
            continue
        if slots[tile.effective_number() - 1] is None:
            slots[tile.effective_number() - 1] = tile
    return slots


def _fill_window(window: Sequence[Optional[Tile]], wildcards: Sequence[Tile]) -> Meld:
    spare = iter(wildcards)
    filled = tuple(tile if tile is not None else next(spare) for tile in window)
    return Meld(MeldKind.RUN, filled)


def _windows(slots: Sequence[Optional[Tile]], wildcards: Sequence[Tile], min_size: int) -> Iterable[Meld]:
    present = sum(1 for slot in slots if slot is not None)
    longest = min(len(slots), present + len(wildcards))
    for length in range(longest, min_size - 1, -1):
        for start in range(len(slots) - length + 1):
            window = slots[start : start + length]
            missing = sum(1 for slot in window if slot is None)
            if missing > len(wildcards) or missing == length:
                continue
            yield _fill_window(window, wildcards)


def find_runs(hand: Sequence[Tile], ruleset: Ruleset | None = None) -> List[Meld]:
    """Every same-color, consecutive-number set in ``hand``, wildcards included.

    Each color scan may use the whole wildcard pool; the windows are emitted
    longest first, lowest start first, with wildcards filling the gaps in
    pool order.
    """
    ruleset = ruleset or Ruleset()
    wildcards = wildcard_pool(hand)
    numbered = numbered_tiles(hand)
    runs: List[Meld] = []

    for color in list(Color)[: ruleset.colors]:
        slots = _slots_for_color(numbered, color, ruleset.values)
        present = sum(1 for slot in slots if slot is not None)
        if present + len(wildcards) < ruleset.min_set_size:
            logger.debug("color %s: %d numbers, %d wildcards, skipped", color, present, len(wildcards))
            continue
        runs.extend(_windows(slots, wildcards, ruleset.min_set_size))

    runs = dedupe_melds(runs)
    logger.debug("found %d runs", len(runs))
    return runs
