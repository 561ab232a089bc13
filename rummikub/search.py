from __future__ import annotations

import logging
from typing import List, Sequence

from .canonical import dedupe_melds
from .groups import find_groups
from .meld import Meld
from .rules import Ruleset
from .runs import find_runs
from .tiles import Tile

logger = logging.getLogger(__name__)


def valid_sets(hand: Sequence[Tile], ruleset: Ruleset | None = None) -> List[Meld]:
    """All groups then all runs that can be laid from ``hand``.

    The hand is only read. A group and a run can share tile content only when
    wildcards stand in for every tile but one (``3 Blue, Wildcard, Wildcard``);
    the group is kept in that case.
    """
    groups = find_groups(hand, ruleset)
    runs = find_runs(hand, ruleset)
    sets = dedupe_melds(groups + runs)
    logger.debug(
        "hand of %d tiles: %d groups, %d runs, %d sets",
        len(hand),
        len(groups),
        len(runs),
        len(sets),
    )
    return sets
