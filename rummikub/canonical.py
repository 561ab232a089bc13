from __future__ import annotations

from typing import Iterable, List, Set, Tuple

from .meld import Meld


def dedupe_melds(melds: Iterable[Meld]) -> List[Meld]:
    """Keep the first meld for each canonical key, preserving order.

    Two melds are the same result when their tiles sort to the same values,
    whichever hand objects they borrow.
    """
    seen: Set[Tuple] = set()
    unique: List[Meld] = []
    for meld in melds:
        key = meld.canonical_key()
        if key in seen:
            continue
        seen.add(key)
        unique.append(meld)
    return unique
