from __future__ import annotations

from typing import List, Sequence

from .tiles import Tile


def wildcard_pool(hand: Sequence[Tile]) -> List[Tile]:
    """Wildcard tiles of ``hand`` in hand order, as the hand's own objects."""
    return [tile for tile in hand if tile.is_wildcard()]


def numbered_tiles(hand: Sequence[Tile]) -> List[Tile]:
    return [tile for tile in hand if not tile.is_wildcard()]
