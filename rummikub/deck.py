from __future__ import annotations

import random
from typing import List, Optional

from .rules import Ruleset
from .tiles import Tile, iter_full_deck


class Deck:
    """Draw pile of a full tile set; tiles are drawn from the end."""

    def __init__(self, ruleset: Ruleset | None = None, rng_seed: Optional[int] = None) -> None:
        self.ruleset = ruleset or Ruleset()
        self.rng_seed = rng_seed
        self._rng = random.Random(rng_seed)
        self.tiles: List[Tile] = list(iter_full_deck(self.ruleset))

    @classmethod
    def shuffled(cls, ruleset: Ruleset | None = None, rng_seed: Optional[int] = None) -> "Deck":
        deck = cls(ruleset=ruleset, rng_seed=rng_seed)
        deck.shuffle()
        return deck

    def __len__(self) -> int:
        return len(self.tiles)

    def shuffle(self) -> None:
        self._rng.shuffle(self.tiles)

    def draw(self) -> Optional[Tile]:
        if not self.tiles:
            return None
        return self.tiles.pop()

    def deal(self, count: int) -> List[Tile]:
        if count < 0:
            raise ValueError("cannot deal a negative number of tiles")
        hand: List[Tile] = []
        for _ in range(count):
            tile = self.draw()
            if tile is None:
                break
            hand.append(tile)
        return hand


def deal_hand(ruleset: Ruleset | None = None, rng_seed: Optional[int] = None) -> List[Tile]:
    ruleset = ruleset or Ruleset()
    deck = Deck.shuffled(ruleset=ruleset, rng_seed=rng_seed)
    return deck.deal(ruleset.hand_size)
