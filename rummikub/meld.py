from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from .rules import Ruleset
from .tiles import Tile


class MeldKind(str, Enum):
    RUN = "RUN"
    GROUP = "GROUP"


@dataclass(frozen=True)
class Meld:
    """A candidate set: tiles borrowed from a hand, never copies of them."""

    kind: MeldKind
    tiles: Tuple[Tile, ...]

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]

    def __str__(self) -> str:
        return " ".join(str(tile) for tile in self.tiles)

    def numbered_tiles(self) -> List[Tile]:
        return [tile for tile in self.tiles if not tile.is_wildcard()]

    def wildcard_count(self) -> int:
        return sum(1 for tile in self.tiles if tile.is_wildcard())

    def canonical_key(self) -> Tuple[Tuple[int, int, int], ...]:
        return tuple(sorted(tile.sort_key() for tile in self.tiles))

    def is_valid(self, ruleset: Ruleset | None = None) -> Tuple[bool, str]:
        ruleset = ruleset or Ruleset()
        if len(self.tiles) < ruleset.min_set_size:
            return False, "meld too short"
        numbered = self.numbered_tiles()
        if not numbered:
            return False, "meld needs a numbered tile"
        colors = [tile.effective_color() for tile in numbered]
        numbers = [tile.effective_number() for tile in numbered]

        if self.kind == MeldKind.RUN:
            if len(self.tiles) > ruleset.values:
                return False, "run too long"
            if len(set(colors)) != 1:
                return False, "run must have same color"
            # wildcards take the number their position implies
            offset = self.tiles.index(numbered[0])
            start = numbers[0] - offset
            for position, tile in enumerate(self.tiles):
                if not tile.is_wildcard() and tile.number != start + position:
                    return False, "run must be consecutive"
            if start < 1 or start + len(self.tiles) - 1 > ruleset.values:
                return False, "run out of range"
            return True, ""

        if self.kind == MeldKind.GROUP:
            max_size = min(ruleset.max_group_size, ruleset.colors)
            if len(self.tiles) > max_size:
                return False, f"group must have length {ruleset.min_set_size} to {max_size}"
            if len(set(numbers)) != 1:
                return False, "group must share value"
            if numbers[0] > ruleset.values:
                return False, "group out of range"
            if len(set(colors)) != len(colors):
                return False, "group colors must be distinct"
            return True, ""

        return False, "unknown meld kind"
