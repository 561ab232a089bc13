from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Iterable, Optional, Tuple

from .rules import MAX_NUMBER, Ruleset

WILDCARD_NAME = "Wildcard"


class Color(int, Enum):
    RED = 0
    BLUE = 1
    BLACK = 2
    YELLOW = 3

    def __str__(self) -> str:
        return self.name.capitalize()


@total_ordering
@dataclass(frozen=True, eq=True)
class Tile:
    """A numbered tile or a wildcard.

    Tiles compare by ``(number, color)``; every wildcard sorts after every
    numbered tile and all wildcards compare equal. Equal tiles are still
    distinct objects inside a hand, and search results keep those objects.
    """

    number: Optional[int] = None
    color: Optional[Color] = None

    def __post_init__(self) -> None:
        if self.number is None and self.color is None:
            return
        if self.number is None or self.color is None:
            raise ValueError("numbered tile needs both number and color")
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise ValueError(f"tile number must be an int, got {self.number!r}")
        if not 1 <= self.number <= MAX_NUMBER:
            raise ValueError(f"tile number must be within 1..{MAX_NUMBER}, got {self.number}")
        if not isinstance(self.color, Color):
            raise ValueError(f"tile color must be a Color, got {self.color!r}")

    @classmethod
    def numbered(cls, number: int, color: Color) -> "Tile":
        return cls(number, color)

    @classmethod
    def wildcard(cls) -> "Tile":
        return cls()

    def is_wildcard(self) -> bool:
        return self.number is None

    def effective_number(self) -> int:
        if self.number is None:
            raise ValueError("wildcard has no inherent number")
        return self.number

    def effective_color(self) -> Color:
        if self.color is None:
            raise ValueError("wildcard has no inherent color")
        return self.color

    def sort_key(self) -> Tuple[int, int, int]:
        if self.number is None or self.color is None:
            return (1, 0, 0)
        return (0, self.number, int(self.color))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        if self.is_wildcard():
            return WILDCARD_NAME
        return f"{self.number} {self.color!s}"


def iter_full_deck(ruleset: Ruleset | None = None) -> Iterable[Tile]:
    ruleset = ruleset or Ruleset()
    colors = list(Color)[: ruleset.colors]
    for _ in range(ruleset.copies_per_tiletype):
        for color in colors:
            for number in range(1, ruleset.values + 1):
                yield Tile.numbered(number, color)
    for _ in range(ruleset.num_wildcards):
        yield Tile.wildcard()
