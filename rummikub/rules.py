from dataclasses import dataclass

MAX_NUMBER = 13
MAX_COLORS = 4


@dataclass(frozen=True)
class Ruleset:
    colors: int = 4
    values: int = 13
    copies_per_tiletype: int = 2
    num_wildcards: int = 2
    hand_size: int = 14
    min_set_size: int = 3
    max_group_size: int = 4

    def __post_init__(self) -> None:
        if not 1 <= self.values <= MAX_NUMBER:
            raise ValueError(f"values must be within 1..{MAX_NUMBER}")
        if not 1 <= self.colors <= MAX_COLORS:
            raise ValueError(f"colors must be within 1..{MAX_COLORS}")
        if self.copies_per_tiletype < 0 or self.num_wildcards < 0 or self.hand_size < 0:
            raise ValueError("tile counts must be non-negative")
        if self.min_set_size < 2:
            raise ValueError("min_set_size must be at least 2")
        if self.max_group_size < self.min_set_size:
            raise ValueError("max_group_size must not be below min_set_size")

    def deck_size(self) -> int:
        normal_tiles = self.colors * self.values * self.copies_per_tiletype
        return normal_tiles + self.num_wildcards
