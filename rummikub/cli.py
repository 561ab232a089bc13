from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .deck import deal_hand
from .rules import Ruleset
from .search import valid_sets
from .tiles import WILDCARD_NAME, Color, Tile

logger = logging.getLogger(__name__)


def parse_tile(text: str) -> Tile:
    """Parse ``"7 Red"`` or ``"Wildcard"`` (case-insensitive)."""
    parts = text.split()
    if len(parts) == 1 and parts[0].lower() == WILDCARD_NAME.lower():
        return Tile.wildcard()
    if len(parts) != 2:
        raise ValueError(f"cannot parse tile {text!r}")
    number_text, color_text = parts
    try:
        number = int(number_text)
        color = Color[color_text.upper()]
    except (ValueError, KeyError):
        raise ValueError(f"cannot parse tile {text!r}") from None
    return Tile.numbered(number, color)


def _hand_argument(text: str) -> List[Tile]:
    try:
        return [parse_tile(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _print_tiles(title: str, tiles: Sequence[Tile]) -> None:
    print(title)
    for tile in tiles:
        print(f" - {tile}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="List every valid Rummikub set in a hand.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible deck order.")
    parser.add_argument("--hand-size", type=int, default=Ruleset().hand_size, help="Number of tiles to deal.")
    parser.add_argument(
        "--tiles",
        type=_hand_argument,
        default=None,
        help='Comma-separated hand to search instead of dealing, e.g. "1 Red,2 Red,Wildcard".',
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log search details.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        rules = Ruleset(hand_size=args.hand_size)
    except ValueError as exc:
        parser.error(str(exc))

    if args.tiles is not None:
        hand = args.tiles
    else:
        hand = deal_hand(ruleset=rules, rng_seed=args.seed)
        logger.debug("dealt %d tiles with seed %s", len(hand), args.seed)

    _print_tiles("Your tray:", hand)
    _print_tiles("Your tray (sorted):", sorted(hand))

    print("Valid sets:")
    sets = valid_sets(hand, rules)
    for tile_set in sets:
        print(f" -> {tile_set}")
    print(f"{len(sets)} valid sets")


if __name__ == "__main__":
    main()
