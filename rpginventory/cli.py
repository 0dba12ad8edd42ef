"""
Item admin tool.

Usage:
    # List item ids
    python run.py list

    # Show rendered lore of an item
    python run.py show sword_of_fire

    # Show raw stats of an item
    python run.py stats sword_of_fire --items path/to/items.json
"""

import argparse
import logging
import sys
from typing import Optional

from .config import Settings
from .core.item_service import ItemService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="RPG Inventory item tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--items",
        type=str,
        help="Items file (default: RPGINV_ITEMS_FILE or bundled data/items.json)",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("list", help="List item ids")

    show = subparsers.add_parser("show", help="Show rendered item lore")
    show.add_argument("item_id", help="Item id")

    stats = subparsers.add_parser("stats", help="Show item stats")
    stats.add_argument("item_id", help="Item id")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = Settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    service = ItemService.from_settings(settings)
    if not service.initialize(args.items or settings.ITEMS_FILE):
        print("Error: no items could be loaded", file=sys.stderr)
        return 1

    if args.command == "list":
        for item_id in service.list_items():
            print(item_id)
        return 0

    item = service.get_item(args.item_id)
    if item is None:
        print(f"Error: unknown item '{args.item_id}'", file=sys.stderr)
        return 1

    if args.command == "show":
        print(item.name)
        for line in service.render_lore(item):
            print(f"  {line}")
    else:
        for stat in item.stats:
            print(f"{stat.type.value:<12} {stat.string_value}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
