"""Item config loader."""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from ...errors import LoadError
from ...text import colored_line
from ..models.item import CustomItem
from ..models.stat import ItemStat, StatType


# Get the data directory path
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
ITEMS_FILE = DATA_DIR / "items.json"

ItemSource = Union[str, Path, Mapping]


def _parse_classes(raw: Any) -> Optional[tuple[str, ...]]:
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.split(",")
    classes = tuple(str(c).strip() for c in raw if str(c).strip())
    return classes or None


def _parse_stats(raw: Any) -> tuple[ItemStat, ...]:
    """Parse stats, keeping the last definition for each type.

    Accepts either a mapping ``{"DAMAGE": "+5"}`` or a list of
    ``"DAMAGE +5"`` strings.
    """
    if raw is None:
        return ()

    if isinstance(raw, Mapping):
        entries = [(str(k), str(v)) for k, v in raw.items()]
    else:
        entries = []
        for line in raw:
            stat_type, _, value = str(line).strip().partition(" ")
            entries.append((stat_type, value))

    by_type: dict[StatType, ItemStat] = {}
    for stat_type, value in entries:
        stat = ItemStat.parse(stat_type, value)
        by_type[stat.type] = stat
    return tuple(by_type.values())


def _parse_item(item_id: str, item_data: Mapping) -> CustomItem:
    """Parse one item from its config section.

    Args:
        item_id: Key of the section, used as the item identifier.
        item_data: Section contents.

    Returns:
        CustomItem object.
    """
    lore = item_data.get("lore")
    return CustomItem(
        id=item_id,
        name=colored_line(str(item_data.get("name", item_id))),
        texture=item_data.get("texture", "STONE"),
        level=item_data.get("level"),
        classes=_parse_classes(item_data.get("classes")),
        unbreakable=item_data.get("unbreakable", False),
        drop=item_data.get("drop", True),
        lore=tuple(colored_line(str(line)) for line in lore) if lore else None,
        left_click_caption=item_data.get("left-click"),
        right_click_caption=item_data.get("right-click"),
        stats_hidden=item_data.get("hide-stats", False),
        stats=_parse_stats(item_data.get("stats")),
    )


def read_config(source: ItemSource) -> Mapping:
    """Return the config tree, reading it from disk when given a path."""
    if isinstance(source, Mapping):
        return source

    path = Path(source)
    if not path.exists():
        raise LoadError(f"Items file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        raise LoadError(f"Cannot read items file {path}: {e}") from e


def load_items(source: ItemSource = ITEMS_FILE) -> dict[str, CustomItem]:
    """Load all custom items from a config tree.

    Args:
        source: Path to a JSON file or an already parsed mapping.

    Returns:
        Dict of item id to CustomItem, in config order.

    Raises:
        LoadError: If the source is missing or any item is malformed.
    """
    data = read_config(source)
    section = data.get("items") if isinstance(data, Mapping) else None
    if not isinstance(section, Mapping):
        raise LoadError("Items config has no 'items' section")

    items: dict[str, CustomItem] = {}
    for item_id, item_data in section.items():
        if not isinstance(item_data, Mapping):
            raise LoadError(f"Item '{item_id}' is not a section")
        try:
            items[item_id] = _parse_item(item_id, item_data)
        except (ValidationError, ValueError, TypeError) as e:
            raise LoadError(f"Item '{item_id}' is malformed: {e}") from e

    return items
