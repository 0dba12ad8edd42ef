"""Item Catalog.

Immutable snapshot of all custom items, plus the registry that swaps
snapshots on reload.
"""

import logging
import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from ..data.loaders.item_loader import ITEMS_FILE, ItemSource, load_items
from ..data.models.handle import ITEM_TAG, ItemStack
from ..data.models.item import CustomItem


logger = logging.getLogger(__name__)


class ItemCatalog:
    """
    Read-only mapping of item id to CustomItem.
    """

    def __init__(self, items: Optional[Mapping[str, CustomItem]] = None):
        self._items = MappingProxyType(dict(items or {}))

    @classmethod
    def load(cls, source: ItemSource = ITEMS_FILE) -> "ItemCatalog":
        """
        Build a catalog from a config source.

        Args:
            source: Path to a JSON file or an already parsed mapping.

        Raises:
            LoadError: If the source is missing or malformed.
        """
        return cls(load_items(source))

    def get(self, item_id: str) -> Optional[CustomItem]:
        return self._items.get(item_id)

    def list(self) -> list[str]:
        """All item ids in config order."""
        return list(self._items.keys())

    def is_custom_item(self, stack: Optional[ItemStack]) -> bool:
        """Check whether a stack carries a custom item tag."""
        return stack is not None and not stack.is_empty and stack.has_tag(ITEM_TAG)

    def resolve_from_tag(self, stack: Optional[ItemStack]) -> Optional[CustomItem]:
        """Look up the item whose id is embedded in the stack."""
        if not self.is_custom_item(stack):
            return None
        return self._items.get(stack.get_tag(ITEM_TAG))

    def items(self) -> Iterator[CustomItem]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items


class ItemRegistry:
    """
    Holds the current catalog snapshot.

    Readers take ``registry.catalog`` once per call and work on that
    snapshot; ``reload`` builds a complete new catalog before swapping it in.
    """

    def __init__(self, catalog: Optional[ItemCatalog] = None):
        self._catalog = catalog if catalog is not None else ItemCatalog()
        self._reload_lock = threading.Lock()

    @property
    def catalog(self) -> ItemCatalog:
        return self._catalog

    def reload(self, source: ItemSource = ITEMS_FILE) -> ItemCatalog:
        """
        Replace the catalog with one loaded from ``source``.

        The old snapshot stays installed if loading fails.

        Raises:
            LoadError: If the source is missing or malformed.
        """
        return self.install(ItemCatalog.load(source))

    def install(self, catalog: ItemCatalog) -> ItemCatalog:
        """Swap in an already built catalog."""
        with self._reload_lock:
            self._catalog = catalog
        logger.debug("Installed item catalog with %d item(s)", len(catalog))
        return catalog
