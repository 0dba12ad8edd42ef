"""Opaque item handles passed in by the game server."""

from dataclasses import dataclass, field, replace
from typing import Optional

ITEM_TAG = "rpginv.item"
PET_TAG = "rpginv.pet"


@dataclass(frozen=True)
class ItemStack:
    """A server-side item with its embedded tags."""

    texture: str = "AIR"
    amount: int = 1
    name: Optional[str] = None
    lore: tuple[str, ...] = ()
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return self.texture == "AIR" or self.amount <= 0

    def get_tag(self, key: str) -> Optional[str]:
        return self.tags.get(key)

    def has_tag(self, key: str) -> bool:
        return key in self.tags

    def with_tag(self, key: str, value: str) -> "ItemStack":
        """Return a copy carrying the extra tag."""
        return replace(self, tags={**self.tags, key: value})


AIR = ItemStack()
