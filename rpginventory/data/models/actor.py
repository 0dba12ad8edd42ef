"""Actor snapshot data model."""

from dataclasses import dataclass, field
from typing import Optional

from .handle import ItemStack


@dataclass
class Actor:
    """
    Snapshot of the actor whose items are evaluated.

    Filled by the host from the live player; nothing here mutates it.
    """

    name: str
    level: int = 0
    class_name: Optional[str] = None
    armor: list[Optional[ItemStack]] = field(default_factory=list)
    main_hand: Optional[ItemStack] = None
    off_hand: Optional[ItemStack] = None
    passive_items: list[ItemStack] = field(default_factory=list)  # pre-filtered by the host
