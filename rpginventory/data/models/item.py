"""Custom item and pet data models."""

from typing import Optional

from pydantic import BaseModel, Field

from .stat import ItemStat, StatType


class ClassedItem(BaseModel):
    """Base for anything gated by actor level and class."""
    level: Optional[int] = Field(default=None, description="Required actor level, None for no requirement")
    classes: Optional[tuple[str, ...]] = Field(default=None, description="Allowed actor classes, None for any")

    model_config = {"frozen": True}

    @property
    def classes_string(self) -> str:
        return ", ".join(self.classes) if self.classes else ""


class CustomItem(ClassedItem):
    """Item defined in the items config."""
    id: str = Field(..., description="Unique identifier")
    name: str = Field(..., description="Display name")
    texture: str = Field(default="STONE", description="Material of the display stack")
    unbreakable: bool = False
    drop: bool = Field(default=True, description="Item may be dropped")
    lore: Optional[tuple[str, ...]] = Field(default=None, description="Flavor text lines")
    left_click_caption: Optional[str] = None
    right_click_caption: Optional[str] = None
    stats_hidden: bool = False
    stats: tuple[ItemStat, ...] = Field(default_factory=tuple)

    @property
    def has_left_click_caption(self) -> bool:
        return bool(self.left_click_caption)

    @property
    def has_right_click_caption(self) -> bool:
        return bool(self.right_click_caption)

    def get_stat(self, stat_type: StatType) -> Optional[ItemStat]:
        for stat in self.stats:
            if stat.type == stat_type:
                return stat
        return None


class PetItem(ClassedItem):
    """Pet spawn item. Only the gating fields matter here."""
    id: str
    name: str = ""
