# Data Models
from .stat import ItemStat, StatType, OperationType
from .item import ClassedItem, CustomItem, PetItem
from .handle import ItemStack, AIR, ITEM_TAG, PET_TAG
from .actor import Actor
from .modifier import Modifier

__all__ = [
    "ItemStat",
    "StatType",
    "OperationType",
    "ClassedItem",
    "CustomItem",
    "PetItem",
    "ItemStack",
    "AIR",
    "ITEM_TAG",
    "PET_TAG",
    "Actor",
    "Modifier",
]
