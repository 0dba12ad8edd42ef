"""Shared fixtures for item engine tests."""

import pytest

from rpginventory.core import ItemCatalog, ItemRegistry, Language
from rpginventory.data.models import Actor, ItemStack, ITEM_TAG


CAPTIONS = {
    "error.item.level": "need level {0}",
    "error.item.class": "only for {0}",
    "item.unbreakable": "unbreakable",
    "item.nodrop": "no drop",
    "item.level": "level {0} text",
    "item.class": "classes: {0}",
    "item.left-click": "left: {0}",
    "item.right-click": "right: {0}",
    "item.hide": "hidden",
    "stat.damage": "damage {0}",
    "stat.armor": "armor {0}",
    "stat.speed": "speed {0}",
    "stat.crit_chance": "crit {0}",
}

ITEMS_CONFIG = {
    "items": {
        "sword_of_fire": {
            "name": "Sword of Fire",
            "texture": "DIAMOND_SWORD",
            "stats": {"DAMAGE": "+5"},
        },
        "heavy_axe": {
            "name": "Heavy Axe",
            "level": 20,
            "classes": ["Warrior"],
            "stats": {"DAMAGE": "+8-12", "SPEED": "-10%"},
        },
        "cursed_ring": {
            "name": "Cursed Ring",
            "stats": ["DAMAGE +10%", "ARMOR -2"],
        },
        "plate_chest": {
            "name": "Plate Chest",
            "stats": {"ARMOR": "+3-6"},
        },
        "plain_stick": {
            "name": "Plain Stick",
        },
    }
}


def tagged(item_id: str) -> ItemStack:
    """Stack carrying a custom item tag."""
    return ItemStack(texture="STONE").with_tag(ITEM_TAG, item_id)


@pytest.fixture
def language():
    return Language(CAPTIONS)


@pytest.fixture
def catalog():
    return ItemCatalog.load(ITEMS_CONFIG)


@pytest.fixture
def registry(catalog):
    return ItemRegistry(catalog)


@pytest.fixture
def actor():
    """Level 10 warrior with empty hands."""
    return Actor(name="Steve", level=10, class_name="Warrior")
